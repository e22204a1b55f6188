from __future__ import annotations

from typing import Iterable

from .models import DomTree, LocatorRecord, PageElement


def class_name_string(element: PageElement) -> str:
    return (element.class_attr or "").strip()


def derive_xpath(element: PageElement) -> str:
    """Build ``//tag[@id='..'][@name='..']``.

    Values are embedded literally; ids or names holding a single quote produce
    an expression that will not evaluate. Sibling position and ancestors are
    ignored, so distinct elements may share one xpath.
    """
    xpath = f"//{element.tag}"
    if element.id:
        xpath += f"[@id='{element.id}']"
    name = element.name
    if name:
        xpath += f"[@name='{name}']"
    return xpath


def derive_css_selector(element: PageElement) -> str:
    selector = element.tag
    if element.id:
        selector += f"#{element.id}"
    tokens = element.class_tokens
    if tokens:
        selector += "." + ".".join(tokens)
    return selector


def extract_locators(tree: DomTree | PageElement) -> list[LocatorRecord]:
    """Walk every element in document order and emit id, name and generic rows.

    Generic rows are deduplicated by derived xpath within this call only; id and
    name rows are emitted on every visit.
    """
    records: list[LocatorRecord] = []
    seen_xpaths: set[str] = set()
    for element in _iter_elements(tree):
        records.extend(_records_for_element(element, seen_xpaths))
    return records


def _iter_elements(tree: DomTree | PageElement) -> Iterable[PageElement]:
    if isinstance(tree, PageElement):
        return tree.iter_tree()
    return tree.iter_elements()


def _records_for_element(element: PageElement, seen_xpaths: set[str]) -> list[LocatorRecord]:
    element_id = element.id or ""
    name = element.name or ""
    tag = element.tag
    class_name = class_name_string(element)
    xpath = derive_xpath(element)
    css_selector = derive_css_selector(element)

    rows: list[LocatorRecord] = []
    if element_id:
        rows.append(LocatorRecord(element_id, "", tag, class_name, xpath, css_selector))
    if name:
        rows.append(LocatorRecord("", name, tag, class_name, xpath, css_selector))
    if xpath not in seen_xpaths:
        rows.append(LocatorRecord("", "", tag, class_name, xpath, css_selector))
        seen_xpaths.add(xpath)
    return rows
