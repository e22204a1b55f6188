from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import DomTree, PageElement


@dataclass(slots=True)
class DomSnapshot:
    node_count: int
    tag_histogram: dict[str, int] = field(default_factory=dict)


def parse_html(html: str) -> DomTree:
    """Parse markup into a tree of :class:`PageElement` in source order.

    ``html.parser`` keeps the document as written (no synthesized ``html``/``body``),
    and ``multi_valued_attributes=None`` keeps ``class`` as the raw attribute string.
    """
    soup = BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)
    tree = DomTree()
    pending: list[tuple[Tag, list[PageElement]]] = [
        (child, tree.roots) for child in reversed(list(_child_tags(soup)))
    ]
    while pending:
        tag, siblings = pending.pop()
        element = _to_page_element(tag)
        siblings.append(element)
        for child in reversed(list(_child_tags(tag))):
            pending.append((child, element.children))
    return tree


def _child_tags(node: Tag):
    for child in node.children:
        if isinstance(child, Tag):
            yield child


def _to_page_element(tag: Tag) -> PageElement:
    attributes = {str(key): _attr_text(value) for key, value in tag.attrs.items()}
    return PageElement(
        tag=(tag.name or "").lower() or "unknown",
        id=attributes.get("id"),
        class_attr=attributes.get("class"),
        attributes=attributes,
    )


def _attr_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def extract_dom_snapshot(tree: DomTree) -> DomSnapshot:
    histogram = Counter(element.tag for element in tree.iter_elements())
    return DomSnapshot(
        node_count=sum(histogram.values()),
        tag_histogram=dict(histogram),
    )
