from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

LOCATOR_COLUMNS: tuple[str, ...] = (
    "ID",
    "Name",
    "TagName",
    "ClassName",
    "XPath",
    "CSS Selector",
    "LinkText",
    "PartialLinkText",
)


@dataclass(slots=True)
class PageElement:
    tag: str
    id: str | None = None
    class_attr: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[PageElement] = field(default_factory=list)

    def attr(self, key: str) -> str | None:
        value = self.attributes.get(key)
        if value is None:
            return None
        return str(value)

    @property
    def name(self) -> str | None:
        return self.attr("name")

    @property
    def class_tokens(self) -> list[str]:
        return (self.class_attr or "").split()

    def iter_tree(self) -> Iterator[PageElement]:
        """Yield this element and every descendant, depth-first in document order."""
        stack: list[PageElement] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


@dataclass(slots=True)
class DomTree:
    roots: list[PageElement] = field(default_factory=list)

    def iter_elements(self) -> Iterator[PageElement]:
        for root in self.roots:
            yield from root.iter_tree()


@dataclass(frozen=True, slots=True)
class LocatorRecord:
    id: str
    name: str
    tag_name: str
    class_name: str
    xpath: str
    css_selector: str
    link_text: str = ""
    partial_link_text: str = ""

    def as_row(self) -> tuple[str, ...]:
        return (
            self.id,
            self.name,
            self.tag_name,
            self.class_name,
            self.xpath,
            self.css_selector,
            self.link_text,
            self.partial_link_text,
        )
