"""
BeautifulSoup document adapter.

Implements DocumentTreePort over bs4 with the stdlib "html.parser"
backend. CSS selection goes through soupsieve (bundled with bs4).
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


class SoupDocument:
    """Parsed HTML document supporting the binder's mutations."""

    def __init__(self, markup: str) -> None:
        self._soup = BeautifulSoup(markup, "html.parser")

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def find(self, selector: str) -> list[Tag]:
        return list(self._soup.select(selector))

    def clear_children(self, node: Tag) -> None:
        node.clear()

    def append_fragment(self, node: Tag, markup: str) -> None:
        fragment = BeautifulSoup(markup, "html.parser")
        for child in list(fragment.contents):
            node.append(child.extract())

    def remove_node(self, node: Tag) -> None:
        node.decompose()

    def siblings(self, node: Tag, selector: str) -> list[Tag]:
        parent = node.parent
        if parent is None:
            return []
        return [
            child
            for child in parent.children
            if isinstance(child, Tag) and child is not node and child.css.match(selector)
        ]

    def set_text(self, node: Tag, text: str) -> None:
        node.string = text

    def body(self) -> Tag:
        return self._soup.body or self._soup

    def serialize(self) -> str:
        return str(self._soup)
