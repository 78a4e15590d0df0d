"""
Document Tree Interface.

Minimal capability interface over a parsed HTML document. The binder only
needs these operations, so it stays independent of any parsing library.

Nodes are opaque handles owned by the implementation.
"""

from __future__ import annotations

from typing import Any, Protocol


class DocumentTreePort(Protocol):
    """Port for mutating a loaded HTML document."""

    def find(self, selector: str) -> list[Any]:
        """Return all nodes matching a CSS selector, in document order."""
        ...

    def clear_children(self, node: Any) -> None:
        """Remove every child of a node."""
        ...

    def append_fragment(self, node: Any, markup: str) -> None:
        """Parse markup and append the resulting nodes to a node."""
        ...

    def remove_node(self, node: Any) -> None:
        """Detach a node from the tree."""
        ...

    def siblings(self, node: Any, selector: str) -> list[Any]:
        """Return the node's element siblings matching a CSS selector."""
        ...

    def set_text(self, node: Any, text: str) -> None:
        """Replace a node's content with plain text."""
        ...

    def body(self) -> Any:
        """Return the body node (or the document root if there is none)."""
        ...

    def serialize(self) -> str:
        """Serialize the document back to HTML."""
        ...
