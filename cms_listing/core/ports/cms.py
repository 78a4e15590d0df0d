"""
CMS Adapter Interface.

Protocol-based interface for reading collections and their items from a
headless CMS. The Webflow adapter is the only production implementation;
tests use in-memory fakes.

Key requirements:
- Read-only; no call mutates CMS state
- Any non-success response raises FetchError (no retries)
- Collections are returned in API order (role resolution depends on it)
"""

from __future__ import annotations

from typing import Protocol

from cms_listing.core.entities import Collection, Item


class CmsPort(Protocol):
    """Port for CMS collection access."""

    def list_collections(self) -> list[Collection]:
        """List the site's collections in API order."""
        ...

    def list_items(self, collection_id: str) -> list[Item]:
        """List every item of a collection in API order."""
        ...
