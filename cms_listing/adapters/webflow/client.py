"""
Webflow Data API adapter.

Implements CmsPort over the Webflow v2 REST API using httpx.

Key behaviors:
- Bearer token plus fixed accept-version header on every request
- Any non-2xx response raises FetchError with the status text
- Transport failures raise FetchError as well
- No retries
- Item listing follows offset pagination when the response reports a total
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from cms_listing.core.entities import Collection, Item
from cms_listing.core.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://api.webflow.com/v2"
DEFAULT_API_VERSION = "1.0.0"
DEFAULT_TIMEOUT_SECONDS = 30.0


class WebflowClient:
    """Read-only Webflow collections client."""

    def __init__(
        self,
        api_token: str,
        site_id: str,
        base_url: str = DEFAULT_API_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.site_id = site_id
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {api_token}",
                "accept-version": api_version,
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self) -> WebflowClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_json(
        self,
        path: str,
        resource: str,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as e:
            raise FetchError(resource, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(resource, response.reason_phrase, response.status_code)

        logger.debug(f"GET {response.request.url} -> {response.status_code}")
        data: dict[str, Any] = response.json()
        return data

    def list_collections(self) -> list[Collection]:
        """List the site's collections in API order."""
        data = self._get_json(f"/sites/{self.site_id}/collections", "collections")
        return [Collection.from_api(c) for c in data.get("collections") or []]

    def list_items(self, collection_id: str) -> list[Item]:
        """List every item of a collection, following pagination."""
        path = f"/collections/{collection_id}/items"
        data = self._get_json(path, "items")
        raw_items: list[dict[str, Any]] = list(data.get("items") or [])

        pagination = data.get("pagination") or {}
        total = pagination.get("total")
        limit = pagination.get("limit") or len(raw_items)
        while total is not None and limit and len(raw_items) < total:
            page = self._get_json(
                path, "items", params={"offset": len(raw_items), "limit": limit}
            )
            page_items = page.get("items") or []
            if not page_items:
                break
            raw_items.extend(page_items)

        return [Item.from_api(i) for i in raw_items]
