"""
CMS entities.

Collections and items as returned by the Webflow Data API (v2). Only the
fields the listing build reads are modelled; everything else in an item is
kept in ``field_data`` untouched.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Collection:
    """
    A CMS collection.

    ``display_name`` is human-authored and is the only signal available
    for role assignment. It is neither unique nor stable.
    """

    id: str
    display_name: str
    slug: str | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Collection:
        return cls(
            id=str(data["id"]),
            display_name=str(data.get("displayName") or ""),
            slug=data.get("slug"),
        )


@dataclass(frozen=True)
class Item:
    """A CMS collection item with its heterogeneous field bag."""

    id: str
    field_data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Item:
        return cls(
            id=str(data["id"]),
            field_data=dict(data.get("fieldData") or {}),
        )

    def get(self, name: str, default: Any = None) -> Any:
        """Get a raw field value."""
        return self.field_data.get(name, default)
