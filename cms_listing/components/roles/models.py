"""
Roles component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cms_listing.core.entities import Collection


class Role(Enum):
    """Semantic role a collection can be assigned to."""

    POSTS = "posts"
    GRADES = "grades"
    TOPICS = "topics"


@dataclass(frozen=True)
class RoleRule:
    """
    Keyword rule for one role.

    A collection matches when its display name contains any keyword
    (case-insensitive) and it is not the collection already assigned to
    any role in ``distinct_from``.
    """

    role: Role
    keywords: tuple[str, ...]
    distinct_from: tuple[Role, ...] = ()


@dataclass(frozen=True)
class RoleAssignment:
    """At most one collection per role."""

    posts: Collection | None = None
    grades: Collection | None = None
    topics: Collection | None = None

    def get(self, role: Role) -> Collection | None:
        return getattr(self, role.value)

    def as_dict(self) -> dict[str, str | None]:
        """Role name to collection display name, for logging."""
        return {
            role.value: (c.display_name if (c := self.get(role)) else None)
            for role in Role
        }


# --- Input Models ---


@dataclass(frozen=True)
class ResolveRolesInput:
    """Input for resolving roles over a collection list."""

    collections: tuple[Collection, ...]


# --- Output Models ---


@dataclass(frozen=True)
class ResolveRolesOutput:
    """Resolved assignment plus the roles left without a collection."""

    assignment: RoleAssignment
    missing_roles: tuple[Role, ...] = field(default_factory=tuple)
    success: bool = True
