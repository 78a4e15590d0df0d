"""
Keyword matching for role resolution.

Pure functions over display names; no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from cms_listing.core.entities import Collection

from .models import Role, RoleRule

# Rule order matters: Topics checks against the Posts assignment.
DEFAULT_ROLE_RULES: tuple[RoleRule, ...] = (
    RoleRule(role=Role.POSTS, keywords=("blog", "post")),
    RoleRule(role=Role.GRADES, keywords=("grade",)),
    RoleRule(role=Role.TOPICS, keywords=("topic",), distinct_from=(Role.POSTS,)),
)


def name_matches(display_name: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match against any keyword."""
    name = display_name.lower()
    return any(keyword.lower() in name for keyword in keywords)


def first_match(
    collections: Iterable[Collection],
    rule: RoleRule,
    assigned: Mapping[Role, Collection | None],
) -> Collection | None:
    """First collection in input order satisfying the rule, if any."""
    excluded_ids = {
        c.id for role in rule.distinct_from if (c := assigned.get(role)) is not None
    }
    for collection in collections:
        if collection.id in excluded_ids:
            continue
        if name_matches(collection.display_name, rule.keywords):
            return collection
    return None
