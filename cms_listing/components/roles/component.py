"""
Roles component - Assign CMS collections to the Posts, Grades and Topics roles.

Collections carry no stable role marker, so assignment is a best-effort
keyword heuristic over display names.

Invariants:
- At most one collection per role
- Same collection list always yields the same assignment
- First match in API order wins (the list is never sorted)
- The Posts collection is never also assigned to Topics
"""

from __future__ import annotations

from collections.abc import Sequence

from cms_listing.core.entities import Collection

from ._impl import DEFAULT_ROLE_RULES, first_match
from .models import (
    ResolveRolesInput,
    ResolveRolesOutput,
    Role,
    RoleAssignment,
    RoleRule,
)


def resolve_roles(
    collections: Sequence[Collection],
    rules: Sequence[RoleRule] = DEFAULT_ROLE_RULES,
) -> RoleAssignment:
    """
    Resolve role assignment for a collection list.

    Args:
        collections: Collections in API order.
        rules: Keyword rules, evaluated in order.

    Returns:
        RoleAssignment; unmatched roles are None.
    """
    assigned: dict[Role, Collection | None] = {}
    for rule in rules:
        assigned[rule.role] = first_match(collections, rule, assigned)

    return RoleAssignment(
        posts=assigned.get(Role.POSTS),
        grades=assigned.get(Role.GRADES),
        topics=assigned.get(Role.TOPICS),
    )


# --- Component Entry Points ---


def run(
    inp: ResolveRolesInput,
    *,
    rules: Sequence[RoleRule] = DEFAULT_ROLE_RULES,
) -> ResolveRolesOutput:
    """
    Main entry point for the roles component.

    A role without a match is reported in ``missing_roles``; downstream
    steps skip it rather than fail.
    """
    assignment = resolve_roles(inp.collections, rules)
    missing = tuple(role for role in Role if assignment.get(role) is None)

    return ResolveRolesOutput(
        assignment=assignment,
        missing_roles=missing,
        success=True,
    )
