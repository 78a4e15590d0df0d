"""
Roles component - Collection role resolution.
"""

from ._impl import DEFAULT_ROLE_RULES, first_match, name_matches
from .component import resolve_roles, run
from .models import (
    ResolveRolesInput,
    ResolveRolesOutput,
    Role,
    RoleAssignment,
    RoleRule,
)

__all__ = [
    # Entry points
    "resolve_roles",
    "run",
    # Models
    "ResolveRolesInput",
    "ResolveRolesOutput",
    "Role",
    "RoleAssignment",
    "RoleRule",
    # Helpers
    "DEFAULT_ROLE_RULES",
    "first_match",
    "name_matches",
]
