"""
Binding component - Inject rendered fragments into the loaded document.

Key behaviors:
- One bind per role; fragments appended in item order
- Existing container children removed first, so re-binding is idempotent
- Sibling empty-state placeholders removed once items exist
- Zero fragments leave the container and its placeholder untouched
- Count nodes always set to the Posts count, even when zero
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cms_listing.components.projection import ProjectedPost, ProjectedTaxonomyEntry
from cms_listing.components.roles import Role
from cms_listing.core.ports.document import DocumentTreePort

from ._impl import render_grade_option, render_post, render_topic_option
from .models import (
    DEFAULT_FRAGMENT_ATTRIBUTES,
    DEFAULT_SELECTORS,
    BindResult,
    DocumentSelectors,
    FragmentAttributes,
    RenderedFragment,
)

logger = logging.getLogger(__name__)

FILTER_SCRIPT_ID = "cms-listing-filter"


def render_fragments(
    role: Role,
    records: Sequence[ProjectedPost | ProjectedTaxonomyEntry],
    attributes: FragmentAttributes = DEFAULT_FRAGMENT_ATTRIBUTES,
) -> tuple[RenderedFragment, ...]:
    """Render one fragment per projected record, preserving order."""
    if role is Role.POSTS:
        return tuple(render_post(post, attributes) for post in records)  # type: ignore[arg-type]
    if role is Role.GRADES:
        return tuple(render_grade_option(entry) for entry in records)  # type: ignore[arg-type]
    return tuple(render_topic_option(entry) for entry in records)  # type: ignore[arg-type]


def bind(
    document: DocumentTreePort,
    role: Role,
    fragments: Sequence[RenderedFragment],
    selectors: DocumentSelectors = DEFAULT_SELECTORS,
) -> BindResult:
    """
    Replace a role container's children with the given fragments.

    Args:
        document: Loaded document tree.
        role: Role whose container is targeted.
        fragments: Rendered fragments in item order.
        selectors: Structural selectors of the document.

    Returns:
        BindResult describing what changed.
    """
    if not fragments:
        return BindResult(role=role, containers=0, fragments=0)

    selector = selectors.container_for(role)
    containers = document.find(selector)
    if not containers:
        logger.warning(f"No container matches {selector!r}; {role.value} not bound")
        return BindResult(role=role, containers=0, fragments=len(fragments))

    for container in containers:
        document.clear_children(container)
        for fragment in fragments:
            document.append_fragment(container, fragment.markup)

    removed = 0
    for container in containers:
        for placeholder in document.siblings(container, selectors.empty_state):
            document.remove_node(placeholder)
            removed += 1

    return BindResult(
        role=role,
        containers=len(containers),
        fragments=len(fragments),
        placeholders_removed=removed,
    )


def update_counts(
    document: DocumentTreePort,
    count: int,
    selectors: DocumentSelectors = DEFAULT_SELECTORS,
) -> int:
    """Set both count nodes to ``count``. Returns the number of nodes written."""
    written = 0
    for selector in (selectors.items_count, selectors.results_count):
        for node in document.find(selector):
            document.set_text(node, str(count))
            written += 1
    return written


def attach_script(
    document: DocumentTreePort,
    script_text: str,
    script_id: str = FILTER_SCRIPT_ID,
) -> None:
    """Append the script to the body, replacing a previous copy with the same id."""
    for existing in document.find(f'script[id="{script_id}"]'):
        document.remove_node(existing)
    document.append_fragment(document.body(), f'<script id="{script_id}">{script_text}</script>')
