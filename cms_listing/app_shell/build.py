"""
Listing build pipeline.

Fetcher -> Resolver -> Projector -> Binder -> Emitter -> Publisher.

Fetch and I/O errors propagate and abort the build before anything is
written. A role without a collection is logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from cms_listing.adapters.fs import OutputStore, read_document
from cms_listing.adapters.html import SoupDocument
from cms_listing.components import roles
from cms_listing.components.binding import (
    DEFAULT_FRAGMENT_ATTRIBUTES,
    BindResult,
    attach_script,
    bind,
    render_fragments,
    update_counts,
)
from cms_listing.components.filtering import emit_filter_script
from cms_listing.components.projection import (
    ProjectedPost,
    ProjectedTaxonomyEntry,
    find_markup_hazards,
    project_post,
    project_taxonomy_entry,
)
from cms_listing.components.roles import ResolveRolesInput, Role, RoleAssignment
from cms_listing.core.entities import Item
from cms_listing.core.ports.cms import CmsPort
from cms_listing.core.ports.document import DocumentTreePort

from .config import BuildSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    """Summary of a finished build."""

    assignment: RoleAssignment
    counts: Mapping[Role, int]
    bind_results: tuple[BindResult, ...] = field(default_factory=tuple)
    output_path: Path | None = None
    assets: tuple[Path, ...] = field(default_factory=tuple)


def fetch_role_items(
    cms: CmsPort,
    assignment: RoleAssignment,
    concurrent: bool = False,
) -> dict[Role, list[Item]]:
    """Fetch items for every assigned role; unassigned roles get an empty list."""
    targets = {role: c for role in Role if (c := assignment.get(role)) is not None}

    if concurrent and len(targets) > 1:
        with ThreadPoolExecutor(max_workers=len(targets)) as pool:
            futures = {role: pool.submit(cms.list_items, c.id) for role, c in targets.items()}
            fetched = {role: future.result() for role, future in futures.items()}
    else:
        fetched = {role: cms.list_items(c.id) for role, c in targets.items()}

    return {role: fetched.get(role, []) for role in Role}


def _project(role: Role, items: list[Item]) -> list[ProjectedPost | ProjectedTaxonomyEntry]:
    if role is Role.POSTS:
        return [project_post(item) for item in items]
    return [project_taxonomy_entry(item) for item in items]


def transform_document(
    document: DocumentTreePort,
    items_by_role: Mapping[Role, list[Item]],
    settings: BuildSettings,
) -> tuple[BindResult, ...]:
    """Bind every role, update counts and attach the filter script."""
    selectors = settings.selectors.to_document_selectors()
    results: list[BindResult] = []

    for role in Role:
        items = items_by_role.get(role, [])
        if not items:
            continue
        records = _project(role, items)
        for record in records:
            hazards = find_markup_hazards(record)
            if hazards:
                logger.warning(
                    f"{role.value} item {record.id}: {', '.join(hazards)} "
                    "contain markup characters and are inserted unescaped"
                )
        fragments = render_fragments(role, records, DEFAULT_FRAGMENT_ATTRIBUTES)
        results.append(bind(document, role, fragments, selectors))

    posts = next((r for r in results if r.role is Role.POSTS), None)
    update_counts(document, posts.rendered if posts else 0, selectors)

    script = emit_filter_script(
        selectors.posts_list,
        DEFAULT_FRAGMENT_ATTRIBUTES,
        settings.filter.to_filter_selectors(selectors.results_count),
        settings.filter.scroll_delay_ms,
    )
    attach_script(document, script)
    return tuple(results)


def run_build(
    settings: BuildSettings,
    cms: CmsPort,
    root: Path | str = ".",
) -> BuildReport:
    """
    Run a full build.

    Args:
        settings: Validated build settings.
        cms: CMS port used for every fetch.
        root: Directory the input path and asset directories are relative to.

    Returns:
        BuildReport describing the written output.
    """
    root = Path(root)
    logger.info("Starting build process...")

    document = SoupDocument(read_document(root / settings.input_path))

    collections = cms.list_collections()
    logger.info(f"Collections found: {', '.join(c.display_name for c in collections)}")

    resolved = roles.run(ResolveRolesInput(collections=tuple(collections)))
    for role in resolved.missing_roles:
        logger.info(f"No collection matches the {role.value} role; skipping")

    items_by_role = fetch_role_items(cms, resolved.assignment, settings.concurrent_fetches)
    for role in Role:
        logger.info(f"Fetched {len(items_by_role[role])} {role.value}")

    bind_results = transform_document(document, items_by_role, settings)

    store = OutputStore(root / settings.output_dir)
    assets = store.publish_assets(settings.asset_dirs, root)
    output_path = store.write_text(settings.output_name, document.serialize())

    logger.info(f"Build completed successfully: {output_path}")

    return BuildReport(
        assignment=resolved.assignment,
        counts={role: len(items) for role, items in items_by_role.items()},
        bind_results=bind_results,
        output_path=output_path,
        assets=tuple(assets),
    )
