"""
Projection component - Normalize raw CMS items into fixed-shape views.

Every projected field has a defined default, so templates never see a
missing value:
- slug -> None (rendered as the "#" anchor target)
- image -> PLACEHOLDER_IMAGE_URL when the image or its url is absent
- description -> summary -> ""
- title, topics, grade -> ""

Field values are NOT escaped. They are inserted into markup verbatim;
find_markup_hazards() reports values that could break or inject markup.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from cms_listing.core.entities import Item

from .models import (
    DEFAULT_POST_FIELDS,
    PLACEHOLDER_IMAGE_URL,
    PostFields,
    ProjectedPost,
    ProjectedTaxonomyEntry,
)

MARKUP_CHARACTERS = frozenset('<>"')

_WHITESPACE = re.compile(r"\s+")


def field_text(value: Any) -> str:
    """Coerce a raw field value to display text."""
    if value is None or value is False:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return field_text(value.get("name"))
    if isinstance(value, list | tuple):
        return ",".join(field_text(v) for v in value)
    return str(value)


def filter_text(value: str) -> str:
    """Lowercase, attribute-safe form used for filter matching."""
    text = _WHITESPACE.sub(" ", value.replace('"', "")).strip()
    return text.lower()


def _image_url(value: Any) -> str:
    if isinstance(value, Mapping):
        url = value.get("url")
        if url:
            return str(url)
    return PLACEHOLDER_IMAGE_URL


def project_post(
    item: Item,
    fields: PostFields = DEFAULT_POST_FIELDS,
) -> ProjectedPost:
    """Project a raw item into a ProjectedPost."""
    slug = field_text(item.get(fields.slug)) or None
    description = field_text(item.get(fields.description)) or field_text(
        item.get(fields.summary)
    )

    return ProjectedPost(
        id=item.id,
        slug=slug,
        image_url=_image_url(item.get(fields.image)),
        title=field_text(item.get(fields.title)),
        topics_label=field_text(item.get(fields.topics)),
        grade_label=field_text(item.get(fields.grade)),
        description_text=description,
    )


def project_taxonomy_entry(item: Item) -> ProjectedTaxonomyEntry:
    """Project a grade or topic item."""
    return ProjectedTaxonomyEntry(id=item.id, name=field_text(item.get("name")))


def find_markup_hazards(record: ProjectedPost | ProjectedTaxonomyEntry) -> list[str]:
    """
    Names of fields whose value contains markup-significant characters.

    These values are still interpolated verbatim; callers log them.
    """
    if isinstance(record, ProjectedTaxonomyEntry):
        candidates = {"name": record.name}
    else:
        candidates = {
            "slug": record.slug or "",
            "image_url": record.image_url,
            "title": record.title,
            "topics_label": record.topics_label,
            "grade_label": record.grade_label,
            "description_text": record.description_text,
        }
    return [
        name for name, value in candidates.items() if MARKUP_CHARACTERS.intersection(value)
    ]
