"""
Projection component - Record normalization with field defaults.
"""

from .component import (
    field_text,
    filter_text,
    find_markup_hazards,
    project_post,
    project_taxonomy_entry,
)
from .models import (
    DEFAULT_POST_FIELDS,
    PLACEHOLDER_IMAGE_URL,
    PostFields,
    ProjectedPost,
    ProjectedTaxonomyEntry,
)

__all__ = [
    # Entry points
    "project_post",
    "project_taxonomy_entry",
    # Helpers
    "field_text",
    "filter_text",
    "find_markup_hazards",
    # Models
    "DEFAULT_POST_FIELDS",
    "PLACEHOLDER_IMAGE_URL",
    "PostFields",
    "ProjectedPost",
    "ProjectedTaxonomyEntry",
]
