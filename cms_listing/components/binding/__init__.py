"""
Binding component - Template binding into the document tree.
"""

from ._impl import post_filter_attributes, render_grade_option, render_post, render_topic_option
from .component import (
    FILTER_SCRIPT_ID,
    attach_script,
    bind,
    render_fragments,
    update_counts,
)
from .models import (
    DEFAULT_FRAGMENT_ATTRIBUTES,
    DEFAULT_SELECTORS,
    BindResult,
    DocumentSelectors,
    FragmentAttributes,
    RenderedFragment,
)

__all__ = [
    # Entry points
    "attach_script",
    "bind",
    "render_fragments",
    "update_counts",
    "FILTER_SCRIPT_ID",
    # Models
    "BindResult",
    "DEFAULT_FRAGMENT_ATTRIBUTES",
    "DEFAULT_SELECTORS",
    "DocumentSelectors",
    "FragmentAttributes",
    "RenderedFragment",
    # Templates
    "post_filter_attributes",
    "render_grade_option",
    "render_post",
    "render_topic_option",
]
