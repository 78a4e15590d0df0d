"""
Filtering component - Client-side filter emission and state machine.
"""

from ._impl import apply_event, evaluate, is_visible, normalize_query
from .component import emit_filter_script, run, script_config
from .models import (
    DEFAULT_FILTER_SELECTORS,
    DEFAULT_SCROLL_DELAY_MS,
    INITIAL_STATE,
    FilterCandidate,
    FilterEvent,
    FilterOutcome,
    FilterSelectors,
    FilterState,
    FiltersCleared,
    GradeSelected,
    SearchChanged,
    TopicSelected,
)

__all__ = [
    # Entry points
    "emit_filter_script",
    "run",
    "script_config",
    # State machine
    "apply_event",
    "evaluate",
    "is_visible",
    "normalize_query",
    # Models
    "DEFAULT_FILTER_SELECTORS",
    "DEFAULT_SCROLL_DELAY_MS",
    "INITIAL_STATE",
    "FilterCandidate",
    "FilterEvent",
    "FilterOutcome",
    "FilterSelectors",
    "FilterState",
    "FiltersCleared",
    "GradeSelected",
    "SearchChanged",
    "TopicSelected",
]
