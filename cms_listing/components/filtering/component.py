"""
Filtering component - Client-side filter script and its Python model.

The page filters rendered post fragments by grade, topic and free-text
search. All three predicates are combined with AND:
- grade: empty or exact (case-sensitive) match of the fragment's grade
- topic: empty or exact (case-sensitive) match of the fragment's topic
- search: empty or lowercase substring of "<title> <description>"

Every evaluation rewrites results-count (never items-count), toggles the
empty-results node and scrolls to the listing after a short delay.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from cms_listing.components.binding import DEFAULT_FRAGMENT_ATTRIBUTES, FragmentAttributes

from ._impl import evaluate
from .models import (
    DEFAULT_FILTER_SELECTORS,
    DEFAULT_SCROLL_DELAY_MS,
    INITIAL_STATE,
    FilterCandidate,
    FilterOutcome,
    FilterSelectors,
    FilterState,
)
from .script import SCRIPT_SOURCE


def script_config(
    container_selector: str,
    attributes: FragmentAttributes = DEFAULT_FRAGMENT_ATTRIBUTES,
    selectors: FilterSelectors = DEFAULT_FILTER_SELECTORS,
    scroll_delay_ms: int = DEFAULT_SCROLL_DELAY_MS,
) -> dict[str, object]:
    """Configuration object handed to the browser script."""
    return {
        "containerSelector": container_selector,
        "attributes": {
            "grade": attributes.grade,
            "topic": attributes.topic,
            "title": attributes.title,
            "description": attributes.description,
        },
        "selectors": {
            "item": selectors.item,
            "gradeInput": selectors.grade_input,
            "topicInput": selectors.topic_input,
            "searchInput": selectors.search_input,
            "clearButton": selectors.clear_button,
            "resultsCount": selectors.results_count,
            "emptyResults": selectors.empty_results,
        },
        "scrollDelayMs": scroll_delay_ms,
    }


def emit_filter_script(
    container_selector: str,
    attributes: FragmentAttributes = DEFAULT_FRAGMENT_ATTRIBUTES,
    selectors: FilterSelectors = DEFAULT_FILTER_SELECTORS,
    scroll_delay_ms: int = DEFAULT_SCROLL_DELAY_MS,
) -> str:
    """
    Generate the filter script text.

    The script is not executed at build time; it is appended to the page
    body once.
    """
    config = script_config(container_selector, attributes, selectors, scroll_delay_ms)
    # "</" cannot appear inside an inline script element.
    payload = json.dumps(config, sort_keys=True).replace("</", "<\\/")
    return f"{SCRIPT_SOURCE.strip()}({payload});\n"


# --- Component Entry Points ---


def run(
    candidates: Iterable[FilterCandidate],
    state: FilterState = INITIAL_STATE,
) -> FilterOutcome:
    """Evaluate a filter state over candidates, as the page script does."""
    return evaluate(state, candidates)
