"""
Binding component models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from cms_listing.components.roles import Role


@dataclass(frozen=True)
class FragmentAttributes:
    """Names of the data attributes a post fragment exposes for filtering."""

    grade: str = "data-grade"
    topic: str = "data-topic"
    title: str = "data-title"
    description: str = "data-description"


DEFAULT_FRAGMENT_ATTRIBUTES = FragmentAttributes()


@dataclass(frozen=True)
class DocumentSelectors:
    """Fixed structural selectors of the input document."""

    posts_list: str = ".cms-list"
    grades_list: str = ".grades-collection-list"
    topics_list: str = ".topics-collection-list"
    empty_state: str = ".w-dyn-empty"
    items_count: str = '[fs-cmsfilter-element="items-count"]'
    results_count: str = '[fs-cmsfilter-element="results-count"]'

    def container_for(self, role: Role) -> str:
        return {
            Role.POSTS: self.posts_list,
            Role.GRADES: self.grades_list,
            Role.TOPICS: self.topics_list,
        }[role]


DEFAULT_SELECTORS = DocumentSelectors()


@dataclass(frozen=True)
class RenderedFragment:
    """Rendered markup for one item plus the filter attributes it carries."""

    markup: str
    attributes: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class BindResult:
    """What a bind step changed in the document."""

    role: Role
    containers: int
    fragments: int
    placeholders_removed: int = 0

    @property
    def skipped(self) -> bool:
        return self.containers == 0 or self.fragments == 0

    @property
    def rendered(self) -> int:
        """Fragments actually placed in at least one container."""
        return self.fragments if self.containers else 0
