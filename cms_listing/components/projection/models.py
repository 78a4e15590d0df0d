"""
Projection component models.
"""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_IMAGE_URL = (
    "https://d3e54v103j8qbb.cloudfront.net/plugins/Basic/assets/placeholder.60f9b1840c.svg"
)


@dataclass(frozen=True)
class PostFields:
    """CMS field names read for a post."""

    slug: str = "slug"
    image: str = "main-image"
    title: str = "name"
    topics: str = "topics"
    grade: str = "grade"
    description: str = "description"
    summary: str = "summary"


DEFAULT_POST_FIELDS = PostFields()


@dataclass(frozen=True)
class ProjectedPost:
    """Normalized post view a card fragment is built from."""

    id: str
    slug: str | None
    image_url: str
    title: str
    topics_label: str
    grade_label: str
    description_text: str

    @property
    def href(self) -> str:
        return f"/posts/{self.slug or '#'}"


@dataclass(frozen=True)
class ProjectedTaxonomyEntry:
    """Normalized grade or topic entry."""

    id: str
    name: str
