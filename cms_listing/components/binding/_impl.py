"""
Fragment templates for the Webflow listing page.

Markup mirrors the Webflow-exported collection items so the page's
existing styles apply. Values are interpolated verbatim (no escaping).
"""

from __future__ import annotations

from cms_listing.components.projection import (
    ProjectedPost,
    ProjectedTaxonomyEntry,
    filter_text,
)

from .models import FragmentAttributes, RenderedFragment

POST_TEMPLATE = """
<div role="listitem" class="collection-item-5 w-dyn-item w-col w-col-6" {data}>
  <div class="topic-card">
    <a href="{href}" class="link-block-9 w-inline-block">
      <img loading="lazy" src="{image_url}" alt="{title}" class="image-5">
      <div fs-cmsfilter-field="Topics" class="text-block-10">{topics}</div>
      <div class="div-block-24">
        <div fs-cmsfilter-field="Grades" class="grade-label">Grade</div>
        <div fs-cmsfilter-field="Grade" class="grade-text">{grade}</div>
      </div>
      <h3 fs-cmsfilter-field="" class="heading-8">{title}</h3>
    </a>
    <p fs-cmsfilter-field="" class="paragraph">{description}</p>
    <a href="{href}" class="main-post-btn w-button">Read More</a>
  </div>
</div>
"""

GRADE_TEMPLATE = """
<div role="listitem" class="w-dyn-item">
  <label class="radio-button-field-3 w-radio">
    <input type="radio" name="radio-2" id="grade-{id}" data-name="Radio 2" class="w-form-formradioinput radio-button-2 w-radio-input" value="{name}">
    <span fs-cmsfilter-field="Grade" class="radio-grades w-form-label" for="grade-{id}">{name}</span>
  </label>
</div>
"""

TOPIC_TEMPLATE = """
<div role="listitem" class="w-dyn-item">
  <label class="radio-button-field-2 w-radio">
    <input type="radio" name="radio" id="topic-{id}" data-name="Radio" class="w-form-formradioinput radio-button w-radio-input" value="{name}">
    <span fs-cmsfilter-field="Topics" class="radio-list w-form-label" for="topic-{id}">{name}</span>
  </label>
</div>
"""


def post_filter_attributes(
    post: ProjectedPost,
    attributes: FragmentAttributes,
) -> dict[str, str]:
    """Filter attributes of a post; grade and topic keep their exact case."""
    return {
        attributes.grade: post.grade_label,
        attributes.topic: post.topics_label,
        attributes.title: filter_text(post.title),
        attributes.description: filter_text(post.description_text),
    }


def render_post(post: ProjectedPost, attributes: FragmentAttributes) -> RenderedFragment:
    """Render a post card."""
    data = post_filter_attributes(post, attributes)
    data_markup = " ".join(f'{name}="{value}"' for name, value in data.items())
    markup = POST_TEMPLATE.format(
        data=data_markup,
        href=post.href,
        image_url=post.image_url,
        title=post.title,
        topics=post.topics_label,
        grade=post.grade_label,
        description=post.description_text,
    )
    return RenderedFragment(markup=markup, attributes=data)


def render_grade_option(entry: ProjectedTaxonomyEntry) -> RenderedFragment:
    return RenderedFragment(markup=GRADE_TEMPLATE.format(id=entry.id, name=entry.name))


def render_topic_option(entry: ProjectedTaxonomyEntry) -> RenderedFragment:
    return RenderedFragment(markup=TOPIC_TEMPLATE.format(id=entry.id, name=entry.name))
