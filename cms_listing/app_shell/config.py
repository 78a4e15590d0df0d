"""
Build configuration.

Settings come from an optional YAML file, overlaid with the two required
environment values. Credentials are not checked here: a missing or
invalid token surfaces as a FetchError from the API.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cms_listing.adapters.webflow import DEFAULT_API_BASE_URL, DEFAULT_API_VERSION
from cms_listing.components.binding import DEFAULT_SELECTORS, DocumentSelectors
from cms_listing.components.filtering import (
    DEFAULT_FILTER_SELECTORS,
    DEFAULT_SCROLL_DELAY_MS,
    FilterSelectors,
)

TOKEN_ENV = "WEBFLOW_API_TOKEN"
SITE_ID_ENV = "WEBFLOW_SITE_ID"


class SelectorSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    posts_list: str = DEFAULT_SELECTORS.posts_list
    grades_list: str = DEFAULT_SELECTORS.grades_list
    topics_list: str = DEFAULT_SELECTORS.topics_list
    empty_state: str = DEFAULT_SELECTORS.empty_state
    items_count: str = DEFAULT_SELECTORS.items_count
    results_count: str = DEFAULT_SELECTORS.results_count

    def to_document_selectors(self) -> DocumentSelectors:
        return DocumentSelectors(**self.model_dump())


class FilterSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    item: str = DEFAULT_FILTER_SELECTORS.item
    grade_input: str = DEFAULT_FILTER_SELECTORS.grade_input
    topic_input: str = DEFAULT_FILTER_SELECTORS.topic_input
    search_input: str = DEFAULT_FILTER_SELECTORS.search_input
    clear_button: str = DEFAULT_FILTER_SELECTORS.clear_button
    empty_results: str = DEFAULT_FILTER_SELECTORS.empty_results
    scroll_delay_ms: int = Field(default=DEFAULT_SCROLL_DELAY_MS, ge=0)

    def to_filter_selectors(self, results_count: str) -> FilterSelectors:
        return FilterSelectors(
            item=self.item,
            grade_input=self.grade_input,
            topic_input=self.topic_input,
            search_input=self.search_input,
            clear_button=self.clear_button,
            results_count=results_count,
            empty_results=self.empty_results,
        )


class BuildSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    api_token: str = ""
    site_id: str = ""
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = Field(default=30.0, gt=0)

    input_path: Path = Path("index.html")
    output_dir: Path = Path("dist")
    asset_dirs: list[str] = Field(default_factory=lambda: ["images", "js", "css"])

    concurrent_fetches: bool = False

    selectors: SelectorSettings = Field(default_factory=SelectorSettings)
    filter: FilterSettings = Field(default_factory=FilterSettings)

    @property
    def output_name(self) -> str:
        return self.input_path.name


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> BuildSettings:
    """
    Load and validate build settings.

    Raises FileNotFoundError if an explicit config file is missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    environ = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    if path is not None:
        if not path.exists():
            raise FileNotFoundError(f"Config file not found at: {path}")
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

    if TOKEN_ENV in environ:
        data["api_token"] = environ[TOKEN_ENV]
    if SITE_ID_ENV in environ:
        data["site_id"] = environ[SITE_ID_ENV]

    try:
        return BuildSettings.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Config validation failed:\n{e}") from e
