"""
End-to-end build tests against an in-memory CMS.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from cms_listing.app_shell.build import fetch_role_items, run_build
from cms_listing.app_shell.config import BuildSettings
from cms_listing.components.binding import DEFAULT_FRAGMENT_ATTRIBUTES, FILTER_SCRIPT_ID
from cms_listing.components.filtering import (
    INITIAL_STATE,
    FilterCandidate,
    FiltersCleared,
    GradeSelected,
    SearchChanged,
    TopicSelected,
    apply_event,
    evaluate,
)
from cms_listing.components.projection import PLACEHOLDER_IMAGE_URL
from cms_listing.components.roles import Role, resolve_roles
from cms_listing.core.entities import Collection, Item
from cms_listing.core.errors import DocumentIOError, FetchError


def _output(site_dir: Path) -> BeautifulSoup:
    return BeautifulSoup((site_dir / "dist" / "index.html").read_text(), "html.parser")


def _candidates(soup: BeautifulSoup) -> list[FilterCandidate]:
    return [
        FilterCandidate.from_attributes(node.attrs, DEFAULT_FRAGMENT_ATTRIBUTES)
        for node in soup.select('.cms-list [role="listitem"]')
    ]


class TestEndToEnd:
    def test_sample_site(self, site_dir, sample_cms) -> None:
        report = run_build(BuildSettings(), sample_cms, root=site_dir)
        soup = _output(site_dir)

        posts = soup.select('.cms-list [role="listitem"]')
        assert len(posts) == 2
        images = [p.select_one("img")["src"] for p in posts]
        assert images == ["https://cdn.example.com/fractions.png", PLACEHOLDER_IMAGE_URL]

        assert len(soup.select(".grades-collection-list input[type=radio]")) == 3
        assert len(soup.select(".topics-collection-list input[type=radio]")) == 2

        assert soup.select_one('[fs-cmsfilter-element="items-count"]').get_text() == "2"
        assert soup.select_one('[fs-cmsfilter-element="results-count"]').get_text() == "2"

        scripts = soup.select(f"body > script#{FILTER_SCRIPT_ID}")
        assert len(scripts) == 1
        assert '"containerSelector": ".cms-list"' in scripts[0].get_text()

        assert report.output_path == (site_dir / "dist" / "index.html").resolve()
        assert report.counts == {Role.POSTS: 2, Role.GRADES: 3, Role.TOPICS: 2}

    def test_empty_states_removed(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        soup = _output(site_dir)

        assert soup.select(".w-dyn-empty") == []
        assert soup.select_one('[fs-cmsfilter-element="empty"]') is not None

    def test_fragment_order_follows_items(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        soup = _output(site_dir)

        titles = [h.get_text() for h in soup.select(".cms-list h3")]
        grades = [i["value"] for i in soup.select(".grades-collection-list input")]
        assert titles == ["Fractions", "Colour Wheel"]
        assert grades == ["5", "6", "7"]

    def test_assets_copied(self, site_dir, sample_cms) -> None:
        report = run_build(BuildSettings(), sample_cms, root=site_dir)

        assert (site_dir / "dist" / "images" / "logo.svg").exists()
        assert (site_dir / "dist" / "css" / "site.css").exists()
        assert not (site_dir / "dist" / "js").exists()
        assert len(report.assets) == 2

    def test_summary_used_as_description(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        soup = _output(site_dir)

        paragraphs = [p.get_text() for p in soup.select(".cms-list p.paragraph")]
        assert paragraphs == ["Halves and quarters", "Mixing primary colours"]


class TestRenderedFilterAttributes:
    """The rendered attributes drive the same filter semantics as the page script."""

    def test_filtering_narrows_results_only(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        soup = _output(site_dir)
        candidates = _candidates(soup)
        items_count = soup.select_one('[fs-cmsfilter-element="items-count"]').get_text()

        state = apply_event(INITIAL_STATE, GradeSelected("5"))
        outcome = evaluate(state, candidates)

        assert outcome.results_count == 1
        assert items_count == "2"

    def test_grade_and_topic_must_both_match(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        candidates = _candidates(_output(site_dir))

        state = apply_event(INITIAL_STATE, GradeSelected("5"))
        state = apply_event(state, TopicSelected("Art"))

        assert evaluate(state, candidates).show_empty

    def test_search_and_clear(self, site_dir, sample_cms) -> None:
        run_build(BuildSettings(), sample_cms, root=site_dir)
        candidates = _candidates(_output(site_dir))

        state = apply_event(INITIAL_STATE, SearchChanged("WHEEL"))
        assert evaluate(state, candidates).visible == (False, True)

        state = apply_event(state, FiltersCleared())
        assert evaluate(state, candidates).results_count == 2


class TestResolutionGaps:
    def test_missing_roles_are_skipped(self, site_dir, make_cms) -> None:
        cms = make_cms(
            collections=[Collection(id="p", display_name="Posts")],
            items={"p": [Item(id="i", field_data={"name": "Only"})]},
        )

        report = run_build(BuildSettings(), cms, root=site_dir)
        soup = _output(site_dir)

        assert report.counts[Role.GRADES] == 0
        assert cms.item_requests == ["p"]
        assert len(soup.select(".w-dyn-empty")) == 2
        assert soup.select_one('[fs-cmsfilter-element="items-count"]').get_text() == "1"

    def test_no_posts_sets_zero_counts(self, site_dir, make_cms) -> None:
        run_build(BuildSettings(), make_cms(collections=[]), root=site_dir)
        soup = _output(site_dir)

        assert soup.select_one('[fs-cmsfilter-element="results-count"]').get_text() == "0"
        assert len(soup.select(".w-dyn-empty")) == 3
        assert soup.select(f"script#{FILTER_SCRIPT_ID}")

    def test_gap_is_logged(self, site_dir, make_cms, caplog) -> None:
        caplog.set_level(logging.INFO)
        run_build(BuildSettings(), make_cms(collections=[]), root=site_dir)

        assert "Fetched 0 topics" in caplog.text


class TestFailures:
    def test_fetch_error_writes_nothing(self, site_dir, sample_cms) -> None:
        sample_cms.failing.add("col-topics")

        with pytest.raises(FetchError):
            run_build(BuildSettings(), sample_cms, root=site_dir)

        assert not (site_dir / "dist").exists()

    def test_missing_input(self, tmp_path, sample_cms) -> None:
        with pytest.raises(DocumentIOError):
            run_build(BuildSettings(), sample_cms, root=tmp_path)

        assert sample_cms.item_requests == []

    def test_markup_hazard_warned(self, site_dir, make_cms, caplog) -> None:
        cms = make_cms(
            collections=[Collection(id="p", display_name="Blog")],
            items={"p": [Item(id="x", field_data={"name": "<em>Bold</em>"})]},
        )

        run_build(BuildSettings(), cms, root=site_dir)

        assert "posts item x: title" in caplog.text
        assert "<em>Bold</em>" in (site_dir / "dist" / "index.html").read_text()


class TestFetchRoleItems:
    @pytest.mark.parametrize("concurrent", [False, True])
    def test_fetches_assigned_roles(self, sample_cms, concurrent) -> None:
        assignment = resolve_roles(sample_cms.list_collections())

        items = fetch_role_items(sample_cms, assignment, concurrent=concurrent)

        assert {role: len(v) for role, v in items.items()} == {
            Role.POSTS: 2,
            Role.GRADES: 3,
            Role.TOPICS: 2,
        }
        assert sorted(sample_cms.item_requests) == ["col-grades", "col-posts", "col-topics"]

    def test_concurrent_failure_propagates(self, sample_cms) -> None:
        sample_cms.failing.add("col-grades")
        assignment = resolve_roles(sample_cms.list_collections())

        with pytest.raises(FetchError):
            fetch_role_items(sample_cms, assignment, concurrent=True)


def test_script_config_matches_settings(site_dir, sample_cms) -> None:
    settings = BuildSettings.model_validate({"filter": {"scroll_delay_ms": 250}})

    run_build(settings, sample_cms, root=site_dir)
    script = _output(site_dir).select_one(f"script#{FILTER_SCRIPT_ID}").get_text()
    config = json.loads(script[script.rindex("})(") + 3 : script.rindex(");")].replace("<\\/", "</"))

    assert config["scrollDelayMs"] == 250
    assert config["selectors"]["resultsCount"] == '[fs-cmsfilter-element="results-count"]'


def test_counts_follow_rendered_posts(tmp_path, sample_cms) -> None:
    page = (
        "<html><body>"
        '<div fs-cmsfilter-element="items-count">9</div>'
        '<div fs-cmsfilter-element="results-count">9</div>'
        "</body></html>"
    )
    (tmp_path / "index.html").write_text(page, encoding="utf-8")

    report = run_build(BuildSettings(), sample_cms, root=tmp_path)
    soup = _output(tmp_path)

    assert report.counts[Role.POSTS] == 2
    posts = next(r for r in report.bind_results if r.role is Role.POSTS)
    assert posts.rendered == 0
    assert soup.select_one('[fs-cmsfilter-element="items-count"]').get_text() == "0"
    assert soup.select_one('[fs-cmsfilter-element="results-count"]').get_text() == "0"
