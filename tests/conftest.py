from pathlib import Path

import pytest

from cms_listing.core.entities import Collection, Item
from cms_listing.core.errors import FetchError

SAMPLE_PAGE = """<!DOCTYPE html>
<html>
<head><title>Lesson Library</title></head>
<body>
  <form class="filters">
    <div class="w-dyn-list">
      <div role="list" class="grades-collection-list w-dyn-items"></div>
      <div class="w-dyn-empty"><div>No items found.</div></div>
    </div>
    <div class="w-dyn-list">
      <div role="list" class="topics-collection-list w-dyn-items"></div>
      <div class="w-dyn-empty"><div>No items found.</div></div>
    </div>
    <input type="search" fs-cmsfilter-search="" placeholder="Search">
    <a href="#" fs-cmsfilter-element="clear">Clear filters</a>
  </form>
  <div class="results">
    Showing <span fs-cmsfilter-element="results-count">0</span>
    of <span fs-cmsfilter-element="items-count">0</span>
  </div>
  <div class="w-dyn-list">
    <div role="list" class="cms-list w-dyn-items w-row"></div>
    <div class="w-dyn-empty"><div>No items found.</div></div>
  </div>
  <div fs-cmsfilter-element="empty" style="display:none">No results.</div>
</body>
</html>
"""


class FakeCms:
    """In-memory CMS for testing."""

    def __init__(
        self,
        collections: list[Collection],
        items: dict[str, list[Item]] | None = None,
    ) -> None:
        self.collections = collections
        self.items = items or {}
        self.item_requests: list[str] = []
        self.failing: set[str] = set()

    def list_collections(self) -> list[Collection]:
        return list(self.collections)

    def list_items(self, collection_id: str) -> list[Item]:
        self.item_requests.append(collection_id)
        if collection_id in self.failing:
            raise FetchError("items", "Internal Server Error", 500)
        return list(self.items.get(collection_id, []))


@pytest.fixture
def sample_cms() -> FakeCms:
    """A site with 2 posts (one without image), 3 grades and 2 topics."""
    return FakeCms(
        collections=[
            Collection(id="col-posts", display_name="Blog Posts"),
            Collection(id="col-grades", display_name="Grade Levels"),
            Collection(id="col-topics", display_name="Topics"),
        ],
        items={
            "col-posts": [
                Item(
                    id="post-1",
                    field_data={
                        "name": "Fractions",
                        "slug": "fractions",
                        "grade": "5",
                        "topics": "Math",
                        "description": "Halves and quarters",
                        "main-image": {"url": "https://cdn.example.com/fractions.png"},
                    },
                ),
                Item(
                    id="post-2",
                    field_data={
                        "name": "Colour Wheel",
                        "slug": "colour-wheel",
                        "grade": "6",
                        "topics": "Art",
                        "summary": "Mixing primary colours",
                    },
                ),
            ],
            "col-grades": [
                Item(id="g-5", field_data={"name": "5"}),
                Item(id="g-6", field_data={"name": "6"}),
                Item(id="g-7", field_data={"name": "7"}),
            ],
            "col-topics": [
                Item(id="t-math", field_data={"name": "Math"}),
                Item(id="t-art", field_data={"name": "Art"}),
            ],
        },
    )


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Project directory with an input page and asset folders."""
    (tmp_path / "index.html").write_text(SAMPLE_PAGE, encoding="utf-8")
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "logo.svg").write_text("<svg/>", encoding="utf-8")
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("body {}", encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_cms():
    """Factory for custom in-memory CMS instances."""
    return FakeCms
