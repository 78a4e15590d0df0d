"""
Build error types.

Fetch and I/O failures abort the whole build. A role with no matching
collection is not an error and never raises.
"""

from __future__ import annotations

from pathlib import Path


class ListingBuildError(Exception):
    """Base exception for build failures."""

    pass


class FetchError(ListingBuildError):
    """Non-success response (or transport failure) from the CMS API."""

    def __init__(
        self,
        resource: str,
        status_text: str,
        status_code: int | None = None,
    ) -> None:
        self.resource = resource
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Failed to fetch {resource}: {status_text}")


class DocumentIOError(ListingBuildError):
    """Input document unreadable or output path unwritable."""

    def __init__(self, path: Path | str, error: str) -> None:
        self.path = Path(path)
        self.error = error
        super().__init__(f"{self.path}: {error}")
