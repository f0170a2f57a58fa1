"""Web pages that the application can point the user to."""

from __future__ import annotations

from enum import Enum


class WebPage(Enum):
    """A web page that can be opened from the interface."""

    REPO = "repo"
    """The project's source repository."""
    WEBSITE_DOWNLOAD = "website_download"
    """The project's download page."""

    def url(self) -> str:
        """Address of the page."""
        return _URLS[self]


_URLS = {
    WebPage.REPO: "https://example.com/sniffkit/repository",
    WebPage.WEBSITE_DOWNLOAD: "https://example.com/sniffkit/download/",
}