"""Shared test fixtures: a small fake gallery served through respx.

The album tree looks like this::

    /var/albums           index  → A, B.png   (plus a parent link)
    /var/albums/A         index  → A1.jpg, A2.jpg   (plus a parent link)
    /var/albums/A/A1.jpg  image/jpeg
    /var/albums/A/A2.jpg  image/jpeg
    /var/albums/B.png     image/png
    /var/albums/notes.txt text/plain   (not linked from anywhere)
"""

from __future__ import annotations

import httpx
import pytest
import respx

from pho.crawler import Fetcher, TreeWalker

GALLERY_URL = "http://gallery.test"


def listing(*hrefs: str) -> str:
    """Return a directory-listing style HTML page linking to *hrefs*."""
    anchors = "\n".join(f'  <li><a href="{h}">{h}</a></li>' for h in hrefs)
    return f"<html><head><title>Index</title></head><body><ul>\n{anchors}\n</ul></body></html>"


PAGES: dict[str, tuple[str, bytes]] = {
    "/var/albums": ("text/html; charset=utf-8", listing("/var/", "A", "B.png").encode()),
    "/var/albums/A": ("text/html", listing("/var/albums", "A1.jpg", "A2.jpg").encode()),
    "/var/albums/A/A1.jpg": ("image/jpeg", b"\xff\xd8jpeg-A1"),
    "/var/albums/A/A2.jpg": ("image/jpeg", b"\xff\xd8jpeg-A2-longer"),
    "/var/albums/B.png": ("image/png", b"\x89PNG-B"),
    "/var/albums/notes.txt": ("text/plain", b"not an image"),
}


def responder(content_type: str, body: bytes, status_code: int = 200):
    """Build a respx side effect returning a fresh response on every call."""

    def _respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, headers={"Content-Type": content_type}, content=body)

    return _respond


@pytest.fixture
def gallery():
    """Mock every page of the fake gallery; yields the respx router."""
    with respx.mock(base_url=GALLERY_URL, assert_all_called=False) as router:
        for path, (content_type, body) in PAGES.items():
            router.get(path, name=path).mock(side_effect=responder(content_type, body))
        yield router


@pytest.fixture
def sleeps() -> list[float]:
    """Collects the waits a :class:`Fetcher` would have slept for."""
    return []


@pytest.fixture
def walker(sleeps):
    """A walker over the fake gallery whose fetcher never really sleeps."""
    with httpx.Client() as client:
        yield TreeWalker(Fetcher(client, sleep=sleeps.append), GALLERY_URL)
