"""Link extraction for gallery index pages."""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, SoupStrainer

from pho.crawler.errors import MalformedListingError


def extract_links(body: str | bytes, current_path: str) -> Iterator[str]:
    """Yield the ``href`` of every ``<a>`` tag in *body*, in document order.

    A link is skipped when *current_path* contains it as a substring.  That is
    how the parent and self links of a directory listing get dropped.  The
    check is loose: a child whose name happens to occur inside *current_path*
    is skipped too.

    Raises:
        MalformedListingError: On reaching an anchor without an ``href``.
            Links before it have already been yielded.
    """
    soup = BeautifulSoup(body, "html.parser", parse_only=SoupStrainer("a"))
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if href is None:
            raise MalformedListingError(f"No url for {anchor}")
        if href in current_path:
            continue
        yield href
