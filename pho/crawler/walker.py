"""Depth-first walk over a gallery's index and leaf pages.

Every remote path is fetched and dispatched on its content type:

* ``text/html`` is an index page.  Each link on it is handed to
  :meth:`Visitor.on_index` and, when recursing, walked in turn before the
  next sibling is looked at.
* Anything else is a leaf and goes to :meth:`Visitor.on_leaf`.

A failing leaf visit is logged by the index page that led to it and the walk
moves on; every other failure aborts the walk.
"""

from __future__ import annotations

import logging
from typing import Iterator

import httpx

from pho.crawler.errors import FatalError, LeafError
from pho.crawler.extractor import extract_links
from pho.crawler.fetcher import Fetcher
from pho.crawler.models import FetchResult, Node, join_path
from pho.crawler.visitors import Visitor

logger = logging.getLogger(__name__)

INDEX_CONTENT_TYPE = "text/html"


class TreeWalker:
    """Walks the album tree served under ``address`` + ``prefix``."""

    def __init__(self, fetcher: Fetcher, address: str, prefix: str = "/var/albums") -> None:
        self._fetcher = fetcher
        self._address = address.rstrip("/")
        self._prefix = prefix

    def remote_path(self, base: str) -> str:
        return join_path(self._prefix, base)

    def url_for(self, base: str) -> str:
        return f"{self._address}{self.remote_path(base)}"

    def walk(self, base: str, visitor: Visitor, recurse: bool = False, depth: int = 0) -> None:
        """Visit *base* and, if *recurse* is set, everything below it.

        Raises:
            FatalError: The walk could not continue.
            LeafError: *base* itself is a leaf and its visitor failed.
        """
        url = self.url_for(base)
        try:
            result = self._fetcher.fetch(url)
        except FatalError as exc:
            if exc.url is None:
                exc.url = url
            raise

        if result.content_type == INDEX_CONTENT_TYPE:
            self._walk_index(result, base, visitor, recurse, depth)
        else:
            self._visit_leaf(result, base, visitor)

        logger.debug("%s %s %s", url, result.status_code, result.content_type)

    def _walk_index(
        self,
        result: FetchResult,
        base: str,
        visitor: Visitor,
        recurse: bool,
        depth: int,
    ) -> None:
        try:
            body = result.response.read()
        except httpx.HTTPError as exc:
            raise FatalError(
                f"cannot read listing: {exc}", url=result.url, status_code=result.status_code
            ) from exc
        finally:
            result.close()

        for link in self._links(result, body, base):
            try:
                visitor.on_index(Node(base=base, name=link, depth=depth))
            except Exception as exc:
                raise FatalError(
                    f"Index error: {exc}", url=result.url, status_code=result.status_code
                ) from exc

            if not recurse:
                continue
            try:
                self.walk(join_path(base, link), visitor, recurse, depth + 1)
            except LeafError as exc:
                logger.warning("%s", exc)

    def _links(self, result: FetchResult, body: bytes, base: str) -> Iterator[str]:
        try:
            yield from extract_links(body, self.remote_path(base))
        except FatalError as exc:
            exc.url = result.url
            exc.status_code = result.status_code
            raise

    def _visit_leaf(self, result: FetchResult, base: str, visitor: Visitor) -> None:
        try:
            visitor.on_leaf(result, base, result.content_type)
        except Exception as exc:
            raise LeafError(
                f"Leaf error: {exc}", url=result.url, status_code=result.status_code
            ) from exc
        finally:
            result.close()
