"""Data models for the gallery walker."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass

import httpx

_SEPARATORS = re.compile(r"/+")


def join_path(*elements: str) -> str:
    """Join slash-separated path elements and clean the result.

    Empty elements are ignored, runs of ``/`` collapse to one and ``.`` /
    ``..`` segments are resolved.  Returns ``""`` when every element is empty.

        >>> join_path("/var/albums", "2019/", "beach.jpg")
        '/var/albums/2019/beach.jpg'
        >>> join_path("", "2019")
        '2019'
    """
    parts = [e for e in elements if e]
    if not parts:
        return ""
    return posixpath.normpath(_SEPARATORS.sub("/", "/".join(parts)))


def content_type_of(response: httpx.Response) -> str:
    """Return the MIME type of *response* without any ``;`` parameters."""
    return response.headers.get("Content-Type", "").split(";")[0].strip()


@dataclass(frozen=True)
class Node:
    """A child link discovered on an index page."""

    base: str
    name: str
    depth: int

    @property
    def path(self) -> str:
        """Remote path of the child, relative to the albums prefix."""
        return join_path(self.base, self.name)


@dataclass
class FetchResult:
    """An open HTTP response together with its derived content type.

    The body is still unread; whoever consumes it closes it.
    """

    url: str
    response: httpx.Response
    content_type: str

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def close(self) -> None:
        self.response.close()
