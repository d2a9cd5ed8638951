"""Exceptions raised while walking a gallery.

A walk ends in one of two ways when something goes wrong:

* :class:`FatalError` aborts the entire walk and unwinds to the command.
* :class:`LeafError` marks a single leaf resource as failed.  The index page
  that recursed into it logs the failure and carries on with the next
  sibling; it only reaches the command when the walk's root is itself a leaf.
"""

from __future__ import annotations


class WalkError(Exception):
    """Base class for every error produced by a walk."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        if self.url is None:
            return self.message
        if self.status_code is None:
            return f"{self.url}: {self.message}"
        return f"{self.url} [{self.status_code}]: {self.message}"


class FatalError(WalkError):
    """An error that must abort the whole walk."""


class MalformedListingError(FatalError):
    """An index page contains an anchor without an ``href``."""


class LeafError(WalkError):
    """A leaf visitor failed on one resource; contained by the parent index."""


class UnsupportedContentTypeError(Exception):
    """A leaf visitor was handed a content type it does not know."""

    def __init__(self, content_type: str, path: str) -> None:
        super().__init__(f"Unknown content type {content_type}:{path}")
        self.content_type = content_type
        self.path = path
