"""What each command does with the nodes a walk discovers."""

from __future__ import annotations

import logging
import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from pho.crawler.errors import UnsupportedContentTypeError
from pho.crawler.models import FetchResult, Node, join_path

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPES = frozenset({"image/jpeg", "image/png"})


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class Visitor(ABC):
    """Callbacks invoked by :class:`~pho.crawler.walker.TreeWalker`."""

    @abstractmethod
    def on_index(self, node: Node) -> None:
        """Called for each link on an index page, before it is walked.

        Raising aborts the whole walk.
        """

    def on_leaf(self, result: FetchResult, base: str, content_type: str) -> None:
        """Called with the open response of every non-HTML resource.

        The default declines to read the body.  Raising marks only this leaf
        as failed.
        """


# ---------------------------------------------------------------------------
# ls
# ---------------------------------------------------------------------------

class ListVisitor(Visitor):
    """Prints index nodes as a tab-indented tree."""

    def __init__(self, echo: Callable[[str], None] = print) -> None:
        self._echo = echo

    def on_index(self, node: Node) -> None:
        self._echo("\t" * node.depth + node.name)


# ---------------------------------------------------------------------------
# diff
# ---------------------------------------------------------------------------

class DiffVisitor(Visitor):
    """Prints the local path of every remote index node missing locally."""

    def __init__(self, local_root: str, echo: Callable[[str], None] = print) -> None:
        self._local_root = local_root
        self._echo = echo

    def on_index(self, node: Node) -> None:
        location = join_path(self._local_root, node.base, node.name)
        if not Path(location).exists():
            self._echo(location)


# ---------------------------------------------------------------------------
# fetch
# ---------------------------------------------------------------------------

class FetchVisitor(Visitor):
    """Downloads JPEG and PNG leaves into a mirrored local tree.

    Files that already exist locally are left untouched.
    """

    def __init__(self, local_root: str, echo: Callable[[str], None] = print) -> None:
        self._local_root = local_root
        self._echo = echo

    def on_index(self, node: Node) -> None:
        logger.info("Traversing %s", node.name)

    def on_leaf(self, result: FetchResult, base: str, content_type: str) -> None:
        if content_type not in IMAGE_CONTENT_TYPES:
            raise UnsupportedContentTypeError(content_type, base)

        remote = join_path(base)
        folder = Path(join_path(self._local_root, posixpath.dirname(remote)) or ".")
        local_file = folder / posixpath.basename(remote)
        if local_file.exists():
            return

        folder.mkdir(parents=True, exist_ok=True)
        written = 0
        try:
            with local_file.open("wb") as fh:
                for chunk in result.response.iter_bytes():
                    written += fh.write(chunk)
        except BaseException:
            # never leave a partial download behind
            local_file.unlink(missing_ok=True)
            raise
        self._echo(f"Downloaded {written} bytes for {local_file}")
