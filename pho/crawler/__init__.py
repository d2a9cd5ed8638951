"""Crawler package — fetch, link extraction and the tree walk."""

from pho.crawler.errors import FatalError, LeafError, MalformedListingError, WalkError
from pho.crawler.fetcher import Backoff, Fetcher, build_client
from pho.crawler.models import FetchResult, Node, join_path
from pho.crawler.visitors import DiffVisitor, FetchVisitor, ListVisitor, Visitor
from pho.crawler.walker import TreeWalker

__all__ = [
    "Backoff",
    "DiffVisitor",
    "FatalError",
    "FetchResult",
    "FetchVisitor",
    "Fetcher",
    "LeafError",
    "ListVisitor",
    "MalformedListingError",
    "Node",
    "TreeWalker",
    "Visitor",
    "WalkError",
    "build_client",
    "join_path",
]
