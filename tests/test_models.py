"""Tests for path joining and content-type parsing."""

from __future__ import annotations

import httpx
import pytest

from pho.crawler.models import Node, content_type_of, join_path


class TestJoinPath:
    @pytest.mark.parametrize(
        ("elements", "expected"),
        [
            (("/var/albums", ""), "/var/albums"),
            (("/var/albums", "/"), "/var/albums"),
            (("/var/albums", "2019/"), "/var/albums/2019"),
            (("/var/albums", "/A/A1.jpg"), "/var/albums/A/A1.jpg"),
            (("", "A"), "A"),
            (("/", "A"), "/A"),
            ((".", "/A", "A1.jpg"), "A/A1.jpg"),
            (("a//b", "c"), "a/b/c"),
            (("a/b", "../c"), "a/c"),
        ],
    )
    def test_cleans_joined_path(self, elements, expected) -> None:
        assert join_path(*elements) == expected

    def test_all_empty_returns_empty(self) -> None:
        assert join_path("", "") == ""

    def test_keeps_absolute_first_element(self) -> None:
        assert join_path("/home/me/photos", "/", "A") == "/home/me/photos/A"


class TestContentTypeOf:
    def test_strips_parameters(self) -> None:
        resp = httpx.Response(200, headers={"Content-Type": "text/html; charset=utf-8"})
        assert content_type_of(resp) == "text/html"

    def test_plain_type(self) -> None:
        resp = httpx.Response(200, headers={"Content-Type": "image/jpeg"})
        assert content_type_of(resp) == "image/jpeg"

    def test_missing_header_is_empty(self) -> None:
        assert content_type_of(httpx.Response(204)) == ""


def test_node_path_joins_base_and_name() -> None:
    assert Node(base="/A", name="A1.jpg", depth=1).path == "/A/A1.jpg"
    assert Node(base="", name="A", depth=0).path == "A"
