"""Tests for assetly.paths: base normalization and path joining."""

import pytest

from assetly.paths import append_filename, compose_path, normalize_base


class TestNormalizeBase:
    @pytest.mark.parametrize(
        ("base", "expected"),
        [
            (None, None),
            ("", None),
            ("/", None),
            ("css", "css"),
            ("css/", "css"),
            ("//cdn.example.com/", "//cdn.example.com"),
        ],
    )
    def test_normalize(self, base: str | None, expected: str | None) -> None:
        assert normalize_base(base) == expected

    def test_strips_only_one_separator(self) -> None:
        assert normalize_base("css//") == "css/"


class TestComposePath:
    def test_no_parent(self) -> None:
        assert compose_path(None, "css") == "css"

    def test_no_parent_keeps_leading_separator(self) -> None:
        assert compose_path(None, "/static") == "/static"

    def test_no_base(self) -> None:
        assert compose_path("//cdn", None) == "//cdn"

    def test_neither(self) -> None:
        assert compose_path(None, None) is None
        assert compose_path("", "") is None

    def test_join(self) -> None:
        assert compose_path("//cdn", "css") == "//cdn/css"

    def test_join_keeps_leading_separator(self) -> None:
        assert compose_path("//cdn", "/css") == "//cdn//css"

    def test_relative_join_drops_leading_separator(self) -> None:
        assert compose_path("//cdn", "/css", relative=True) == "//cdn/css"

    def test_relative_without_parent_keeps_separator(self) -> None:
        assert compose_path(None, "/static", relative=True) == "/static"


class TestAppendFilename:
    def test_no_filename(self) -> None:
        assert append_filename("//base.uri", None) == "//base.uri"

    def test_no_filename_no_path(self) -> None:
        assert append_filename(None, None) == ""

    def test_filename(self) -> None:
        assert append_filename("//base.uri", "filename.ext") == "//base.uri/filename.ext"

    def test_leading_separator_stripped(self) -> None:
        assert append_filename("//base.uri", "/path") == "//base.uri/path"

    @pytest.mark.parametrize("filename", ["", "/"])
    def test_bare_separator(self, filename: str) -> None:
        assert append_filename("//base.uri", filename) == "//base.uri/"

    def test_no_path_no_separator_invented(self) -> None:
        assert append_filename(None, "foo.txt") == "foo.txt"
        assert append_filename(None, "/foo.txt") == "foo.txt"
        assert append_filename("", "") == ""
