"""Tests for path rendering."""

from __future__ import annotations

from lincol.parser.path import ROOT, Map, Root, Seq, render


class TestRender:
    def test_root(self) -> None:
        assert render(ROOT) == "/"

    def test_key_under_root_has_single_separator(self) -> None:
        assert render(Map(ROOT, "foo")) == "/foo"

    def test_nested_keys(self) -> None:
        assert render(Map(Map(ROOT, "foo"), "bar")) == "/foo/bar"

    def test_sequence_under_key(self) -> None:
        assert render(Seq(Map(ROOT, "foo"), 0)) == "/foo/0"

    def test_mapping_inside_sequence(self) -> None:
        path = Map(Seq(Map(ROOT, "foo"), 0), "boom")
        assert render(path) == "/foo/0/boom"

    def test_top_level_sequence_doubles_separator(self) -> None:
        assert render(Seq(ROOT, 0)) == "//0"
        assert render(Map(Seq(ROOT, 3), "name")) == "//3/name"

    def test_reserved_characters_are_not_escaped(self) -> None:
        assert render(Map(ROOT, "a/b")) == "/a/b"
        assert render(Map(Map(ROOT, "x"), "~y")) == "/x/~y"

    def test_deep_chain(self) -> None:
        path = ROOT
        for _ in range(5000):
            path = Map(path, "k")
        assert render(path) == "/" + "/".join(["k"] * 5000)


class TestPathValues:
    def test_paths_compare_by_value(self) -> None:
        assert Seq(Map(Root(), "a"), 1) == Seq(Map(ROOT, "a"), 1)
        assert Map(ROOT, "a") != Map(ROOT, "b")
