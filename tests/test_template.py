"""Tests for waypoint.routing.template — tokenising and pattern building."""

import re

import pytest

from waypoint.routing.template import PathSegment, build_pattern, parse_template


class TestPathSegment:
    def test_literal(self) -> None:
        seg = PathSegment(value="/users")
        assert seg.value == "/users"
        assert seg.is_param is False
        assert seg.param_name is None

    def test_param(self) -> None:
        seg = PathSegment(value="{id}", is_param=True, param_name="id")
        assert seg.is_param is True
        assert seg.param_name == "id"

    def test_frozen(self) -> None:
        seg = PathSegment(value="/users")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestParseTemplate:
    def test_static(self) -> None:
        assert parse_template("/users") == (PathSegment("/users"),)

    def test_empty(self) -> None:
        assert parse_template("") == ()

    def test_param(self) -> None:
        segments = parse_template("/users/{id}")
        assert [s.value for s in segments] == ["/users/", "{id}"]
        assert segments[1].is_param is True
        assert segments[1].param_name == "id"

    def test_adjacent_params(self) -> None:
        segments = parse_template("{a}{b}")
        assert [s.param_name for s in segments] == ["a", "b"]

    def test_param_mid_segment(self) -> None:
        segments = parse_template("/{a}-{b}.json")
        assert [s.value for s in segments] == ["/", "{a}", "-", "{b}", ".json"]

    @pytest.mark.parametrize("template", ["/{", "/{a", "/a}", "/{}"])
    def test_malformed_braces(self, template: str) -> None:
        assert parse_template(template) == (PathSegment(template),)

    def test_doubled_brace(self) -> None:
        # Inner "{a}" is still a placeholder; the outer "{" is literal
        segments = parse_template("/{{a}")
        assert [s.value for s in segments] == ["/{", "{a}"]

    def test_names_keep_any_chars(self) -> None:
        segments = parse_template("/{user id:int}")
        assert segments[1].param_name == "user id:int"


class TestBuildPattern:
    def test_escapes_literals(self) -> None:
        source = build_pattern(parse_template("/a.b/{c}"))
        assert source == re.escape("/a.b/") + "([^/]+)"

    def test_raw_literals(self) -> None:
        source = build_pattern(parse_template("/a.b/{c}"), escape_literals=False)
        assert source == "/a.b/([^/]+)"

    def test_placeholder_excludes_separator(self) -> None:
        source = build_pattern(parse_template("{n}"))
        assert source == "([^/]+)"
