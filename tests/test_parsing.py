"""Tests for pathstep.parsing — identifier checks and template parsing."""

import pytest

from pathstep.errors import (
    DuplicatePlaceholder,
    IllegalIdentifier,
    MalformedTemplate,
    TemplateError,
)
from pathstep.parsing import MARKER, is_identifier, parse_template


class TestIsIdentifier:
    @pytest.mark.parametrize("name", ["foo", "foo123", "foo_bar", "fooBar", "_", "_private", "café"])
    def test_accepts(self, name: str) -> None:
        assert is_identifier(name)

    @pytest.mark.parametrize("name", ["123", "1foo", "$foo", "", "foo-bar", "foo bar", "%$", "foo\n"])
    def test_rejects(self, name: str) -> None:
        assert not is_identifier(name)


class TestParseStatic:
    @pytest.mark.parametrize("raw", ["foo", "", "index.html", "a-b_c", "v1.2"])
    def test_no_placeholders(self, raw: str) -> None:
        parsed = parse_template(raw)
        assert parsed.raw == raw
        assert parsed.generalized == raw
        assert parsed.literal_parts == (raw,)
        assert parsed.names == ()


class TestParsePlaceholders:
    def test_start(self) -> None:
        parsed = parse_template("{bar}baz")
        assert parsed.generalized == "{}baz"
        assert parsed.literal_parts == ("", "baz")
        assert parsed.names == ("bar",)

    def test_middle(self) -> None:
        parsed = parse_template("foo{bar}baz")
        assert parsed.generalized == "foo{}baz"
        assert parsed.literal_parts == ("foo", "baz")
        assert parsed.names == ("bar",)

    def test_end(self) -> None:
        parsed = parse_template("foo{bar}")
        assert parsed.generalized == "foo{}"
        assert parsed.literal_parts == ("foo", "")
        assert parsed.names == ("bar",)

    def test_only(self) -> None:
        parsed = parse_template("{bar}")
        assert parsed.generalized == "{}"
        assert parsed.literal_parts == ("", "")
        assert parsed.names == ("bar",)

    def test_multiple(self) -> None:
        parsed = parse_template("foo{bar}baz{qux}frub")
        assert parsed.raw == "foo{bar}baz{qux}frub"
        assert parsed.generalized == "foo{}baz{}frub"
        assert parsed.literal_parts == ("foo", "baz", "frub")
        assert parsed.names == ("bar", "qux")

    def test_outer_placeholders_with_separator(self) -> None:
        parsed = parse_template("{a}-{b}")
        assert parsed.literal_parts == ("", "-", "")
        assert parsed.names == ("a", "b")

    @pytest.mark.parametrize(
        "raw",
        ["{a}", "x{a}", "{a}.{b}", "pre{a}mid{b}post{c}", "{_x1}.tar.{gz}"],
    )
    def test_part_count_invariant(self, raw: str) -> None:
        parsed = parse_template(raw)
        assert len(parsed.literal_parts) == len(parsed.names) + 1

    @pytest.mark.parametrize(
        "raw",
        ["foo", "{a}", "x{a}y", "{a}.{b}", "pre{a}mid{b}post{c}"],
    )
    def test_interleave_reproduces_raw(self, raw: str) -> None:
        parsed = parse_template(raw)
        rebuilt = parsed.literal_parts[0] + "".join(
            f"{{{name}}}{literal}"
            for name, literal in zip(parsed.names, parsed.literal_parts[1:])
        )
        assert rebuilt == raw

    def test_generalized_uses_marker(self) -> None:
        parsed = parse_template("a{x}b{y}c")
        assert parsed.generalized.split(MARKER) == list(parsed.literal_parts)

    def test_frozen(self) -> None:
        parsed = parse_template("foo")
        with pytest.raises(AttributeError):
            parsed.raw = "bar"  # type: ignore[misc]


class TestParseRejects:
    def test_unterminated(self) -> None:
        with pytest.raises(MalformedTemplate) as exc_info:
            parse_template("{bar")
        assert exc_info.value.position == 0
        assert "Unterminated" in str(exc_info.value)

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(MalformedTemplate) as exc_info:
            parse_template("bar}")
        assert exc_info.value.position == 3

    def test_stray_brace_after_placeholder(self) -> None:
        with pytest.raises(MalformedTemplate) as exc_info:
            parse_template("{a}x}")
        assert exc_info.value.position == 4

    @pytest.mark.parametrize("raw", ["{{a}}", "{a{b}}", "a}{b", "{a}{"])
    def test_nested_or_unbalanced(self, raw: str) -> None:
        with pytest.raises(MalformedTemplate):
            parse_template(raw)

    def test_consecutive(self) -> None:
        with pytest.raises(MalformedTemplate, match="Consecutive") as exc_info:
            parse_template("{bar}{baz}")
        assert exc_info.value.position == 5

    def test_consecutive_inside(self) -> None:
        with pytest.raises(MalformedTemplate, match="Consecutive"):
            parse_template("x{a}{b}y")

    def test_empty_placeholder(self) -> None:
        with pytest.raises(MalformedTemplate, match="Empty placeholder"):
            parse_template("foo{}bar")

    def test_illegal_identifier(self) -> None:
        with pytest.raises(IllegalIdentifier) as exc_info:
            parse_template("foo{%$}baz")
        assert exc_info.value.name == "%$"
        assert exc_info.value.position == 3

    @pytest.mark.parametrize("raw", ["{1a}", "{a-b}", "{a b}", "x{:int}"])
    def test_illegal_identifier_variants(self, raw: str) -> None:
        with pytest.raises(IllegalIdentifier):
            parse_template(raw)

    def test_duplicate(self) -> None:
        with pytest.raises(DuplicatePlaceholder) as exc_info:
            parse_template("foo{bar}baz{bar}")
        assert exc_info.value.name == "bar"
        assert exc_info.value.position == 11

    @pytest.mark.parametrize(
        "raw",
        ["{bar}{baz}", "foo{bar}baz{bar}", "foo{%$}baz", "{bar", "bar}", "{}"],
    )
    def test_all_rejections_are_template_errors(self, raw: str) -> None:
        with pytest.raises(TemplateError) as exc_info:
            parse_template(raw)
        assert exc_info.value.template == raw
