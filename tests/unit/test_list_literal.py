"""Tests for list-literal recovery"""
from datetime import datetime

import pytest

from column_extractor.models.extraction import PassThrough, RecoveredList
from column_extractor.parsers.list_literal import looks_like_list, parse_list_literal


class TestRecovery:
    """Bracketed literals that parse to JSON arrays"""

    def test_single_quoted_list_is_recovered(self):
        result = parse_list_literal("['Add', 'Stir']")
        assert result == RecoveredList(("Add", "Stir"))
        assert result.value == ["Add", "Stir"]
        assert result.is_list

    def test_double_quoted_list_is_recovered(self):
        assert parse_list_literal('["a", "b"]') == RecoveredList(("a", "b"))

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_list_literal("  ['x','y']\n") == RecoveredList(("x", "y"))

    def test_empty_list(self):
        assert parse_list_literal("[]") == RecoveredList(())

    def test_numeric_elements_are_kept(self):
        assert parse_list_literal("[1, 2.5]") == RecoveredList((1, 2.5))

    def test_nested_list(self):
        assert parse_list_literal("[['a'], ['b']]") == RecoveredList((["a"], ["b"]))

    def test_same_input_gives_same_result(self):
        assert parse_list_literal("['Add', 'Stir']") == parse_list_literal("['Add', 'Stir']")


class TestPassThrough:
    """Values returned unchanged"""

    def test_plain_text(self):
        result = parse_list_literal("plain text")
        assert result == PassThrough("plain text")
        assert not result.is_list

    def test_unterminated_literal(self):
        assert parse_list_literal("[unterminated") == PassThrough("[unterminated")

    def test_apostrophe_inside_element_breaks_quote_substitution(self):
        """Quote substitution turns the apostrophe into a stray double quote"""
        assert parse_list_literal("['It's ok']") == PassThrough("['It's ok']")

    def test_empty_string(self):
        assert parse_list_literal("") == PassThrough("")

    def test_failed_recovery_returns_untrimmed_original(self):
        assert parse_list_literal("  [a, b]  ") == PassThrough("  [a, b]  ")

    def test_non_bracketed_text_is_not_trimmed(self):
        assert parse_list_literal("  padded  ") == PassThrough("  padded  ")

    def test_non_string_values(self):
        when = datetime(2024, 1, 15, 9, 30)
        assert parse_list_literal(42) == PassThrough(42)
        assert parse_list_literal(3.5) == PassThrough(3.5)
        assert parse_list_literal(when) == PassThrough(when)

    def test_nan_is_not_accepted(self):
        assert parse_list_literal("[NaN]") == PassThrough("[NaN]")

    def test_bracketed_object_like_text(self):
        assert parse_list_literal("[{'a': 1}") == PassThrough("[{'a': 1}")


class TestLooksLikeList:
    """Tests for the bracket check"""

    def test_bracketed(self):
        assert looks_like_list(" [1] ")

    def test_not_bracketed(self):
        assert not looks_like_list("[1")
        assert not looks_like_list("")
        assert not looks_like_list(["a"])


class TestTrimming:
    """Which surrounding characters count as whitespace"""

    def test_leading_bom_is_trimmed(self):
        assert parse_list_literal("\ufeff['a']") == RecoveredList(("a",))

    def test_unicode_spaces_are_trimmed(self):
        assert parse_list_literal("\u3000['a']\xa0") == RecoveredList(("a",))

    def test_control_separators_are_not_trimmed(self):
        assert parse_list_literal("\x1c['a']") == PassThrough("\x1c['a']")
        assert parse_list_literal("['a']\x85") == PassThrough("['a']\x85")


class TestRecoveredListIsFrozen:
    """Nested values of a recovered list can't be changed"""

    def test_nested_lists_become_tuples(self):
        result = parse_list_literal("[['a', 'b'], 'c']")
        assert result.items == (("a", "b"), "c")
        with pytest.raises(TypeError):
            result.items[0][0] = "z"

    def test_nested_objects_are_read_only(self):
        result = parse_list_literal("[{'k': ['v']}]")
        with pytest.raises(TypeError):
            result.items[0]["k"] = "z"
        assert result.items[0]["k"] == ("v",)

    def test_value_returns_plain_copies(self):
        result = parse_list_literal("[['a'], {'k': 1}]")
        value = result.value
        assert value == [["a"], {"k": 1}]
        value[0].append("b")
        assert result.value == [["a"], {"k": 1}]
