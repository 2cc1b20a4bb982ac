"""Tests for wireparams.values: scalar coercion and rendering."""

import pytest

from wireparams.values import IntegerValue, StringValue, coerce, render, to_value


class TestCoerce:
    def test_digits_become_integer(self) -> None:
        assert coerce("123") == IntegerValue(123)

    def test_zero(self) -> None:
        assert coerce("0") == IntegerValue(0)

    def test_leading_zeros_parse(self) -> None:
        assert coerce("007") == IntegerValue(7)

    def test_large_number(self) -> None:
        assert coerce("98765432109876543210") == IntegerValue(98765432109876543210)

    @pytest.mark.parametrize("text", ["abc", "-1", "+1", "4.2", "1e3", " 1", "12a", ""])
    def test_everything_else_is_string(self, text: str) -> None:
        assert coerce(text) == StringValue(text)

    def test_non_ascii_digits_stay_strings(self) -> None:
        assert coerce("²") == StringValue("²")
        assert coerce("٣") == StringValue("٣")


class TestRender:
    def test_integer(self) -> None:
        assert render(IntegerValue(42)) == "42"

    def test_string(self) -> None:
        assert render(StringValue("abc")) == "abc"

    def test_str_dunder_matches_render(self) -> None:
        assert str(IntegerValue(5)) == "5"
        assert str(StringValue("x")) == "x"


class TestToValue:
    def test_int(self) -> None:
        assert to_value(3) == IntegerValue(3)

    def test_str_is_not_coerced(self) -> None:
        assert to_value("3") == StringValue("3")

    def test_value_passes_through(self) -> None:
        v = IntegerValue(1)
        assert to_value(v) is v

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            to_value(True)

    @pytest.mark.parametrize("obj", [1.5, None, b"x", [1]])
    def test_other_types_rejected(self, obj: object) -> None:
        with pytest.raises(TypeError):
            to_value(obj)


class TestTaggedEquality:
    def test_integer_and_string_differ(self) -> None:
        assert IntegerValue(1) != StringValue("1")

    def test_hashable(self) -> None:
        assert len({IntegerValue(1), IntegerValue(1), StringValue("1")}) == 2
