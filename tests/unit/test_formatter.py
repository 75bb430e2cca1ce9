"""Tests for the field formatter."""

import pytest

from fwtable.exceptions import InvalidArgumentError
from fwtable.formatter import (
    ELLIPSIS,
    Alignment,
    Field,
    align,
    center,
    fill,
    left_justify,
    right_justify,
)


class TestFill:
    """Tests for fill."""

    def test_fill_repeats_char(self) -> None:
        assert fill(5, "-") == "-----"

    def test_fill_zero_width(self) -> None:
        assert fill(0, "-") == ""

    def test_fill_negative_width_is_empty(self) -> None:
        """Negative widths produce no output rather than an error."""
        assert fill(-3, "-") == ""


class TestAlign:
    """Tests for align and its convenience wrappers."""

    def test_left(self) -> None:
        assert align("abc", 7, "*", Alignment.LEFT) == "abc****"

    def test_right(self) -> None:
        assert align("abc", 7, "*", Alignment.RIGHT) == "****abc"

    def test_center_even_padding(self) -> None:
        assert align("ab", 6, " ", Alignment.CENTER) == "  ab  "

    def test_center_odd_padding_is_right_heavy(self) -> None:
        """floor(pad/2) leading, ceil(pad/2) trailing."""
        result = align("abc", 8, " ", Alignment.CENTER)
        assert result == "  abc   "
        assert len(result) - len(result.lstrip(" ")) == 2
        assert len(result) - len(result.rstrip(" ")) == 3

    def test_center_leading_pad_is_always_space(self) -> None:
        """Only the trailing pad honors a custom pad character."""
        assert align("abc", 8, "*", Alignment.CENTER) == "  abc***"

    def test_exact_width_is_unpadded(self) -> None:
        for alignment in Alignment:
            assert align("abcd", 4, "*", alignment) == "abcd"

    def test_accepts_alignment_names(self) -> None:
        assert align("x", 3, ".", "right") == "..x"

    def test_rejects_multi_char_pad(self) -> None:
        with pytest.raises(InvalidArgumentError, match="pad_char"):
            align("x", 3, "ab", Alignment.LEFT)

    def test_left_justify(self) -> None:
        assert left_justify("ab", 4) == "ab  "

    def test_right_justify(self) -> None:
        assert right_justify("ab", 4) == "  ab"

    def test_center_ignores_pad_char(self) -> None:
        assert center("ab", 5, "*") == " ab  "

    @pytest.mark.parametrize("alignment", list(Alignment))
    @pytest.mark.parametrize("text,width", [("", 0), ("", 4), ("a", 1), ("hello", 12)])
    def test_padding_recovers_text(self, alignment: Alignment, text: str, width: int) -> None:
        """Stripping the pad characters gives back the original text."""
        result = align(text, width, "#", alignment)
        assert len(result) == width
        assert result.strip(" #") == text


class TestAlignmentParse:
    """Tests for Alignment.parse."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Alignment.CENTER, Alignment.CENTER),
            ("left", Alignment.LEFT),
            ("RIGHT", Alignment.RIGHT),
            (" Center ", Alignment.CENTER),
            ("r", Alignment.RIGHT),
            ("C", Alignment.CENTER),
        ],
    )
    def test_parse(self, value: object, expected: Alignment) -> None:
        assert Alignment.parse(value) is expected  # type: ignore[arg-type]

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidArgumentError, match="expected one of: left, right, center"):
            Alignment.parse("middle")

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Alignment.parse(3)  # type: ignore[arg-type]


class TestField:
    """Tests for Field fitting."""

    def test_left_align(self) -> None:
        field = Field("Hello World!", 20, Alignment.LEFT)
        assert str(field) == "Hello World!        "

    def test_right_align(self) -> None:
        field = Field("Hello World!", 20, Alignment.RIGHT)
        assert str(field) == "        Hello World!"

    def test_center_align(self) -> None:
        field = Field("Hello World!", 20, Alignment.CENTER)
        assert str(field) == "    Hello World!    "

    def test_field_too_small_truncates_with_ellipsis(self) -> None:
        field = Field("Hello World!", 8, Alignment.CENTER)
        assert field.fitted_text == "Hello..."

    def test_defaults(self) -> None:
        field = Field("ab", 4)
        assert field.alignment is Alignment.LEFT
        assert field.pad_char == " "
        assert field.fitted_text == "ab  "

    def test_custom_pad_char(self) -> None:
        assert Field("7", 3, Alignment.RIGHT, "0").fitted_text == "007"

    @pytest.mark.parametrize("width", [3, 4, 5, 10])
    def test_truncation_properties(self, width: int) -> None:
        text = "abcdefghijklmnop"
        fitted = Field(text, width).fitted_text
        assert len(fitted) == width
        assert fitted.endswith(ELLIPSIS)
        assert fitted[: width - 3] == text[: width - 3]

    def test_width_three_is_only_ellipsis(self) -> None:
        assert Field("abcd", 3).fitted_text == "..."

    @pytest.mark.parametrize("width,expected", [(2, "ab"), (1, "a"), (0, "")])
    def test_narrow_width_truncates_without_ellipsis(self, width: int, expected: str) -> None:
        assert Field("abcdef", width).fitted_text == expected

    def test_negative_width_is_empty(self) -> None:
        assert Field("abc", -1).fitted_text == ""

    def test_non_string_text_is_converted(self) -> None:
        assert Field(42, 4, Alignment.RIGHT).fitted_text == "  42"  # type: ignore[arg-type]

    def test_mutation_changes_output(self) -> None:
        field = Field("abc", 5)
        field.width = 6
        field.alignment = Alignment.RIGHT
        field.pad_char = "."
        assert field.fitted_text == "...abc"

    def test_rejects_empty_pad_char(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Field("abc", 5, Alignment.LEFT, "")
