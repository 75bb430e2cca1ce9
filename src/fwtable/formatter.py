"""
Fixed-width text field formatting.

This module provides the pure functions used to pad, align and truncate
a single text value to an exact width, plus the Field value object that
bundles one such request.

Example:
    >>> from fwtable.formatter import Alignment, Field, align
    >>> align("abc", 7, "*", Alignment.RIGHT)
    '****abc'
    >>> str(Field("Hello World!", 8))
    'Hello...'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidArgumentError

ELLIPSIS = "..."
DEFAULT_PAD_CHAR = " "


class Alignment(Enum):
    """Placement of a value within its field."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """
        Coerce a user-supplied alignment.

        Accepts an Alignment, its name or value in any case, or one of the
        shorthands 'l', 'r' and 'c'.

        Raises:
            InvalidArgumentError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        raise InvalidArgumentError(
            "Alignment.parse",
            "alignment",
            value,
            "expected one of: " + ", ".join(m.value for m in cls),
        )


def _check_pad_char(operation: str, pad_char: str) -> None:
    if not isinstance(pad_char, str) or len(pad_char) != 1:
        raise InvalidArgumentError(
            operation, "pad_char", pad_char, "must be exactly one character"
        )


def fill(width: int, char: str) -> str:
    """Return `width` repetitions of `char`; negative widths give an empty string."""
    return char * max(width, 0)


def align(text: str, width: int, pad_char: str, alignment: Alignment) -> str:
    """
    Pad text to `width` characters according to `alignment`.

    CENTER places floor(pad / 2) plain spaces before the text and pads the
    remainder after it with `pad_char`, so an odd unit of padding lands on
    the right. Text already as long as the field is returned unpadded;
    truncation is handled by Field.

    Args:
        text: Value to place in the field
        width: Total field width
        pad_char: Single character used for padding
        alignment: LEFT, RIGHT or CENTER

    Returns:
        The padded text
    """
    _check_pad_char("align", pad_char)
    alignment = Alignment.parse(alignment)
    pad_size = width - len(text)

    if alignment is Alignment.RIGHT:
        return fill(pad_size, pad_char) + text
    if alignment is Alignment.CENTER:
        leading = pad_size // 2 if pad_size > 0 else 0
        return fill(leading, " ") + text + fill(width - leading - len(text), pad_char)
    return text + fill(pad_size, pad_char)


def left_justify(text: str, width: int) -> str:
    """Left-justify text in a space-padded field."""
    return align(text, width, DEFAULT_PAD_CHAR, Alignment.LEFT)


def right_justify(text: str, width: int) -> str:
    """Right-justify text in a space-padded field."""
    return align(text, width, DEFAULT_PAD_CHAR, Alignment.RIGHT)


def center(text: str, width: int, pad_char: str = DEFAULT_PAD_CHAR) -> str:
    """
    Center text in a space-padded field.

    `pad_char` is accepted for call compatibility but centering always pads
    with spaces.
    """
    return align(text, width, DEFAULT_PAD_CHAR, Alignment.CENTER)


@dataclass
class Field:
    """
    A single fixed-width rendering request.

    The fitted text is always exactly `width` characters long. Values that
    fit are aligned and padded; longer values are cut to `width - 3`
    characters and marked with an ellipsis. Fields narrower than the
    ellipsis itself keep the first `width` characters with no marker.

    Attributes:
        text: The value within the field
        width: Width of the field in characters
        alignment: Placement of the value when it is shorter than the field
        pad_char: Character used to fill the unused part of the field
    """

    text: str
    width: int
    alignment: Alignment = Alignment.LEFT
    pad_char: str = DEFAULT_PAD_CHAR

    def __post_init__(self) -> None:
        self.text = str(self.text)
        self.alignment = Alignment.parse(self.alignment)
        _check_pad_char("Field", self.pad_char)

    @property
    def fitted_text(self) -> str:
        """The text padded or truncated to exactly `width` characters."""
        if len(self.text) <= self.width:
            return align(self.text, self.width, self.pad_char, self.alignment)
        if self.width < len(ELLIPSIS):
            return self.text[: max(self.width, 0)]
        return self.text[: self.width - len(ELLIPSIS)] + ELLIPSIS

    def __str__(self) -> str:
        return self.fitted_text
