"""Named table columns with per-column alignment and width policy."""

from __future__ import annotations

from collections.abc import Iterable

from .exceptions import InvalidArgumentError, OutOfRangeError
from .formatter import Alignment

# Width setting that makes the column size itself to its content
AUTO_WIDTH = -1

EMPTY_VALUE = ""


def _check_not_str(operation: str, values: object) -> None:
    if isinstance(values, str):
        raise InvalidArgumentError(
            operation, "values", values, "expected an iterable of values, not a string"
        )


class Column:
    """
    A named, ordered sequence of string values.

    The column owns its values: sequences passed in are copied, and
    `values` hands back a copy. Non-string values are stored as `str(value)`.

    Width is either AUTO_WIDTH (the default), in which case `width` reports
    the longest of the name and the current values, or a fixed positive
    width that longer values are truncated to at render time.

    Example:
        col = Column("EMPLOYEE", ["Jane Doe", "John Doe"])
        col.width          # 8
        col.width = 5      # fixed; "Jane Doe" renders as "Ja..."
        col.width = AUTO_WIDTH
    """

    def __init__(
        self,
        name: str,
        values: Iterable[object] | None = None,
        alignment: Alignment | str = Alignment.LEFT,
        width: int = AUTO_WIDTH,
    ) -> None:
        self.name = str(name)
        self._values: list[str] = []
        self._alignment = Alignment.LEFT
        self._width = AUTO_WIDTH

        self.alignment = alignment
        self.width = width
        if values is not None:
            self.add_values(values)

    def __repr__(self) -> str:
        width = "auto" if self._width == AUTO_WIDTH else self._width
        return (
            f"Column(name={self.name!r}, rows={len(self._values)}, "
            f"alignment={self._alignment.value}, width={width})"
        )

    @property
    def alignment(self) -> Alignment:
        """Alignment applied to data cells in this column."""
        return self._alignment

    @alignment.setter
    def alignment(self, alignment: Alignment | str) -> None:
        self._alignment = Alignment.parse(alignment)

    @property
    def width(self) -> int:
        """
        Text width of the column, excluding table padding.

        For AUTO_WIDTH this is recomputed from the name and current values
        on every access.
        """
        if self._width != AUTO_WIDTH:
            return self._width
        return max([len(self.name)] + [len(value) for value in self._values])

    @width.setter
    def width(self, width: int) -> None:
        self.check_width(width)
        self._width = width

    @staticmethod
    def check_width(width: int) -> None:
        """Raise InvalidArgumentError unless width is positive or AUTO_WIDTH."""
        if isinstance(width, bool) or not isinstance(width, int):
            raise InvalidArgumentError("Column.width", "width", width, "must be an integer")
        if width != AUTO_WIDTH and width < 1:
            raise InvalidArgumentError(
                "Column.width", "width", width, "must be positive or AUTO_WIDTH"
            )

    @property
    def fixed_width(self) -> int:
        """The raw width setting: AUTO_WIDTH or the fixed width."""
        return self._width

    @property
    def is_auto_width(self) -> bool:
        return self._width == AUTO_WIDTH

    @property
    def values(self) -> list[str]:
        """A copy of the column's values in row order."""
        return list(self._values)

    @property
    def num_rows(self) -> int:
        """
        Number of values held by this column.

        This can be smaller than the row count of a table holding the column.
        """
        return len(self._values)

    def add_value(self, value: object) -> None:
        self._values.append(str(value))

    def add_values(self, values: Iterable[object]) -> None:
        _check_not_str("add_values", values)
        self._values.extend(str(value) for value in values)

    def set_values(self, values: Iterable[object]) -> None:
        """Replace all values with a copy of `values`."""
        _check_not_str("set_values", values)
        self._values = [str(value) for value in values]

    def clear(self) -> None:
        """Remove every value. Name, alignment and width are kept."""
        self._values.clear()

    def get_row_value(self, row: int) -> str:
        """
        Return the value at a zero-based row index.

        Raises:
            OutOfRangeError: If row is negative or not below num_rows
        """
        if row < 0 or row >= len(self._values):
            raise OutOfRangeError("row", row, len(self._values))
        return self._values[row]
