"""
Plain-text table generator.

This module provides the TableGenerator class, which assembles named
columns into an ASCII table with borders, a centered header row and
per-cell padding.

Example output (padding=2, SALARY right-aligned):
    +---------------+-------------+------------------+
    |   EMPLOYEE    |  JOB TITLE  |      SALARY      |
    +---------------+-------------+------------------+
    |  Jane Doe     |  CEO        |      $1,200,000  |
    |  John Doe     |  Developer  |         $51,232  |
    |  Joe Sellers  |  Sales      |  (Base) $20,000  |
    +---------------+-------------+------------------+
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import IO, Any

import click

from .column import EMPTY_VALUE, Column
from .exceptions import InvalidArgumentError, OutOfRangeError
from .formatter import Alignment, Field, fill

logger = logging.getLogger(__name__)

CELL_CONNECTOR_CHAR = "+"
HORIZ_LINE_CHAR = "-"
VERT_LINE_CHAR = "|"
PADDING_CHAR = " "
NEWLINE = "\n"

DEFAULT_PADDING = 2


class TableGenerator:
    """
    Generate text tables from column data.

    Data may be supplied by column (add_column with values) or by row
    (add_row). Columns render left to right in the order they were added.
    Rendering never modifies the columns, so `render` can be called any
    number of times with identical results.

    Not thread-safe: callers sharing one generator across threads must
    hold their own lock across a mutate-then-render sequence.
    """

    def __init__(
        self,
        columns: Iterable[Column] | None = None,
        padding: int = DEFAULT_PADDING,
        print_headers: bool = True,
    ) -> None:
        """
        Initialize the generator.

        Args:
            columns: Columns to add, in left-to-right order
            padding: Spaces on each side of every cell's text
            print_headers: Whether to render the header row

        Raises:
            InvalidArgumentError: If padding is negative
        """
        self._columns: list[Column] = []
        self._padding = DEFAULT_PADDING
        self.print_headers = print_headers

        self.set_padding(padding)
        for column in columns or ():
            self.add_column(column)

    @classmethod
    def from_rows(
        cls,
        headers: Sequence[str],
        rows: Iterable[Sequence[object]],
        **options: Any,
    ) -> TableGenerator:
        """
        Build a generator from a header list and row data.

        Args:
            headers: Column names, one column is created per header
            rows: Row values; see add_row for short and long rows
            **options: Passed through to the constructor (padding, print_headers)
        """
        generator = cls([Column(name) for name in headers], **options)
        generator.add_rows(rows)
        return generator

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def padding(self) -> int:
        """Number of padding characters on each side of every cell."""
        return self._padding

    @padding.setter
    def padding(self, padding: int) -> None:
        self.set_padding(padding)

    def set_padding(self, padding: int) -> None:
        """
        Set the number of spaces to the left and right of each cell's value.

        Raises:
            InvalidArgumentError: If padding is negative. The current
                padding is kept.
        """
        self.check_padding(padding)
        self._padding = padding

    @staticmethod
    def check_padding(padding: int) -> None:
        """Raise InvalidArgumentError unless padding is a non-negative integer."""
        if isinstance(padding, bool) or not isinstance(padding, int):
            raise InvalidArgumentError("set_padding", "padding", padding, "must be an integer")
        if padding < 0:
            logger.debug("Rejected negative padding %d", padding)
            raise InvalidArgumentError("set_padding", "padding", padding, "must be >= 0")

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    @property
    def columns(self) -> list[Column]:
        """The columns in render order (a new list; the columns themselves are shared)."""
        return list(self._columns)

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    def add_column(
        self,
        column: Column | str,
        values: Iterable[object] | None = None,
    ) -> Column:
        """
        Add a column to the right of the existing columns.

        Args:
            column: A Column, or a name to create one from
            values: Initial values when creating a column from a name

        Returns:
            The column that was added
        """
        if not isinstance(column, Column):
            column = Column(column, values)
        elif values is not None:
            column.add_values(values)
        self._columns.append(column)
        return column

    def get_column_by_index(self, index: int) -> Column:
        """
        Return the column at a zero-based index.

        Raises:
            OutOfRangeError: If index is outside [0, num_columns)
        """
        if index < 0 or index >= len(self._columns):
            raise OutOfRangeError("column", index, len(self._columns))
        return self._columns[index]

    def get_column_by_name(self, name: str) -> Column | None:
        """Return the first column with the given name, or None."""
        for column in self._columns:
            if column.name == name:
                return column
        return None

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    @property
    def num_rows(self) -> int:
        """Row count of the longest column; also the number of rendered rows."""
        return max((column.num_rows for column in self._columns), default=0)

    def add_row(self, values: Sequence[object]) -> None:
        """
        Add a row of values, one per column from the left.

        Columns that are shorter than the table are back-filled with empty
        values first so the new value lands on the new row. Extra values
        beyond the number of columns are dropped, and columns past the end
        of a short row are left untouched.

        Raises:
            InvalidArgumentError: If values is a bare string
        """
        if isinstance(values, str):
            raise InvalidArgumentError(
                "add_row", "values", values, "expected a sequence of values, not a string"
            )
        num_rows = self.num_rows
        for column, value in zip(self._columns, values):
            while column.num_rows < num_rows:
                column.add_value(EMPTY_VALUE)
            column.add_value(value)

    def add_rows(self, rows: Iterable[Sequence[object]]) -> None:
        for row in rows:
            self.add_row(row)

    def get_cell_value(self, row: int, column: int) -> str:
        """
        Return the value rendered at (row, column).

        Rows past the end of a shorter column read as empty values.

        Raises:
            OutOfRangeError: If row or column is outside the table
        """
        col = self.get_column_by_index(column)
        if row < 0 or row >= self.num_rows:
            raise OutOfRangeError("row", row, self.num_rows)
        return col.get_row_value(row) if row < col.num_rows else EMPTY_VALUE

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """
        Render the entire table from the current columns and settings.

        Returns:
            The table text; every line, including the last, ends in a newline
        """
        widths = [column.width for column in self._columns]
        rows = self.num_rows
        logger.debug(
            "Rendering table: %d columns, %d rows, widths=%s, padding=%d",
            len(widths),
            rows,
            widths,
            self._padding,
        )

        rule = self._horizontal_line(widths)
        lines: list[str] = [rule]
        if self.print_headers:
            lines.append(self._header_line(widths))
            lines.append(rule)
        for row in range(rows):
            lines.append(self._row_line(row, widths))
        lines.append(rule)

        return "".join(lines)

    def generate(self) -> str:
        """Alias for render()."""
        return self.render()

    def print(self, file: IO[str] | None = None) -> None:
        """Write the rendered table to `file` (stdout by default), byte for byte."""
        click.echo(self.render(), file=file, nl=False, color=True)

    def __str__(self) -> str:
        return self.render()

    def _horizontal_line(self, widths: list[int]) -> str:
        parts = [
            CELL_CONNECTOR_CHAR + fill(width + 2 * self._padding, HORIZ_LINE_CHAR)
            for width in widths
        ]
        return "".join(parts) + CELL_CONNECTOR_CHAR + NEWLINE

    def _header_line(self, widths: list[int]) -> str:
        cells = [
            self._cell(Field(column.name, width, Alignment.CENTER))
            for column, width in zip(self._columns, widths)
        ]
        return "".join(cells) + VERT_LINE_CHAR + NEWLINE

    def _row_line(self, row: int, widths: list[int]) -> str:
        cells = []
        for column, width in zip(self._columns, widths):
            text = column.get_row_value(row) if row < column.num_rows else EMPTY_VALUE
            cells.append(self._cell(Field(text, width, column.alignment)))
        return "".join(cells) + VERT_LINE_CHAR + NEWLINE

    def _cell(self, field: Field) -> str:
        padding = fill(self._padding, PADDING_CHAR)
        return VERT_LINE_CHAR + padding + field.fitted_text + padding
