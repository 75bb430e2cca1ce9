"""
fwtable: Fixed-width fields and plain-text tables.

This library renders tabular data as aligned ASCII tables with:
- Left, right and center alignment per column
- Column widths sized to content or fixed, with '...' truncation
- Configurable cell padding and optional header row
- Data supplied by column or by row, ragged rows rendered as empty cells

Example:
    from fwtable import Alignment, Column, TableGenerator

    table = TableGenerator(padding=2)
    table.add_column("EMPLOYEE")
    table.add_column("JOB TITLE")
    table.add_column(Column("SALARY", alignment=Alignment.RIGHT))

    table.add_row(["Jane Doe", "CEO", "$1,200,000"])
    table.add_row(["John Doe", "Developer", "$51,232"])

    print(table.render(), end="")
"""

from .column import AUTO_WIDTH, EMPTY_VALUE, Column
from .config import TableOptions
from .exceptions import FWTableError, InvalidArgumentError, OutOfRangeError
from .formatter import (
    ELLIPSIS,
    Alignment,
    Field,
    align,
    center,
    fill,
    left_justify,
    right_justify,
)
from .generator import DEFAULT_PADDING, TableGenerator

__all__ = [
    # Formatting
    "Alignment",
    "ELLIPSIS",
    "Field",
    "align",
    "center",
    "fill",
    "left_justify",
    "right_justify",
    # Tables
    "AUTO_WIDTH",
    "Column",
    "DEFAULT_PADDING",
    "EMPTY_VALUE",
    "TableGenerator",
    "TableOptions",
    # Exceptions
    "FWTableError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
