"""Rendering options for tables built outside of Python code."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .column import Column
from .exceptions import InvalidArgumentError
from .formatter import Alignment
from .generator import DEFAULT_PADDING, TableGenerator


def _split_pair(option: str, pair: str) -> tuple[str, str]:
    name, sep, value = pair.rpartition("=")
    if not sep or not name:
        raise InvalidArgumentError(option, "setting", pair, "expected NAME=VALUE")
    return name, value


@dataclass
class TableOptions:
    """Table-wide and per-column rendering settings."""

    padding: int = DEFAULT_PADDING
    print_headers: bool = True
    # Per-column overrides, keyed by column name
    alignments: dict[str, Alignment] = field(default_factory=dict)
    widths: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_cli(
        cls,
        padding: int = DEFAULT_PADDING,
        print_headers: bool = True,
        alignments: Iterable[str] = (),
        widths: Iterable[str] = (),
    ) -> TableOptions:
        """
        Create TableOptions from command-line style settings.

        Args:
            padding: Cell padding
            print_headers: Whether to render the header row
            alignments: "NAME=left|right|center" pairs
            widths: "NAME=N" pairs

        Raises:
            InvalidArgumentError: If a pair is malformed or a value invalid
        """
        parsed_alignments: dict[str, Alignment] = {}
        for pair in alignments:
            name, value = _split_pair("--align", pair)
            parsed_alignments[name] = Alignment.parse(value)

        parsed_widths: dict[str, int] = {}
        for pair in widths:
            name, value = _split_pair("--width", pair)
            try:
                parsed_widths[name] = int(value)
            except ValueError:
                raise InvalidArgumentError(
                    "--width", "width", value, "must be an integer"
                ) from None

        return cls(
            padding=padding,
            print_headers=print_headers,
            alignments=parsed_alignments,
            widths=parsed_widths,
        )

    def apply(self, generator: TableGenerator) -> None:
        """
        Push these options into a generator and its columns.

        Every setting is checked before any is applied, so on error the
        generator and its columns are unchanged.

        Raises:
            InvalidArgumentError: If an override names a column the generator
                does not have, or a value is rejected by the generator
        """
        TableGenerator.check_padding(self.padding)
        alignments = [
            (self._column(generator, name), Alignment.parse(alignment))
            for name, alignment in self.alignments.items()
        ]
        widths = [(self._column(generator, name), width) for name, width in self.widths.items()]
        for _, width in widths:
            Column.check_width(width)

        generator.set_padding(self.padding)
        generator.print_headers = self.print_headers
        for column, alignment in alignments:
            column.alignment = alignment
        for column, width in widths:
            column.width = width

    @staticmethod
    def _column(generator: TableGenerator, name: str) -> Column:
        column = generator.get_column_by_name(name)
        if column is None:
            raise InvalidArgumentError("TableOptions.apply", "column", name, "no such column")
        return column
