"""Layout: format every cell and size the grid.

The layout step turns raw cells into display lines and derives the two
metrics the renderer needs: the width of each column and the number of
physical lines of each row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from stybulate.cell import Cell, format_cell, is_number, line_count
from stybulate.errors import ShapeMismatchError
from stybulate.style import Align
from stybulate.utils import multiline_width

logger = logging.getLogger(__name__)

# Extra columns reserved around every header.
MIN_PADDING = 2

CellLines = tuple[str, ...]


@dataclass(frozen=True)
class ColumnSpec:
    """Per-column classification.

    ``numeric`` is true when every body cell of the column is a number (so a
    column without body cells counts as numeric). ``decimals`` is the largest
    number of fractional digits among its numbers, -1 when none has a point.
    """

    numeric: bool
    decimals: int = -1


@dataclass(frozen=True)
class Layout:
    column_widths: tuple[int, ...]
    row_line_counts: tuple[int, ...]
    header_line_count: int
    headers: tuple[CellLines, ...] | None
    rows: tuple[tuple[CellLines, ...], ...]
    specs: tuple[ColumnSpec, ...]

    @property
    def column_count(self) -> int:
        return len(self.column_widths)


def check_shape(rows: Sequence[Sequence[Cell]], headers: Sequence[str] | None) -> None:
    """Fail fast when a row does not match the header (or first row) length."""
    if headers is not None:
        expected = len(headers)
    elif rows:
        expected = len(rows[0])
    else:
        return
    for index, row in enumerate(rows):
        if len(row) != expected:
            logger.debug("Rejecting row %d: %r", index, row)
            raise ShapeMismatchError(index, expected, len(row))


def afterpoint(text: str) -> int:
    """Digits after the decimal point of a formatted number, -1 without a point.

    >>> afterpoint("123.45")
    2
    >>> afterpoint("1001")
    -1
    """
    pos = text.rfind(".")
    if pos < 0:
        return -1
    return len(text) - pos - 1


def _pad_lines(lines: Sequence[str], count: int) -> CellLines:
    return tuple(lines) + ("",) * (count - len(lines))


def _align_points(formatted: list[list[list[str]]], specs: Sequence[ColumnSpec]) -> None:
    # Right-pad numbers so the points line up once the column is right-aligned.
    for col, spec in enumerate(specs):
        if not spec.numeric or spec.decimals < 0:
            continue
        for cells in formatted:
            text = cells[col][0]
            cells[col] = [text + " " * (spec.decimals - afterpoint(text))]


def compute_layout(
    rows: Sequence[Sequence[Cell]],
    headers: Sequence[str] | None = None,
    num_align: Align = "decimal",
) -> Layout:
    """Format *rows* and *headers* and compute column widths and row heights.

    Raises:
        ShapeMismatchError: if the rows are ragged or disagree with *headers*.
    """
    check_shape(rows, headers)

    if headers is not None:
        column_count = len(headers)
    else:
        column_count = len(rows[0]) if rows else 0

    formatted = [[format_cell(c) for c in row] for row in rows]

    specs: list[ColumnSpec] = []
    for col in range(column_count):
        if not all(is_number(row[col]) for row in rows):
            specs.append(ColumnSpec(numeric=False))
            continue
        decimals = max((afterpoint(cells[col][0]) for cells in formatted), default=-1)
        specs.append(ColumnSpec(numeric=True, decimals=decimals))
    if num_align == "decimal":
        _align_points(formatted, specs)

    widths: list[int] = []
    for col in range(column_count):
        width = max((multiline_width(cells[col]) for cells in formatted), default=0)
        if headers is not None:
            width = max(width, multiline_width(headers[col].split("\n")) + MIN_PADDING)
        widths.append(width)

    header_lines: tuple[CellLines, ...] | None = None
    header_line_count = 0
    if headers is not None:
        split = [h.split("\n") for h in headers]
        header_line_count = max((len(lines) for lines in split), default=1)
        header_lines = tuple(_pad_lines(lines, header_line_count) for lines in split)

    line_counts: list[int] = []
    body: list[tuple[CellLines, ...]] = []
    for row, cells in zip(rows, formatted):
        count = max((line_count(c) for c in row), default=1)
        line_counts.append(count)
        body.append(tuple(_pad_lines(lines, count) for lines in cells))

    return Layout(
        column_widths=tuple(widths),
        row_line_counts=tuple(line_counts),
        header_line_count=header_line_count,
        headers=header_lines,
        rows=tuple(body),
        specs=tuple(specs),
    )
