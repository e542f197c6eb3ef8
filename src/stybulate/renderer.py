"""Render a computed layout with a table style."""

from __future__ import annotations

from typing import Sequence

from stybulate.layout import CellLines, Layout
from stybulate.style import Align, DataRow, Line, TableFormat
from stybulate.utils import visible_width


def pad(text: str, width: int, align: Align) -> str:
    """Pad *text* with spaces to *width* display columns. Never truncates."""
    fill = width - visible_width(text)
    if fill <= 0:
        return text
    if align == "left":
        return text + " " * fill
    if align == "center":
        left = fill // 2
        return " " * left + text + " " * (fill - left)
    return " " * fill + text


def render_line(line: Line, column_widths: Sequence[int]) -> str:
    runs = line.sep.join(line.hline * width for width in column_widths)
    return (line.begin + runs + line.end).rstrip()


def render_row(row: DataRow, cells: Sequence[str]) -> str:
    return (row.begin + row.sep.join(cells) + row.end).rstrip()


def _content_lines(
    row: DataRow,
    cells: Sequence[CellLines],
    count: int,
    widths: Sequence[int],
    aligns: Sequence[Align],
) -> list[str]:
    return [
        render_row(
            row,
            [pad(lines[i], width, align) for lines, width, align in zip(cells, widths, aligns)],
        )
        for i in range(count)
    ]


def render(
    layout: Layout,
    fmt: TableFormat,
    str_align: Align = "left",
    num_align: Align = "decimal",
) -> str:
    """Build the table text: borders, header block and body rows joined by newlines.

    Numeric columns (header included) use *num_align*, the others *str_align*.
    A border line that renders empty is dropped, so a table with no columns
    and no rows is either the bare corner frame or an empty string.
    """
    widths = layout.column_widths
    aligns = [num_align if spec.numeric else str_align for spec in layout.specs]
    has_headers = layout.headers is not None
    lines: list[str] = []

    def _border(line: Line | None) -> None:
        if line is None:
            return
        text = render_line(line, widths)
        if text:
            lines.append(text)

    if not (has_headers and fmt.hide_line_above_if_header):
        _border(fmt.line_above)

    if layout.headers is not None:
        lines.extend(
            _content_lines(fmt.header_row, layout.headers, layout.header_line_count, widths, aligns)
        )
        _border(fmt.line_below_header)

    for index, (cells, count) in enumerate(zip(layout.rows, layout.row_line_counts)):
        if index:
            _border(fmt.line_between_rows)
        lines.extend(_content_lines(fmt.data_row, cells, count, widths, aligns))

    if not (has_headers and fmt.hide_line_below_if_header):
        _border(fmt.line_below)

    return "\n".join(lines)
