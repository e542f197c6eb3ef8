"""Table styles: border glyphs, separator policy and default alignments.

A table is structured like so::

    --- line_above -----------
        header_row
    --- line_below_header ----
        data_row
    --- line_between_rows ----
    ... (more data rows) ...
        last data_row
    --- line_below -----------

Every style is an immutable ``TableFormat`` record looked up by name in
``STYLES``; the renderer is a single algorithm parameterized by that record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Callable, Literal, Mapping, get_args

from stybulate.errors import InvalidAlignmentError, UnknownStyleError

Align = Literal["left", "center", "right", "decimal"]

StyleName = Literal[
    "plain",
    "simple",
    "github",
    "grid",
    "fancy",
    "presto",
    "fancygithub",
    "fancypresto",
]

STYLE_NAMES: tuple[str, ...] = get_args(StyleName)
ALIGNMENTS: tuple[str, ...] = get_args(Align)


@dataclass(frozen=True)
class Line:
    """A horizontal border line: ``begin + (hline * width) joined by sep + end``."""

    begin: str
    hline: str
    sep: str
    end: str

    def apply_style(self, fn: Callable[[str], str]) -> Line:
        return Line(fn(self.begin), fn(self.hline), fn(self.sep), fn(self.end))


@dataclass(frozen=True)
class DataRow:
    """A content row: ``begin + cells joined by sep + end``."""

    begin: str
    sep: str
    end: str

    def apply_style(self, fn: Callable[[str], str]) -> DataRow:
        return DataRow(fn(self.begin), fn(self.sep), fn(self.end))


@dataclass(frozen=True)
class TableFormat:
    line_above: Line | None
    line_below_header: Line | None
    line_between_rows: Line | None
    line_below: Line | None
    header_row: DataRow
    data_row: DataRow
    hide_line_above_if_header: bool = False
    hide_line_below_if_header: bool = False
    str_align: Align = "left"
    num_align: Align = "decimal"

    def apply_style(self, fn: Callable[[str], str]) -> TableFormat:
        """Return a copy with every border glyph wrapped by *fn* (e.g. an ANSI colour)."""

        def _line(line: Line | None) -> Line | None:
            return line.apply_style(fn) if line is not None else None

        return replace(
            self,
            line_above=_line(self.line_above),
            line_below_header=_line(self.line_below_header),
            line_between_rows=_line(self.line_between_rows),
            line_below=_line(self.line_below),
            header_row=self.header_row.apply_style(fn),
            data_row=self.data_row.apply_style(fn),
        )


# ---------------------------------------------------------------------------
# Built-in styles
# ---------------------------------------------------------------------------

_BASIC_ROW = DataRow("", "  ", "")
_BASIC_LINE = Line("", "-", "  ", "")
_PIPE_ROW = DataRow("| ", " | ", " |")
_SINGLE_LINE = Line("", "─", "─┼─", "")
_SINGLE_LINE_WITH_ENDS = Line("├─", "─", "─┼─", "─┤")
_BAR_ROW = DataRow("", " │ ", "")
_BAR_ROW_WITH_ENDS = DataRow("│ ", " │ ", " │")
_GRID_LINE = Line("+-", "-", "-+-", "-+")
_GITHUB_LINE = Line("|-", "-", "-|-", "-|")
_PRESTO_ROW = DataRow(" ", " | ", " ")

_PLAIN = TableFormat(
    line_above=None,
    line_below_header=None,
    line_between_rows=None,
    line_below=None,
    header_row=_BASIC_ROW,
    data_row=_BASIC_ROW,
)

STYLES: Mapping[str, TableFormat] = MappingProxyType({
    "plain": _PLAIN,
    "simple": replace(
        _PLAIN,
        line_above=_BASIC_LINE,
        line_below_header=_BASIC_LINE,
        line_below=_BASIC_LINE,
        hide_line_above_if_header=True,
        hide_line_below_if_header=True,
    ),
    "github": replace(
        _PLAIN,
        line_above=_GITHUB_LINE,
        line_below_header=_GITHUB_LINE,
        header_row=_PIPE_ROW,
        data_row=_PIPE_ROW,
        hide_line_above_if_header=True,
    ),
    "grid": replace(
        _PLAIN,
        line_above=_GRID_LINE,
        line_below_header=Line("+=", "=", "=+=", "=+"),
        line_between_rows=_GRID_LINE,
        line_below=_GRID_LINE,
        header_row=_PIPE_ROW,
        data_row=_PIPE_ROW,
    ),
    "fancy": replace(
        _PLAIN,
        line_above=Line("╒═", "═", "═╤═", "═╕"),
        line_below_header=Line("╞═", "═", "═╪═", "═╡"),
        line_between_rows=_SINGLE_LINE_WITH_ENDS,
        line_below=Line("╘═", "═", "═╧═", "═╛"),
        header_row=_BAR_ROW_WITH_ENDS,
        data_row=_BAR_ROW_WITH_ENDS,
    ),
    "presto": replace(
        _PLAIN,
        line_below_header=Line("-", "-", "-+-", "-"),
        header_row=_PRESTO_ROW,
        data_row=_PRESTO_ROW,
    ),
    "fancygithub": replace(
        _PLAIN,
        line_below_header=_SINGLE_LINE_WITH_ENDS,
        header_row=_BAR_ROW_WITH_ENDS,
        data_row=_BAR_ROW_WITH_ENDS,
    ),
    "fancypresto": replace(
        _PLAIN,
        line_below_header=_SINGLE_LINE,
        header_row=_BAR_ROW,
        data_row=_BAR_ROW,
    ),
})


def normalize_style_name(name: str) -> str:
    """Lower-case *name* and drop ``-`` / ``_`` so ``fancy_github`` finds ``fancygithub``."""
    return name.strip().lower().replace("-", "").replace("_", "")


def get_format(style: str) -> TableFormat:
    """Return the ``TableFormat`` registered under *style*.

    Raises:
        UnknownStyleError: if no style has that name.
    """
    fmt = STYLES.get(normalize_style_name(style))
    if fmt is None:
        raise UnknownStyleError(style)
    return fmt


def check_alignment(align: str, *, numeric: bool) -> Align:
    if align not in ALIGNMENTS:
        raise InvalidAlignmentError(f"Unknown alignment {align!r}")
    if align == "decimal" and not numeric:
        raise InvalidAlignmentError(
            "str_align should not be set to decimal, only num_align can"
        )
    return align  # type: ignore[return-value]
