"""Table: the public entry point tying cells, layout, styles and rendering together."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence

from stybulate.cell import Cell, cell
from stybulate.config import default_style
from stybulate.layout import check_shape, compute_layout
from stybulate.renderer import render
from stybulate.style import Align, check_alignment, get_format, normalize_style_name

logger = logging.getLogger(__name__)


class Table:
    """A grid of cells with optional headers, rendered in one of the built-in styles.

    Raw values are wrapped with :func:`stybulate.cell.cell`, so ``42``,
    ``3.14`` and ``"text"`` can be passed directly. The shape is checked on
    construction: every row must have as many cells as the headers (or, with
    no headers, as the first row).

    Example::

        >>> print(Table("fancy", [["answer", 42], ["pi", 3.1415]],
        ...             ["strings", "numbers"]).tabulate())
        ╒═══════════╤═══════════╕
        │ strings   │   numbers │
        ╞═══════════╪═══════════╡
        │ answer    │   42      │
        ├───────────┼───────────┤
        │ pi        │    3.1415 │
        ╘═══════════╧═══════════╛
    """

    def __init__(
        self,
        style: str,
        rows: Iterable[Sequence[Any]],
        headers: Sequence[Any] | None = None,
    ) -> None:
        self._format = get_format(style)
        self.style = normalize_style_name(style)
        self.rows: list[tuple[Cell, ...]] = [tuple(cell(v) for v in row) for row in rows]
        self.headers: tuple[str, ...] | None = (
            tuple(str(h) for h in headers) if headers is not None else None
        )
        check_shape(self.rows, self.headers)
        self.str_align: Align = self._format.str_align
        self.num_align: Align = self._format.num_align
        self._border_fn: Callable[[str], str] | None = None

    def set_align(self, str_align: str, num_align: str) -> None:
        """Set the alignment of text columns and of numeric columns.

        Raises:
            InvalidAlignmentError: if *str_align* is ``"decimal"`` or either
                value is not a known alignment.
        """
        self.str_align = check_alignment(str_align, numeric=False)
        self.num_align = check_alignment(num_align, numeric=True)

    def set_border_style(self, fn: Callable[[str], str] | None) -> None:
        """Wrap every border glyph with *fn*, e.g. to colour the frame. ``None`` resets."""
        self._border_fn = fn

    def tabulate(self) -> str:
        fmt = self._format
        if self._border_fn is not None:
            fmt = fmt.apply_style(self._border_fn)
        layout = compute_layout(self.rows, self.headers, num_align=self.num_align)
        logger.debug(
            "Tabulating %d row(s) x %d column(s) in style %s",
            len(self.rows),
            layout.column_count,
            self.style,
        )
        return render(layout, fmt, self.str_align, self.num_align)


def tabulate(
    rows: Iterable[Sequence[Any]],
    headers: Sequence[Any] | None = None,
    style: str | None = None,
    str_align: str | None = None,
    num_align: str | None = None,
) -> str:
    """Render *rows* in one call. *style* defaults to :func:`default_style`."""
    table = Table(style if style is not None else default_style(), rows, headers)
    if str_align is not None or num_align is not None:
        table.set_align(str_align or table.str_align, num_align or table.num_align)
    return table.tabulate()
