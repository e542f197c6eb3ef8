"""stybulate: tabulate with style. Aligned, border-decorated text tables."""

# Cells
from stybulate.cell import (
    FLOAT_PRECISION,
    Cell,
    FloatCell,
    IntCell,
    TextCell,
    cell,
    format_cell,
    parse_cell,
)

# Configuration
from stybulate.config import DEFAULT_STYLE_ENV, default_style

# Errors
from stybulate.errors import (
    InvalidAlignmentError,
    InvalidCellError,
    ShapeMismatchError,
    StybulateError,
    UnknownStyleError,
)

# Layout and rendering
from stybulate.layout import MIN_PADDING, ColumnSpec, Layout, compute_layout
from stybulate.renderer import render

# Styles
from stybulate.style import (
    STYLE_NAMES,
    STYLES,
    Align,
    DataRow,
    Line,
    StyleName,
    TableFormat,
    get_format,
)

# Table
from stybulate.table import Table, tabulate

# Utilities
from stybulate.utils import strip_ansi, visible_width

__all__ = [
    # Cells
    "FLOAT_PRECISION",
    "Cell",
    "FloatCell",
    "IntCell",
    "TextCell",
    "cell",
    "format_cell",
    "parse_cell",
    # Configuration
    "DEFAULT_STYLE_ENV",
    "default_style",
    # Errors
    "InvalidAlignmentError",
    "InvalidCellError",
    "ShapeMismatchError",
    "StybulateError",
    "UnknownStyleError",
    # Layout and rendering
    "MIN_PADDING",
    "ColumnSpec",
    "Layout",
    "compute_layout",
    "render",
    # Styles
    "STYLE_NAMES",
    "STYLES",
    "Align",
    "DataRow",
    "Line",
    "StyleName",
    "TableFormat",
    "get_format",
    # Table
    "Table",
    "tabulate",
    # Utilities
    "strip_ansi",
    "visible_width",
]
