"""Cell values and their display formatting.

A cell is one of three immutable Pydantic models, discriminated by ``type``:
``IntCell``, ``FloatCell`` or ``TextCell``. ``format_cell`` turns any of them
into the list of display lines the layout works with.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, TypeAdapter, ValidationError

from stybulate.errors import InvalidCellError

# Maximum number of fractional digits shown for a float.
FLOAT_PRECISION = 4


# --- Cell variants ---


class IntCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["int"] = "int"
    value: StrictInt


class FloatCell(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["float"] = "float"
    value: float


class TextCell(BaseModel):
    """Text content, optionally holding ANSI styling markers and newlines."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str


Cell = Annotated[Union[IntCell, FloatCell, TextCell], Field(discriminator="type")]

_CELL_ADAPTER: TypeAdapter[Cell] = TypeAdapter(Cell)


# --- Constructors ---


def cell(value: Any) -> Cell:
    """Wrap a Python value in the matching cell variant.

    ``int`` becomes an ``IntCell`` and ``float`` a ``FloatCell``. A mapping
    carrying a ``type`` key is validated as a serialized cell. Anything else,
    booleans included, is shown as text.

    Raises:
        InvalidCellError: if a serialized cell fails validation.
    """
    if isinstance(value, (IntCell, FloatCell, TextCell)):
        return value
    if isinstance(value, bool):
        return TextCell(text=str(value))
    if isinstance(value, int):
        return IntCell(value=value)
    if isinstance(value, float):
        return FloatCell(value=value)
    if isinstance(value, Mapping) and "type" in value:
        try:
            return _CELL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise InvalidCellError(f"Invalid serialized cell {dict(value)!r}: {exc}") from exc
    return TextCell(text=str(value))


def parse_cell(token: str) -> Cell:
    """Classify a raw text token: integer literal, float literal, or text."""
    try:
        return IntCell(value=int(token))
    except ValueError:
        pass
    try:
        return FloatCell(value=float(token))
    except ValueError:
        return TextCell(text=token)


# --- Formatting ---


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        return str(value)
    text = f"{value:.{FLOAT_PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_cell(c: Cell) -> list[str]:
    """Return the display lines of *c*. Always at least one line."""
    match c:
        case IntCell():
            return [str(c.value)]
        case FloatCell():
            return [format_float(c.value)]
        case TextCell():
            return c.text.split("\n")
        case _:
            raise TypeError(f"Not a cell: {c!r}")


def is_number(c: Cell) -> bool:
    return isinstance(c, (IntCell, FloatCell))


def line_count(c: Cell) -> int:
    if isinstance(c, TextCell):
        return c.text.count("\n") + 1
    return 1
