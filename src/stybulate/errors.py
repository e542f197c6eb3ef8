"""Exceptions raised by the table builder."""

from __future__ import annotations


class StybulateError(Exception):
    """Base class for every error raised by stybulate."""


class ShapeMismatchError(StybulateError, ValueError):
    """A row does not have the same number of cells as the header or the other rows."""

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} has {actual} cell(s), expected {expected}"
        )


class UnknownStyleError(StybulateError, ValueError):
    """No table style is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unsupported format "{name}"')


class InvalidAlignmentError(StybulateError, ValueError):
    """Decimal alignment was requested for text columns."""


class InvalidCellError(StybulateError, ValueError):
    """A serialized cell could not be validated."""
