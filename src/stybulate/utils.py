"""Terminal text utilities: ANSI marker stripping and display width measurement.

Widths are measured per grapheme cluster so that combining marks, East Asian
wide characters and emoji occupy the number of columns a terminal gives them.
Styling markers never contribute to the width.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

# A sequence missing its terminator runs to the end of the string.
_STRIP_RE = re.compile(
    r"\x1b\[[^@-~]*(?:[@-~]|$)"                             # CSI
    r"|\x1b\](?:[^\x07\x1b]|\x1b(?!\\))*(?:\x07|\x1b\\|$)"  # OSC
    r"|\x1b_(?:[^\x07\x1b]|\x1b(?!\\))*(?:\x07|\x1b\\|$)"   # APC
    r"|\x1b$"
)


def strip_ansi(text: str) -> str:
    """Return *text* with every styling marker sequence removed."""
    if "\x1b" not in text:
        return text
    return _STRIP_RE.sub("", text)


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    # Single codepoint fast path
    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):  # VS16, ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first = g[0]
    first_cp = ord(first)
    if first_cp >= 0x1F000 or 0x2600 <= first_cp <= 0x27BF:
        return 2

    cat = unicodedata.category(first)
    if cat.startswith("M") or cat == "Cf":
        return 0

    return max(_wcwidth.wcwidth(first), 0)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Calculate the number of terminal columns *text* occupies.

    * Strips ANSI escape sequences.
    * Uses a fast ASCII path when possible.
    * Counts wide and fullwidth characters as two columns.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    return sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))


def multiline_width(lines: Iterable[str]) -> int:
    """Return the widest ``visible_width`` among *lines*, 0 when there are none."""
    return max((visible_width(line) for line in lines), default=0)
