"""Environment configuration. The default style can be set with ``STYBULATE_STYLE``."""

from __future__ import annotations

import os

from stybulate.errors import UnknownStyleError
from stybulate.style import STYLES, normalize_style_name

DEFAULT_STYLE_ENV = "STYBULATE_STYLE"
FALLBACK_STYLE = "simple"


def default_style() -> str:
    """Return the style used when none is given explicitly.

    Raises:
        UnknownStyleError: if the environment names a style that does not exist.
    """
    name = os.environ.get(DEFAULT_STYLE_ENV, "").strip()
    if not name:
        return FALLBACK_STYLE
    normalized = normalize_style_name(name)
    if normalized not in STYLES:
        raise UnknownStyleError(name)
    return normalized
