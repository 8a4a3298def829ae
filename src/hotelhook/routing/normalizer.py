"""Identifier normalization for use case matching.

Two forms are used:

- strict (``normalize``): lowercase, keep only ``[a-z0-9]``. Accents,
  punctuation, whitespace and separators are dropped.
- light (``normalize_light``): lowercase, drop only ``_`` and ``-``.
  Accented characters survive, so synonym tables must list both spellings.

Both functions are total and idempotent.
"""

import re
from typing import Any

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_SEPARATORS = re.compile(r"[_-]")


def _as_text(raw: Any) -> str:
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def normalize(raw: Any) -> str:
    """Reduce an identifier to its strict comparison form.

    >>> normalize("Gen_Get-Promotions!")
    'gengetpromotions'
    """
    return _NON_ALNUM.sub("", _as_text(raw).lower())


def normalize_light(raw: Any) -> str:
    """Lowercase an identifier and strip underscores and hyphens.

    >>> normalize_light("Directorio_Telefónico")
    'directoriotelefónico'
    """
    return _SEPARATORS.sub("", _as_text(raw).lower())
