"""
Summary: Derive human-readable labels from catalog path segments.
Why: Folder and component names are stored as slugs such as ``socket_head``.
"""

from __future__ import annotations

import re
from typing import Final

_WORD_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[-_]")


def format_label(slug: str) -> str:
    """Turn ``socket_head`` or ``hex-nut`` into ``Socket Head`` / ``Hex Nut``.

    Only the first letter of each token is upper-cased; the rest is kept
    as written, so ``din_912`` becomes ``Din 912`` and ``M3`` stays ``M3``.
    Empty tokens survive the split, matching how the labels were always
    produced (``a__b`` -> ``A  B``).
    """

    return " ".join(word[:1].upper() + word[1:] for word in _WORD_SEPARATORS.split(slug))


__all__ = ["format_label"]
