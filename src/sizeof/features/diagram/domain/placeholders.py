"""
Summary: Resolve ``{{ key }}`` / ``{{ key_raw }}`` placeholder tokens in one scan.
Why: Simultaneous resolution keeps substituted text from being re-read as a token.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")
RAW_SUFFIX: Final[str] = "_raw"


@dataclass(frozen=True, slots=True)
class SubstitutionValue:
    """Both textual forms of one key."""

    raw: str
    display: str


def display_form(raw: str, unit: str | None) -> str:
    """``0.7`` + ``mm`` -> ``0.7 mm``; no unit leaves the raw text."""

    return f"{raw} {unit}" if unit else raw


def resolve_token(name: str, table: Mapping[str, SubstitutionValue]) -> str | None:
    """Text for placeholder ``name``, or ``None`` to leave it untouched.

    An exact key wins over the ``_raw`` suffix, so a real key named
    ``H_raw`` keeps its own value instead of becoming the raw form of ``H``.
    """

    entry = table.get(name)
    if entry is not None:
        return entry.display
    if name.endswith(RAW_SUFFIX):
        stem = table.get(name[: -len(RAW_SUFFIX)])
        if stem is not None:
            return stem.raw
    return None


def substitute_placeholders(
    document: str, table: Mapping[str, SubstitutionValue]
) -> tuple[str, int]:
    """Replace every known placeholder; returns the document and the count replaced."""

    if not table or "{{" not in document:
        return document, 0

    replaced = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal replaced
        text = resolve_token(match.group(1), table)
        if text is None:
            return match.group(0)
        replaced += 1
        return text

    return PLACEHOLDER_PATTERN.sub(_replace, document), replaced


__all__ = [
    "PLACEHOLDER_PATTERN",
    "RAW_SUFFIX",
    "SubstitutionValue",
    "display_form",
    "resolve_token",
    "substitute_placeholders",
]
