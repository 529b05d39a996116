"""
Summary: Overwrite the text of ``id="val_<key>"`` elements in diagram source.
Why: Diagrams drawn before placeholders existed mark value slots by element id.
"""

from __future__ import annotations

import re
from typing import Final
from xml.sax.saxutils import escape

LEGACY_ID_PREFIX: Final[str] = "val_"

_INERT_SECTION = re.compile(r"<!--.*?(?:-->|\Z)|<!\[CDATA\[.*?(?:\]\]>|\Z)", re.DOTALL)


def legacy_element_id(key: str) -> str:
    return f"{LEGACY_ID_PREFIX}{key}"


def _opening_tag(element_id: str) -> re.Pattern[str]:
    return re.compile(
        r"<(?P<tag>[A-Za-z_][\w:.-]*)"
        r"(?P<attrs>[^<>]*?\sid\s*=\s*(?P<quote>[\"'])"
        + re.escape(element_id)
        + r"(?P=quote)[^<>]*?)"
        r"(?P<self_closing>/?)>"
    )


def _mask_inert_sections(document: str) -> str:
    """Blank out comments and CDATA sections, keeping every offset in place."""

    return _INERT_SECTION.sub(lambda match: " " * len(match.group()), document)


def _find_closing_tag(document: str, tag: str, start: int) -> int | None:
    """Offset of the ``</tag>`` balancing an element opened before ``start``."""

    tags = re.compile(r"<(?P<close>/?)" + re.escape(tag) + r"(?=[\s/>])[^<>]*?(?P<empty>/?)>")
    depth = 1
    for match in tags.finditer(document, start):
        if match.group("close"):
            depth -= 1
            if depth == 0:
                return match.start()
        elif not match.group("empty"):
            depth += 1
    return None


def replace_element_text(document: str, element_id: str, text: str) -> str | None:
    """Set the text content of the first element whose id is ``element_id``.

    Child markup of the element is dropped, like assigning ``textContent``
    in a DOM. Everything outside the element is left byte-for-byte intact.
    Markup inside comments and CDATA sections is never matched.

    Returns:
        str | None: The updated document, or ``None`` when no such element
        exists (or its closing tag cannot be found).
    """
    if element_id not in document:
        return None

    searchable = _mask_inert_sections(document)
    match = _opening_tag(element_id).search(searchable)
    if match is None:
        return None

    tag = match.group("tag")
    content = escape(text)

    if match.group("self_closing"):
        rebuilt = f"<{tag}{match.group('attrs')}>{content}</{tag}>"
        return document[: match.start()] + rebuilt + document[match.end() :]

    close_at = _find_closing_tag(searchable, tag, match.end())
    if close_at is None:
        return None
    return document[: match.end()] + content + document[close_at:]


__all__ = ["LEGACY_ID_PREFIX", "legacy_element_id", "replace_element_text"]
