"""Public API for the diagram feature."""

from .domain.legacy import LEGACY_ID_PREFIX, legacy_element_id, replace_element_text
from .domain.placeholders import (
    PLACEHOLDER_PATTERN,
    SubstitutionValue,
    display_form,
    resolve_token,
    substitute_placeholders,
)
from .usecases.template_engine import TemplateSubstitutionEngine, render_diagram

__all__ = [
    "LEGACY_ID_PREFIX",
    "PLACEHOLDER_PATTERN",
    "SubstitutionValue",
    "TemplateSubstitutionEngine",
    "display_form",
    "legacy_element_id",
    "render_diagram",
    "replace_element_text",
    "resolve_token",
    "substitute_placeholders",
]
