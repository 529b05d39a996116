"""Diagram rendering use cases."""

from .template_engine import TemplateSubstitutionEngine, render_diagram

__all__ = ["TemplateSubstitutionEngine", "render_diagram"]
