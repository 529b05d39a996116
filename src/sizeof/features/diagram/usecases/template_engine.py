"""
Summary: Render a diagram by substituting a selected row's values into its source.
Why: Component drawings are parameterized SVG shared by every row of a table.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import final

from sizeof.features.catalog import (
    CellValue,
    ComponentConfig,
    ComponentRow,
    DiagramDocument,
    PlainValue,
    raw_text,
)
from sizeof.platform.logging import logger

from ..domain.legacy import legacy_element_id, replace_element_text
from ..domain.placeholders import SubstitutionValue, display_form, substitute_placeholders


@final
class TemplateSubstitutionEngine:
    """Pure renderer for placeholder-bearing diagram documents.

    Placeholders ``{{ key }}`` receive the display form (value plus unit)
    and ``{{ key_raw }}`` the bare value. Afterwards a legacy pass sets the
    text of any ``id="val_<key>"`` element to the bare value. Unknown
    placeholders are left as written; rendering never fails.
    """

    def render(
        self,
        document: DiagramDocument,
        values: Mapping[str, PlainValue | CellValue],
        units: Mapping[str, str] | None = None,
    ) -> DiagramDocument:
        """Return ``document`` with ``values`` substituted.

        Args:
            document: Diagram source text.
            values: Value per column key, plain or tagged.
            units: Optional unit per column key, appended to display forms.

        Returns:
            DiagramDocument: The rendered document; ``document`` itself is
            returned unchanged when ``values`` is empty.
        """
        if not values:
            return document

        units = units or {}
        table = {
            key: SubstitutionValue(
                raw=raw,
                display=display_form(raw, units.get(key)),
            )
            for key, raw in ((key, raw_text(value)) for key, value in values.items())
        }

        rendered, replaced = substitute_placeholders(document, table)

        legacy_hits = 0
        for key, entry in table.items():
            updated = replace_element_text(rendered, legacy_element_id(key), entry.raw)
            if updated is not None:
                rendered = updated
                legacy_hits += 1

        logger.debug(
            "Rendered diagram: %d placeholders, %d legacy elements", replaced, legacy_hits
        )
        return rendered

    def render_row(
        self,
        document: DiagramDocument,
        config: ComponentConfig,
        row: ComponentRow | None,
    ) -> DiagramDocument:
        """Render with a selected row (or none) using the config's column units."""

        if row is None:
            return document
        return self.render(document, row, config.units())


def render_diagram(
    document: DiagramDocument,
    values: Mapping[str, PlainValue | CellValue],
    units: Mapping[str, str] | None = None,
) -> DiagramDocument:
    """Convenience wrapper around ``TemplateSubstitutionEngine().render``."""

    return TemplateSubstitutionEngine().render(document, values, units)


__all__ = ["TemplateSubstitutionEngine", "render_diagram"]
