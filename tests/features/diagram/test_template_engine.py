"""
Summary: Tests for diagram placeholder substitution and the legacy id pass.
Why: Rendered drawings must carry exact numbers in geometry and units in labels.
"""

from __future__ import annotations

import pytest

from sizeof.features.catalog import (
    ComponentColumn,
    ComponentConfig,
    ComponentRow,
    NumberValue,
    StringValue,
)
from sizeof.features.diagram import TemplateSubstitutionEngine, render_diagram


def test_raw_placeholder_gets_bare_value() -> None:
    assert render_diagram("{{H_raw}}", {"H": 5.5}, {}) == "5.5"


def test_display_placeholder_gets_value_and_unit() -> None:
    assert render_diagram("{{H}}", {"H": 5.5}, {"H": "mm"}) == "5.5 mm"


def test_display_placeholder_without_unit_equals_raw() -> None:
    assert render_diagram("{{H}}", {"H": 5.5}) == "5.5"
    assert render_diagram("{{H}}", {"H": 5.5}, {"H": ""}) == "5.5"


def test_pitch_scenario() -> None:
    config = ComponentConfig(
        name="Screw",
        standard="ISO 4762",
        columns=(ComponentColumn(key="pitch", label="Pitch", unit="mm"),),
        rows=(ComponentRow({"pitch": 0.7}),),
    )
    document = '<text>{{pitch}}</text><rect width="{{pitch_raw}}"/>'

    rendered = TemplateSubstitutionEngine().render_row(document, config, config.rows[0])

    assert rendered == '<text>0.7 mm</text><rect width="0.7"/>'


@pytest.mark.parametrize("token", ["{{H}}", "{{ H }}", "{{  H  }}", "{{\tH\n}}"])
def test_whitespace_around_key_is_tolerated(token: str) -> None:
    assert render_diagram(token, {"H": 3}) == "3"


def test_every_occurrence_is_replaced() -> None:
    document = "{{d}} {{d_raw}} {{ d }} {{d}}"

    assert render_diagram(document, {"d": 2}, {"d": "mm"}) == "2 mm 2 2 mm 2 mm"


def test_unknown_placeholders_are_left_untouched() -> None:
    document = "<text>{{ missing }}</text><text>{{H}}</text>{{missing_raw}}"

    assert render_diagram(document, {"H": 1}) == "<text>{{ missing }}</text><text>1</text>{{missing_raw}}"


def test_empty_values_return_document_unchanged() -> None:
    document = '<svg><text id="val_H">{{H}}</text></svg>'

    assert render_diagram(document, {}, {}) is document


def test_no_row_selected_keeps_template_text() -> None:
    config = ComponentConfig(
        name="x",
        standard="",
        columns=(ComponentColumn(key="H", label="H", unit="mm"),),
        rows=(ComponentRow({"H": 1}),),
    )
    document = "<text>{{H}}</text>"

    assert TemplateSubstitutionEngine().render_row(document, config, None) == document


def test_substitution_is_simultaneous() -> None:
    # A value that looks like another placeholder must not be expanded again.
    values = {"A": "{{B}}", "B": "x"}

    assert render_diagram("{{A}}|{{B}}", values) == "{{B}}|x"


def test_keys_that_prefix_other_keys_do_not_collide() -> None:
    values = {"H": 1, "H2": 2}

    assert render_diagram("{{H}} {{H2}} {{H_raw}} {{H2_raw}}", values) == "1 2 1 2"


def test_exact_key_wins_over_raw_suffix() -> None:
    values = {"H": 1, "H_raw": 9}

    assert render_diagram("{{H_raw}}", values, {"H": "mm"}) == "9"


def test_tagged_values_are_accepted() -> None:
    values = {"size": StringValue("M3"), "H": NumberValue(3.0)}

    assert render_diagram("{{size}}/{{H_raw}}", values) == "M3/3"


def test_legacy_element_text_is_overwritten_with_raw_value() -> None:
    document = '<svg><text id="val_H" x="1">old</text><text>keep</text></svg>'

    rendered = render_diagram(document, {"H": 5.5}, {"H": "mm"})

    assert rendered == '<svg><text id="val_H" x="1">5.5</text><text>keep</text></svg>'


def test_legacy_pass_runs_after_placeholders() -> None:
    document = "<svg><text id='val_d'><tspan>{{d}}</tspan></text></svg>"

    rendered = render_diagram(document, {"d": 4}, {"d": "mm"})

    assert rendered == "<svg><text id='val_d'>4</text></svg>"


def test_legacy_pass_is_noop_without_matching_ids() -> None:
    document = '<svg><text id="label">{{H}}</text><text id="val_other">x</text></svg>'

    assert render_diagram(document, {"H": 2}) == (
        '<svg><text id="label">2</text><text id="val_other">x</text></svg>'
    )
