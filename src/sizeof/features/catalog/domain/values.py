"""
Summary: Tagged string/number cell values and their single string conversion.
Why: Row values arrive as loosely typed YAML scalars but diagrams need one exact text form.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class StringValue:
    """A textual cell such as a thread designation (``M3``)."""

    text: str

    def raw(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class NumberValue:
    """A numeric cell such as a pitch or head height."""

    number: int | float

    def raw(self) -> str:
        """Return the shortest plain form: ``5.0`` -> ``5``, ``0.7`` -> ``0.7``.

        Floats follow the catalog viewer's number text: ``NaN``, ``Infinity``,
        positional notation for exponents from -6 to 20 and a signed
        exponent (``1e-7``, ``1e+21``) outside that range.
        """

        value = self.number
        if not isinstance(value, float):
            return str(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))

        text = repr(value)
        mantissa, marker, exponent = text.partition("e")
        if not marker:
            return text
        power = int(exponent)
        if -7 < power < 21:
            return format(Decimal(text), "f")
        return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


CellValue: TypeAlias = StringValue | NumberValue
PlainValue: TypeAlias = str | int | float


def coerce_value(value: object) -> CellValue:
    """Convert a plain scalar into the tagged union.

    Existing tagged values pass through untouched. Booleans become the
    strings ``true``/``false`` and ``None`` becomes an empty string; any
    other object is converted with ``str``.
    """

    if isinstance(value, (StringValue, NumberValue)):
        return value
    if isinstance(value, bool):
        return StringValue("true" if value else "false")
    if isinstance(value, (int, float)):
        return NumberValue(value)
    if value is None:
        return StringValue("")
    return StringValue(str(value))


def raw_text(value: object) -> str:
    """Plain string form of any supported value."""

    return coerce_value(value).raw()


__all__ = [
    "CellValue",
    "NumberValue",
    "PlainValue",
    "StringValue",
    "coerce_value",
    "raw_text",
]
