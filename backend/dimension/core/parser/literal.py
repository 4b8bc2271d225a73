"""Parser for dimension literals such as "25.4mm", "-3 in" or "1°"."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dimension.core.parameters import Parameters

_NUMBER_RE = re.compile(r"^(?P<value>-?[0-9]*\.?[0-9]+)$")


@dataclass(frozen=True)
class ParsedDimension:
    value: float
    unit: str


def parse_dimension_string(
    text: str,
    params: Parameters,
    default_unit: str | None = None,
) -> ParsedDimension | None:
    """Split a literal into value and (unaliased) unit.

    A bare number takes ``default_unit``, falling back to the configured
    default unit; with neither set it does not parse. Returns None when
    the text is not a dimension literal.
    """
    m = params.dimension_pattern.match(text)
    if m:
        return ParsedDimension(float(m.group("value")), m.group("unit"))

    unit = default_unit or params.default_unit
    if unit:
        m = _NUMBER_RE.match(text)
        if m:
            return ParsedDimension(float(m.group("value")), unit)

    return None
