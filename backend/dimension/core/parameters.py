"""Process-wide conversion parameters shared by the registry and parametric conversions."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field, fields
from typing import Any, Callable

from dimension.config import Settings
from dimension.models.schemas import DimensionModel

# '"' is not a default alias for "in": it would be confused with arcseconds.
DEFAULT_ALIASES = {
    "um": "µ",
    "µm": "µ",
    "°": "deg",
}

DIMENSION_PATTERN = re.compile(r"^\s*(?P<value>-?[0-9]*\.?[0-9]+)\s*(?P<unit>[^\s\d]+)\s*$")


def default_to_json(dim: Any) -> dict:
    """Plain-data form of a dimension: {"value": ..., "unit": ...}."""
    return DimensionModel(value=dim.value, unit=dim.unit).model_dump()


@dataclass
class Parameters:
    """Global configuration that parametric conversions and dimensions read.

    One live instance is owned by the registry and merged into by
    ``configure``; ``snapshot()`` gives the shallow copy a frozen
    conversion function is bound to.
    """

    default_unit: str | None = "mm"
    default_output_unit: str | None = None  # unit used by float(dimension)
    anchor_unit: str = "mm"  # hop unit when no direct conversion exists
    pixel_density: float = 96.0  # px per inch
    viewing_distance: float = 600.0  # mm
    aliases: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))
    to_json: Callable[[Any], Any] = default_to_json
    dimension_pattern: re.Pattern = DIMENSION_PATTERN

    @classmethod
    def from_settings(cls, settings: Settings) -> "Parameters":
        return cls(
            default_unit=settings.default_unit,
            default_output_unit=settings.default_output_unit,
            anchor_unit=settings.anchor_unit,
            pixel_density=settings.pixel_density,
            viewing_distance=settings.viewing_distance,
        )

    @classmethod
    def option_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def snapshot(self) -> "Parameters":
        return copy.copy(self)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
