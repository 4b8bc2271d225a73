"""Dimension value type — a number paired with a unit, converted on demand."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, Mapping

from dimension.core.exceptions import ConversionError, DimensionParseError, UnsupportedDimensionError
from dimension.core.parser.literal import ParsedDimension, parse_dimension_string
from dimension.core.registry import ConversionRegistry, default_registry
from dimension.core.resolver import ConversionResolver, Transform, default_resolver
from dimension.models.schemas import DimensionModel
from dimension.utils.formatting import format_number, to_fixed


@dataclass(frozen=True)
class Dimension:
    """Immutable value + canonical unit.

    ``Dimension(value, unit)`` builds one directly; ``Dimension.from_spec``
    accepts any supported input (string literal, number, ``{value, unit}``
    record or another Dimension). Conversions return new instances.
    """

    value: float = 0.0
    unit: str = ""

    registry: ClassVar[ConversionRegistry] = default_registry
    resolver: ClassVar[ConversionResolver] = default_resolver

    def __post_init__(self) -> None:
        value = 0.0 if self.value is None else float(self.value)
        if math.isnan(value):
            value = 0.0
        # No unit and no default unit leaves the dimension unitless ("")
        unit = self.unit or self.registry.parameters.default_unit or ""
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "unit", self.registry.resolve_alias(unit))

    @classmethod
    def from_spec(cls, spec: Any = None, default_unit: str | None = None, *, clone: bool = False) -> "Dimension":
        """Build a Dimension from a literal, number, record or Dimension.

        An existing Dimension is returned as-is unless ``clone`` is set.
        A unit carried by ``spec`` wins over ``default_unit``. Strings that
        are not dimension literals raise DimensionParseError; other kinds of
        input (lists, booleans, arbitrary objects) raise
        UnsupportedDimensionError.
        """
        if isinstance(spec, Dimension) and not clone:
            return spec

        default_unit = default_unit or cls.registry.parameters.default_unit

        if isinstance(spec, str):
            parsed = parse_dimension_string(spec, cls.registry.parameters, default_unit)
            if parsed is None:
                raise DimensionParseError(spec)
            return cls(parsed.value, parsed.unit)

        if isinstance(spec, (Dimension, DimensionModel)):
            return cls(spec.value, spec.unit or default_unit)

        if isinstance(spec, Mapping):
            # A record without a value is zero in its own unit
            return cls(spec.get("value"), spec.get("unit") or default_unit)

        if spec is None:
            return cls(0.0, default_unit)

        if isinstance(spec, bool) or not hasattr(spec, "__float__"):
            raise UnsupportedDimensionError(spec)

        return cls(float(spec), default_unit)

    # ── Output ───────────────────────────────────────────────────────────

    def to_number(self, target_unit: str | None = None) -> float:
        """Value in ``target_unit`` (own value if no unit given)."""
        if not target_unit:
            return self.value

        transform = self.resolver.resolve(self.unit, target_unit)
        if transform is None:
            raise ConversionError(self.unit, target_unit)
        return transform(self.value)

    def to_fixed(self, digits: int = 0, target_unit: str | None = None) -> str:
        return to_fixed(self.to_number(target_unit), digits)

    def to_string(self, target_unit: str | int | None = None, digits: int | None = None) -> str:
        """Number plus unit suffix, e.g. "25.4mm".

        A lone int argument is taken as ``digits``: ``to_string(2)``.
        """
        if isinstance(target_unit, int) and digits is None:
            target_unit, digits = None, target_unit

        if digits is None:
            text = format_number(self.to_number(target_unit))
        else:
            text = self.to_fixed(digits, target_unit)
        return text + (target_unit or self.unit)

    def to_dimension(self, target_unit: str) -> "Dimension":
        return type(self).from_spec({"value": self.to_number(target_unit), "unit": target_unit})

    def to_json(self) -> Any:
        return self.registry.parameters.to_json(self)

    def __str__(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        output_unit = self.registry.parameters.default_output_unit
        if output_unit:
            return self.to_number(output_unit)
        return self.value

    # ── Process-wide configuration ───────────────────────────────────────

    @classmethod
    def configure(cls, options: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Merge options into the global parameters.

        Passing ``aliases`` replaces the alias table; use ``add_alias`` to
        extend it.
        """
        cls.registry.merge_configuration(options, **kwargs)

    @classmethod
    def add_alias(cls, unit: str, alias: str | Iterable[str]) -> None:
        cls.registry.add_alias(unit, alias)

    @classmethod
    def add_conversion(
        cls,
        from_unit: str,
        to_unit: str,
        factor_or_function: float | Callable[[float, Any], float],
    ) -> None:
        cls.registry.set_conversion(from_unit, to_unit, factor_or_function)

    @classmethod
    def get_conversion_function(
        cls, from_unit: str, to_unit: str, freeze_config: bool = False
    ) -> Transform | None:
        return cls.resolver.resolve(from_unit, to_unit, freeze_config=freeze_config)

    @classmethod
    def get_units(cls) -> list[str]:
        return cls.registry.list_units()

    @classmethod
    def un_alias(cls, unit: str) -> str:
        return cls.registry.resolve_alias(unit)

    @classmethod
    def parse(cls, text: str) -> ParsedDimension | None:
        return parse_dimension_string(text, cls.registry.parameters)
