"""Conversion registry — the directed unit graph plus aliases and global parameters."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Union

from dimension.config import settings
from dimension.core.exceptions import ConfigurationError
from dimension.core.parameters import Parameters
from dimension.core.units_table import BUILTIN_CONVERSIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scalar:
    """Constant conversion: target = source * factor."""

    factor: float

    def __post_init__(self) -> None:
        if not (self.factor > 0 and math.isfinite(self.factor)):
            raise ValueError(f"Conversion factor must be positive and finite, got {self.factor}")


@dataclass(frozen=True)
class Parametric:
    """Conversion that depends on the parameters: target = func(source, params)."""

    func: Callable[[float, Parameters], float]


ConversionEntry = Union[Scalar, Parametric]


def as_entry(factor_or_function: Any) -> ConversionEntry:
    """Wrap a number or a ``(value, params)`` callable as a conversion entry."""
    if isinstance(factor_or_function, (Scalar, Parametric)):
        return factor_or_function
    if isinstance(factor_or_function, (int, float)) and not isinstance(factor_or_function, bool):
        return Scalar(float(factor_or_function))
    if callable(factor_or_function):
        return Parametric(factor_or_function)
    raise TypeError(
        f"Conversion must be a number or a callable, got {type(factor_or_function).__name__}"
    )


class ConversionRegistry:
    """Directed, partial graph of unit conversions.

    Entries live in ``conversions[target_unit][source_unit]``. A missing entry
    only means there is no direct conversion in that direction; a reverse or
    anchored path may still exist (see ``ConversionResolver``).
    """

    def __init__(self, parameters: Parameters | None = None):
        self.conversions: dict[str, dict[str, ConversionEntry]] = {}
        self.parameters = parameters if parameters is not None else Parameters()

    @classmethod
    def with_builtin_units(cls, parameters: Parameters | None = None) -> "ConversionRegistry":
        registry = cls(parameters)
        for target, sources in BUILTIN_CONVERSIONS.items():
            for source, factor_or_function in sources.items():
                registry.set_conversion(source, target, factor_or_function)
        return registry

    # ── Aliases ──────────────────────────────────────────────────────────

    def resolve_alias(self, unit: str) -> str:
        """Return the canonical unit for an alias, or ``unit`` unchanged."""
        return self.parameters.aliases.get(unit, unit)

    def add_alias(self, unit: str, alias: str | Iterable[str]) -> None:
        aliases = [alias] if isinstance(alias, str) else list(alias)
        for a in aliases:
            self.parameters.aliases[a] = unit
        logger.debug("Added alias(es) %s for unit %s", aliases, unit)

    # ── Conversions ──────────────────────────────────────────────────────

    def set_conversion(self, source_unit: str, target_unit: str, factor_or_function: Any) -> None:
        """Insert or overwrite the direct conversion source_unit -> target_unit."""
        entry = as_entry(factor_or_function)
        self.conversions.setdefault(target_unit, {})[source_unit] = entry
        logger.debug("Set conversion %s -> %s: %r", source_unit, target_unit, entry)

    def entry(self, source_unit: str, target_unit: str) -> ConversionEntry | None:
        sources = self.conversions.get(target_unit)
        if sources is None:
            return None
        return sources.get(source_unit)

    def list_units(self) -> list[str]:
        """Every unit used as a source or target anywhere in the graph."""
        units: dict[str, None] = {}
        for target, sources in self.conversions.items():
            units[target] = None
            for source in sources:
                units[source] = None
        return list(units)

    # ── Configuration ────────────────────────────────────────────────────

    def merge_configuration(self, partial: Mapping[str, Any] | None = None, **options: Any) -> None:
        """Shallow-merge options into the live parameters.

        Leaving out ``aliases`` keeps the alias table as it is; passing
        ``aliases`` replaces it, so an empty mapping (or None) clears it.
        Use ``add_alias`` to extend the table instead.
        """
        options = {**(partial or {}), **options}
        known = Parameters.option_names()
        for key in options:
            if key not in known:
                raise ConfigurationError(key)

        for key, value in options.items():
            if key == "aliases":
                value = dict(value or {})
            elif key == "dimension_pattern" and isinstance(value, str):
                value = re.compile(value)
            setattr(self.parameters, key, value)
        logger.debug("Merged configuration: %s", sorted(options))


default_registry = ConversionRegistry.with_builtin_units(Parameters.from_settings(settings))
