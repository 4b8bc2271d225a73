"""Conversion resolver — turns (source unit, target unit) into a single transform.

Lookup order:
    1. same unit after alias resolution: identity
    2. direct entry ``conversions[target][source]``
    3. reverse of a scalar entry ``conversions[source][target]``
    4. two hops through the anchor unit, each hop resolved by steps 2-3

Parametric entries are never reversed: an angular-size conversion is not a
multiplicative inverse of its counterpart. A missing path is reported as
``None``, not raised.
"""

from __future__ import annotations

import logging
from typing import Callable

from dimension.core.parameters import Parameters
from dimension.core.registry import ConversionRegistry, Parametric, Scalar, default_registry

logger = logging.getLogger(__name__)


class Transform:
    """Callable ``value -> float`` for one resolved conversion.

    ``factor`` is set when the whole transform is a single multiplication;
    ``indirect`` marks transforms composed through the anchor unit.
    """

    __slots__ = ("func", "source", "target", "factor", "indirect")

    def __init__(
        self,
        func: Callable[[float], float],
        source: str,
        target: str,
        factor: float | None = None,
        indirect: bool = False,
    ):
        self.func = func
        self.source = source
        self.target = target
        self.factor = factor
        self.indirect = indirect

    @classmethod
    def identity(cls, unit: str) -> "Transform":
        return cls(lambda value: value, unit, unit)

    @classmethod
    def scalar(cls, factor: float, source: str, target: str, indirect: bool = False) -> "Transform":
        return cls(lambda value: value * factor, source, target, factor=factor, indirect=indirect)

    def __call__(self, value: float) -> float:
        return self.func(value)

    def __repr__(self) -> str:
        kind = "indirect" if self.indirect else "direct"
        return f"Transform({self.source!r} -> {self.target!r}, {kind})"


class ConversionResolver:
    def __init__(self, registry: ConversionRegistry):
        self.registry = registry

    def resolve(self, from_unit: str, to_unit: str, freeze_config: bool = False) -> Transform | None:
        """Find a transform from ``from_unit`` to ``to_unit``, or None if there is no path.

        With ``freeze_config`` the transform is bound to a copy of the
        parameters taken now, so later ``configure`` calls do not change its
        results. Otherwise it reads the live parameters on every call.
        """
        params = self.registry.parameters
        if freeze_config:
            params = params.snapshot()
        from_unit = self.registry.resolve_alias(from_unit)
        to_unit = self.registry.resolve_alias(to_unit)
        return self._resolve(from_unit, to_unit, params)

    def _resolve(self, from_unit: str, to_unit: str, params: Parameters) -> Transform | None:
        if from_unit == to_unit:
            return Transform.identity(from_unit)

        transform = self._direct_or_reverse(from_unit, to_unit, params)
        if transform is not None:
            return transform

        # Only hop through the anchor when neither end is the anchor, or the
        # legs would recurse back into this step.
        anchor = self.registry.resolve_alias(params.anchor_unit)
        if from_unit != anchor and to_unit != anchor:
            leg1 = self._resolve(from_unit, anchor, params)
            leg2 = self._resolve(anchor, to_unit, params)
            if leg1 is not None and leg2 is not None:
                logger.debug("Resolved %s -> %s through anchor %s", from_unit, to_unit, anchor)
                return self._compose(leg1, leg2)

        logger.debug("No conversion path from %s to %s", from_unit, to_unit)
        return None

    def _direct_or_reverse(self, from_unit: str, to_unit: str, params: Parameters) -> Transform | None:
        entry = self.registry.entry(from_unit, to_unit)
        if isinstance(entry, Scalar):
            return Transform.scalar(entry.factor, from_unit, to_unit)
        if isinstance(entry, Parametric):
            func = entry.func
            return Transform(lambda value: func(value, params), from_unit, to_unit)

        reverse = self.registry.entry(to_unit, from_unit)
        if isinstance(reverse, Scalar):
            factor = reverse.factor
            return Transform(lambda value: value / factor, from_unit, to_unit, factor=1 / factor)
        return None

    @staticmethod
    def _compose(leg1: Transform, leg2: Transform) -> Transform:
        if leg1.factor is not None and leg2.factor is not None:
            return Transform.scalar(leg1.factor * leg2.factor, leg1.source, leg2.target, indirect=True)
        return Transform(lambda value: leg2(leg1(value)), leg1.source, leg2.target, indirect=True)


default_resolver = ConversionResolver(default_registry)
