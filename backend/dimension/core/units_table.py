"""Built-in conversion table for length, pixel and angular units.

Entries are keyed ``BUILTIN_CONVERSIONS[target][source]``. Numbers are scalar
factors (``target = source * factor``); functions take ``(value, params)``
and read pixel density or viewing distance from the parameters they are given.

"hm" is a hundredth of a millimetre. Angular sizes are converted to lengths
on a plane at ``viewing_distance`` from the viewer.
"""

from __future__ import annotations

import math

from dimension.core.parameters import Parameters

MM_PER_INCH = 25.4

# Units per inch, for the pixel conversions
_PER_INCH = {
    "m": 0.0254,
    "cm": 2.54,
    "mm": 25.4,
    "hm": 2540,
    "µ": 25400,
    "in": 1,
    "thou": 1000,
    "pt": 72,
    "pc": 6,
}


# ── Lengths from angles ────────────────────────────────────────────────

def deg_to_mm(v: float, params: Parameters) -> float:
    return math.tan(v / 2 / 180 * math.pi) * 2 * params.viewing_distance


def arcmin_to_mm(v: float, params: Parameters) -> float:
    return deg_to_mm(v / 60, params)


def arcsec_to_mm(v: float, params: Parameters) -> float:
    return deg_to_mm(v / 3600, params)


# ── Angles from lengths ────────────────────────────────────────────────

def mm_to_deg(v: float, params: Parameters) -> float:
    return math.atan2(v, 2 * params.viewing_distance) / math.pi * 360


def mm_to_arcmin(v: float, params: Parameters) -> float:
    return mm_to_deg(v, params) * 60


def mm_to_arcsec(v: float, params: Parameters) -> float:
    return mm_to_deg(v, params) * 3600


# ── Pixels ─────────────────────────────────────────────────────────────

def px_to_mm(v: float, params: Parameters) -> float:
    return v * MM_PER_INCH / params.pixel_density


def px_to_in(v: float, params: Parameters) -> float:
    return v / params.pixel_density


def _to_px(per_inch: float):
    def convert(v: float, params: Parameters) -> float:
        return v * params.pixel_density / per_inch
    return convert


def _angle_to_px(angle_to_mm):
    def convert(v: float, params: Parameters) -> float:
        return angle_to_mm(v, params) * params.pixel_density / MM_PER_INCH
    return convert


def _angle_to_in(angle_to_mm):
    def convert(v: float, params: Parameters) -> float:
        return angle_to_mm(v, params) / MM_PER_INCH
    return convert


BUILTIN_CONVERSIONS = {
    "mm": {
        "km": 1000000,
        "m": 1000,
        "cm": 10,
        "hm": 0.01,
        "µ": 0.001,
        "in": 25.4,
        "thou": 0.0254,
        "pt": 25.4 / 72,
        "pc": 25.4 / 6,
        "px": px_to_mm,
        "deg": deg_to_mm,
        "arcmin": arcmin_to_mm,
        "arcsec": arcsec_to_mm,
    },
    "in": {
        "m": 1 / 0.0254,
        "cm": 1 / 2.54,
        "mm": 1 / 25.4,
        "hm": 1 / 2540,
        "µ": 1 / 25400,
        "thou": 0.001,
        "pt": 1 / 72,
        "pc": 1 / 6,
        "px": px_to_in,
        "deg": _angle_to_in(deg_to_mm),
        "arcmin": _angle_to_in(arcmin_to_mm),
        "arcsec": _angle_to_in(arcsec_to_mm),
    },
    "px": {
        **{unit: _to_px(per_inch) for unit, per_inch in _PER_INCH.items()},
        "deg": _angle_to_px(deg_to_mm),
        "arcmin": _angle_to_px(arcmin_to_mm),
        "arcsec": _angle_to_px(arcsec_to_mm),
    },
    "deg": {
        "mm": mm_to_deg,
        "arcmin": 1 / 60,
        "arcsec": 1 / 3600,
    },
    "arcmin": {
        "mm": mm_to_arcmin,
        "deg": 60,
        "arcsec": 1 / 60,
    },
    "arcsec": {
        "mm": mm_to_arcsec,
        "deg": 3600,
        "arcmin": 60,
    },
}
