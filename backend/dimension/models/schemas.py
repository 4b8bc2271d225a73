"""Pydantic schemas for plain-data dimensions and API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, field_validator


class DimensionModel(BaseModel):
    value: float
    unit: str


class DimensionInput(DimensionModel):
    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Dimension value must be a finite number")
        return v


class ParseRequest(BaseModel):
    text: str

    @field_validator("text")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Text cannot be empty")
        return v


class ConvertRequest(BaseModel):
    dimension: str | DimensionInput
    to_unit: str
    digits: int | None = None

    @field_validator("digits")
    @classmethod
    def digits_in_range(cls, v: int | None) -> int | None:
        if v is not None and not 0 <= v <= 100:
            raise ValueError("digits must be between 0 and 100")
        return v


class ConvertResponse(BaseModel):
    value: float
    unit: str
    text: str
    indirect: bool = False


class UnitsResponse(BaseModel):
    units: list[str]
    aliases: dict[str, str]
    anchor_unit: str
