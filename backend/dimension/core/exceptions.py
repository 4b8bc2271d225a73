"""Exception hierarchy for dimension parsing, configuration and conversion."""

from __future__ import annotations


class DimensionError(Exception):
    """Base exception for all dimension errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} ({detail_str})"
        return base_msg


class ConversionError(DimensionError, ValueError):
    """Raised when no conversion path exists between two units."""

    def __init__(self, from_unit: str, to_unit: str):
        self.from_unit = from_unit
        self.to_unit = to_unit
        super().__init__(
            f"No conversion path from {from_unit} to {to_unit} found!",
            {"from_unit": from_unit, "to_unit": to_unit},
        )


class DimensionParseError(DimensionError, ValueError):
    """Raised when a string is not a valid dimension literal."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse dimension from {text!r}", {"expected": "<number><unit>"})


class ConfigurationError(DimensionError, ValueError):
    """Raised when configure() receives an unknown option."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Unknown configuration option '{option}'")


class UnsupportedDimensionError(DimensionError, TypeError):
    """Raised when from_spec() is given a kind of input it cannot build a Dimension from."""

    def __init__(self, spec: object):
        self.spec = spec
        super().__init__(
            f"Cannot build a dimension from {type(spec).__name__}",
            {"expected": "str, number, {value, unit} mapping or Dimension"},
        )
