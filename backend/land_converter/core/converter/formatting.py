"""Parsing of free-text input and fixed-point rendering of conversion results."""

from __future__ import annotations

import math
from typing import Mapping

INVALID_VALUE_MESSAGE = "Invalid input value. Please enter a numeric value."


class ValueParseError(ValueError):
    """Raised when the value field does not hold a finite number."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(INVALID_VALUE_MESSAGE)


def parse_value(text: str) -> float:
    """Parse the user's value field into a float."""
    try:
        value = float(text.strip())
    except (TypeError, ValueError, AttributeError):
        raise ValueParseError(str(text)) from None
    if not math.isfinite(value):
        raise ValueParseError(text)
    return value


def format_value(value: float, precision: int = 6) -> str:
    return f"{value:.{precision}f}"


def format_conversion(
    value: float,
    from_unit: str,
    result: float,
    to_unit: str,
    precision: int = 6,
) -> str:
    """Render a single conversion, e.g. '1.000000 ropani is equal to 15.997484 aana'."""
    return (
        f"{format_value(value, precision)} {from_unit} is equal to "
        f"{format_value(result, precision)} {to_unit}"
    )


def format_conversions(
    value: float,
    from_unit: str,
    results: Mapping[str, float],
    precision: int = 6,
) -> str:
    """Render a convert-to-all result, one line per unit."""
    lines = [f"Conversions for {format_value(value, precision)} {from_unit}:"]
    lines.extend(f"{format_value(v, precision)} {unit}" for unit, v in results.items())
    return "\n".join(lines)
