"""Nepali land unit conversion. Internal representation is always square meters.

Hill units:  1 ropani = 16 aana = 64 paisa = 256 daam
Terai units: 1 bigha  = 20 katha = 400 dhur

Unit names are canonical lowercase keys; use canonical_unit() on user input
before calling into this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class UnitDefinition:
    name: str
    square_meters_per_unit: float
    description: str


# ── Unit table ──────────────────────────────────────────────────────────

UNIT_TABLE: Mapping[str, UnitDefinition] = MappingProxyType({
    u.name: u for u in (
        # Hill region
        UnitDefinition("ropani", 508.72,  "Ropani: Traditional unit of area in Nepal."),
        UnitDefinition("aana",   31.80,   "Aana: 1/16 of a ropani."),
        UnitDefinition("paisa",  7.95,    "Paisa: 1/4 of an aana."),
        UnitDefinition("daam",   1.99,    "Daam: 1/4 of a paisa."),
        # Terai region
        UnitDefinition("bigha",  6772.63, "Bigha: Traditional unit of area in Terai region."),
        UnitDefinition("katha",  338.63,  "Katha: 1/20 of a bigha."),
        UnitDefinition("dhur",   16.93,   "Dhur: 1/20 of a katha."),
    )
})

VALID_UNITS = frozenset(UNIT_TABLE)


# ── Exceptions ──────────────────────────────────────────────────────────

class UnknownUnitError(ValueError):
    """Raised when a unit name is not one of the supported land units."""

    def __init__(self, unit: str, message: str | None = None) -> None:
        self.unit = unit
        super().__init__(message or f"Unknown unit '{unit}'. Valid: {sorted(VALID_UNITS)}")


class UnsupportedUnitsError(UnknownUnitError):
    """A conversion was requested with at least one unsupported unit."""

    def __init__(self, unit: str, *others: str, message: str = "Unsupported units for conversion") -> None:
        self.units = (unit, *others)
        bad = [u for u in self.units if u not in UNIT_TABLE]
        super().__init__(bad[0] if bad else unit, message)


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[UnsupportedUnitsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the converted value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


# ── Lookups ─────────────────────────────────────────────────────────────

def canonical_unit(name: str) -> str:
    return name.strip().lower()


def _factor(unit: str) -> float:
    try:
        return UNIT_TABLE[unit].square_meters_per_unit
    except KeyError:
        raise UnknownUnitError(unit) from None


def list_units() -> list[str]:
    """Return every supported unit name. Callers must not rely on the order."""
    return list(UNIT_TABLE)


def describe_unit(unit: str) -> str | None:
    """Return the description of a unit, or None if the unit is unknown."""
    definition = UNIT_TABLE.get(unit)
    return definition.description if definition else None


# ── Conversions ─────────────────────────────────────────────────────────

def to_square_meters(value: float, unit: str) -> float:
    """Convert a value from the given unit to square meters."""
    return value * _factor(unit)


def from_square_meters(value: float, unit: str) -> float:
    """Convert a value from square meters to the given unit."""
    return value / _factor(unit)


def convert(value: float, from_unit: str, to_unit: str) -> ConversionResult[float]:
    """Convert value between two land units.

    Equal unit names return value untouched, before either name is checked
    against the table. convert(5, "acre", "acre") therefore succeeds.
    """
    if from_unit == to_unit:
        return ConversionResult(value=value)
    if from_unit in UNIT_TABLE and to_unit in UNIT_TABLE:
        return ConversionResult(value=from_square_meters(to_square_meters(value, from_unit), to_unit))
    return ConversionResult(error=UnsupportedUnitsError(from_unit, to_unit))


def convert_to_all(value: float, from_unit: str) -> ConversionResult[dict[str, float]]:
    """Convert value into every supported unit, from_unit included."""
    if from_unit not in UNIT_TABLE:
        return ConversionResult(error=UnsupportedUnitsError(
            from_unit, message="Unsupported unit for conversion",
        ))

    value_sq_m = to_square_meters(value, from_unit)
    conversions = {unit: from_square_meters(value_sq_m, unit) for unit in UNIT_TABLE}
    # Skip the factor round-trip for the source unit
    conversions[from_unit] = value
    return ConversionResult(value=conversions)
