"""Unit conversion tables and lookup."""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class UnitDomain(str, Enum):
    """Measurement domain a unit spelling belongs to."""

    VOLUME = "volume"  # base unit: ml
    WEIGHT = "weight"  # base unit: g
    LENGTH = "length"  # base unit: cm
    METRIC = "metric"  # already metric, never converted


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# US volume conversions (base unit: ml)
VOLUME_TO_ML: dict[str, float] = {
    "cup": 236.588,
    "cups": 236.588,
    "tablespoon": 14.787,
    "tablespoons": 14.787,
    "tbsp": 14.787,
    "teaspoon": 4.929,
    "teaspoons": 4.929,
    "tsp": 4.929,
    "fluid ounce": 29.574,
    "fluid ounces": 29.574,
    "fl oz": 29.574,
    "fl. oz": 29.574,
    "pint": 473.176,
    "pints": 473.176,
    "pt": 473.176,
    "quart": 946.353,
    "quarts": 946.353,
    "qt": 946.353,
    "gallon": 3785.41,
    "gallons": 3785.41,
    "gal": 3785.41,
}

# Imperial weight conversions (base unit: g)
WEIGHT_TO_GRAMS: dict[str, float] = {
    "ounce": 28.3495,
    "ounces": 28.3495,
    "oz": 28.3495,
    "pound": 453.592,
    "pounds": 453.592,
    "lb": 453.592,
    "lbs": 453.592,
}

# Imperial length conversions (base unit: cm)
LENGTH_TO_CM: dict[str, float] = {
    "inch": 2.54,
    "inches": 2.54,
    "in": 2.54,
    '"': 2.54,
    "foot": 30.48,
    "feet": 30.48,
    "ft": 30.48,
}

METRIC_UNITS: frozenset[str] = frozenset(
    {
        "ml", "milliliter", "milliliters", "millilitre", "millilitres",
        "l", "liter", "liters", "litre", "litres",
        "g", "gram", "grams", "gramme", "grammes",
        "kg", "kilogram", "kilograms", "kilogramme", "kilogrammes",
        "mg", "milligram", "milligrams",
        "cm", "centimeter", "centimeters", "centimetre", "centimetres",
        "mm", "millimeter", "millimeters", "millimetre", "millimetres",
        "m", "meter", "meters", "metre", "metres",
        "°c", "celsius",
    }
)  # fmt: skip


@dataclass(frozen=True)
class UnitTables:
    """Read-only bundle of the conversion tables, shared across calls."""

    volume: Mapping[str, float] = field(default_factory=lambda: MappingProxyType(VOLUME_TO_ML))
    weight: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(WEIGHT_TO_GRAMS)
    )
    length: Mapping[str, float] = field(default_factory=lambda: MappingProxyType(LENGTH_TO_CM))
    metric: frozenset[str] = METRIC_UNITS
    multiword: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        # Convertible spellings containing a space, longest first
        spellings = [u for table in (self.volume, self.weight, self.length) for u in table]
        multiword = sorted((u for u in spellings if " " in u), key=len, reverse=True)
        object.__setattr__(self, "multiword", tuple(multiword))


DEFAULT_TABLES = UnitTables()


# =============================================================================
# Lookup
# =============================================================================


def normalize_unit(unit: str) -> str:
    """Lowercase, trim and drop one trailing period ("Oz." -> "oz")."""
    unit = unit.strip().lower()
    if unit.endswith("."):
        unit = unit[:-1]
    return unit


def is_metric_unit(unit: str, tables: UnitTables = DEFAULT_TABLES) -> bool:
    """Check if a unit spelling is already metric."""
    return normalize_unit(unit) in tables.metric


def lookup_unit(
    unit: str,
    tables: UnitTables = DEFAULT_TABLES,
) -> tuple[UnitDomain, float] | None:
    """
    Identify the domain and conversion factor of a unit spelling.

    Returns:
        Tuple of (domain, factor to the domain's base unit), or None for
        unknown units. Metric units report a factor of 1.0.
    """
    key = normalize_unit(unit)

    if key in tables.metric:
        return UnitDomain.METRIC, 1.0
    if key in tables.volume:
        return UnitDomain.VOLUME, tables.volume[key]
    if key in tables.weight:
        return UnitDomain.WEIGHT, tables.weight[key]
    if key in tables.length:
        return UnitDomain.LENGTH, tables.length[key]

    return None


_METRIC_WORDS = re.compile(
    r"(?<![A-Za-z°'])(?:"
    + "|".join(re.escape(u) for u in sorted(METRIC_UNITS, key=len, reverse=True))
    + r")(?!\w)",
    re.IGNORECASE,
)


def has_metric_units(text: str) -> bool:
    """Check if a line already mentions a metric unit as a whole word."""
    if not text:
        return False
    return _METRIC_WORDS.search(text) is not None
