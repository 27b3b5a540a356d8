"""Measurement engine: annotate imperial quantities with metric equivalents."""

from recipecollector.measure.converter import (
    convert_ingredients,
    convert_instructions,
    convert_recipe,
)
from recipecollector.measure.formatting import format_metric, format_number
from recipecollector.measure.ingredients import annotate_ingredient
from recipecollector.measure.quantities import parse_quantity
from recipecollector.measure.temperature import annotate_temperatures, fahrenheit_to_celsius
from recipecollector.measure.units import (
    DEFAULT_TABLES,
    UnitDomain,
    UnitTables,
    has_metric_units,
    lookup_unit,
)

__all__ = [
    "DEFAULT_TABLES",
    "UnitDomain",
    "UnitTables",
    "annotate_ingredient",
    "annotate_temperatures",
    "convert_ingredients",
    "convert_instructions",
    "convert_recipe",
    "fahrenheit_to_celsius",
    "format_metric",
    "format_number",
    "has_metric_units",
    "lookup_unit",
    "parse_quantity",
]
