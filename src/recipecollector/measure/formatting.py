"""Number and metric-unit formatting for annotations."""

import math

from recipecollector.measure.units import UnitDomain


def round_half_up(value: float, places: int = 0) -> float:
    """Round with halves going up (Python's round() rounds halves to even).

    Infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    scale = 10**places
    return math.floor(value * scale + 0.5) / scale


def format_number(value: float) -> str:
    """
    Round a value to a readable precision.

    - >= 100: whole number
    - >= 1: one decimal place
    - otherwise: two decimal places

    Trailing ".0" is dropped, so 473.0 renders as "473".
    """
    if value >= 100:
        rounded = round_half_up(value)
    elif value >= 1:
        rounded = round_half_up(value, 1)
    else:
        rounded = round_half_up(value, 2)

    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def _with_unit(value: float, unit: str) -> str | None:
    # Overflowed products and amounts too small to show are not annotated
    if not math.isfinite(value):
        return None
    number = format_number(value)
    if number == "0":
        return None
    return f"{number} {unit}"


def format_metric(domain: UnitDomain, base_value: float) -> str | None:
    """
    Render a base-unit value (ml, g or cm) with a fitting metric unit.

    Examples:
        (VOLUME, 473.176) -> "473 ml"
        (WEIGHT, 1360.776) -> "1.4 kg"
        (LENGTH, 0.635) -> "6.4 mm"
        (VOLUME, 0.0005) -> None

    Returns None when the value is not finite or would display as zero.
    """
    if domain is UnitDomain.VOLUME:
        if base_value >= 1000:
            return _with_unit(base_value / 1000, "l")
        return _with_unit(base_value, "ml")

    if domain is UnitDomain.WEIGHT:
        if base_value >= 1000:
            return _with_unit(base_value / 1000, "kg")
        return _with_unit(base_value, "g")

    if domain is UnitDomain.LENGTH:
        if base_value >= 100:
            return _with_unit(base_value / 100, "m")
        return format_short_length(base_value)

    raise ValueError(f"No metric rendering for domain {domain.value!r}")


def format_short_length(cm: float) -> str | None:
    """Render a length in millimeters below 1 cm, centimeters otherwise."""
    if cm < 1:
        return _with_unit(cm * 10, "mm")
    return _with_unit(cm, "cm")
