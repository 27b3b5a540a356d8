"""Fahrenheit to Celsius annotation of instruction text."""

import math
import re

from recipecollector.measure.formatting import round_half_up

# "350°F", "234.5°F", "350 ° F", "350F", "350 degrees F", "350 degree Fahrenheit"
FAHRENHEIT_PATTERN = re.compile(
    r"(?<![\d.])(?P<degrees>\d+(?:\.\d+)?)\s*(?:°\s*|degrees?\s*)?F(?:ahrenheit)?\b",
    re.IGNORECASE,
)

_EXISTING_CELSIUS = re.compile(r"\s*\(\s*-?\d+\s*°C\s*\)", re.IGNORECASE)


def fahrenheit_to_celsius(fahrenheit: float) -> int | None:
    """Convert Fahrenheit to whole degrees Celsius, or None if out of float range."""
    celsius = round_half_up((fahrenheit - 32) * 5 / 9)
    if not math.isfinite(celsius):
        return None
    return int(celsius)


def annotate_temperatures(text: str) -> str:
    """
    Append the Celsius equivalent after every Fahrenheit mention.

    "Preheat oven to 350°F" -> "Preheat oven to 350°F (177°C)"

    Mentions already followed by a "(<n>°C)" parenthetical are skipped.
    """
    if not text:
        return text

    pieces: list[str] = []
    cursor = 0

    for match in FAHRENHEIT_PATTERN.finditer(text):
        if _EXISTING_CELSIUS.match(text, match.end()):
            continue
        celsius = fahrenheit_to_celsius(float(match.group("degrees")))
        if celsius is None:
            continue
        pieces.append(text[cursor : match.end()])
        pieces.append(f" ({celsius}°C)")
        cursor = match.end()

    if not pieces:
        return text

    pieces.append(text[cursor:])
    return "".join(pieces)
