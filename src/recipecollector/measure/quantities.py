"""Quantity parsing for recipe measurements.

Quantities arrive as free-form text: plain numbers ("2", "1.5"), slash
fractions ("1/2", "1 1/2") or unicode vulgar-fraction glyphs ("½",
"1 ¾"). Anything that cannot be read as a positive, finite number parses to
``None``, which callers treat as "leave the text alone".
"""

import math
import re

# Glyph values are fixed 3-decimal constants, not exact rationals.
# Declaration order decides which glyph wins if a string holds several.
UNICODE_FRACTIONS: dict[str, float] = {
    "½": 0.5,
    "⅓": 0.333,
    "⅔": 0.667,
    "¼": 0.25,
    "¾": 0.75,
    "⅕": 0.2,
    "⅖": 0.4,
    "⅗": 0.6,
    "⅘": 0.8,
    "⅙": 0.167,
    "⅚": 0.833,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

FRACTION_GLYPHS = "".join(UNICODE_FRACTIONS)

_SLASH_FRACTION = re.compile(r"(\d+)\s*/\s*(\d+)")
_LEADING_NUMBER = re.compile(r"\s*(\d+(?:\.\d*)?|\.\d+)")


def parse_leading_number(text: str) -> float | None:
    """
    Parse the number at the start of ``text``.

    Leading whitespace is skipped and trailing text ignored, so "2-3"
    gives 2.0 and "1.5 cups" gives 1.5. Returns None when the text does
    not start with a digit or decimal point.
    """
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(1))


def _whole_part(remainder: str) -> float:
    remainder = remainder.strip()
    if not remainder:
        return 0.0
    return parse_leading_number(remainder) or 0.0


def parse_quantity(text: str | None) -> float | None:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2", "1.5"
    - "1/2", "1 1/2" (one and a half)
    - "½", "1½", "2 ¾"

    Returns:
        The positive value, or None if the text is not a usable quantity.
    """
    if not text:
        return None

    value: float | None

    for glyph, glyph_value in UNICODE_FRACTIONS.items():
        if glyph in text:
            value = _whole_part(text.replace(glyph, "", 1)) + glyph_value
            break
    else:
        match = _SLASH_FRACTION.search(text)
        if match:
            numerator = float(match.group(1))
            denominator = float(match.group(2))
            if denominator == 0:
                return None
            remainder = text[: match.start()] + text[match.end() :]
            value = _whole_part(remainder) + numerator / denominator
        else:
            value = parse_leading_number(text)

    # Digit runs too long for a float come back as inf (or nan for inf/inf)
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return value
