"""Two-phase tokenizer for the quantity + unit prefix of ingredient lines.

Phase one scans a quantity run (digits, fraction glyphs, slashes, dots,
hyphens and whitespace). Phase two scans the unit word that follows it.
Each phase works on its own so edge cases such as "oz." or "1-inch" can
be checked in isolation.
"""

from dataclasses import dataclass

from recipecollector.measure.quantities import FRACTION_GLYPHS
from recipecollector.measure.units import DEFAULT_TABLES, UnitTables

DIGITS = "0123456789"
ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
QUANTITY_PUNCTUATION = "/.-"


@dataclass(frozen=True)
class Token:
    """A scanned slice of a line."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class LeadingMeasure:
    """Quantity and unit found at the start of an ingredient line."""

    quantity: str
    unit: str
    end: int  # index just past the unit token


def _is_quantity_char(char: str) -> bool:
    return (
        char in DIGITS
        or char in FRACTION_GLYPHS
        or char in QUANTITY_PUNCTUATION
        or char.isspace()
    )


def _is_unit_char(char: str) -> bool:
    return char in ASCII_LETTERS or char == "."


def _ends_word(text: str, pos: int) -> bool:
    return pos >= len(text) or not text[pos].isalpha()


def scan_quantity(text: str, pos: int = 0) -> Token | None:
    """
    Scan the quantity run starting at ``pos``.

    The run is maximal and may carry surrounding whitespace. A run with no
    digit or fraction glyph (just "- " or ".") is not a quantity.
    """
    end = pos
    has_number = False
    while end < len(text) and _is_quantity_char(text[end]):
        if text[end] in DIGITS or text[end] in FRACTION_GLYPHS:
            has_number = True
        end += 1

    if not has_number:
        return None
    return Token(text=text[pos:end], start=pos, end=end)


def scan_unit(text: str, pos: int, tables: UnitTables = DEFAULT_TABLES) -> Token | None:
    """
    Scan the unit word starting at ``pos`` (leading whitespace skipped).

    Multi-word spellings from the tables ("fl oz", "fluid ounces") are
    tried first, longest first. Otherwise the unit is the maximal run of
    ASCII letters and dots. Either way the unit must end the word.
    """
    while pos < len(text) and text[pos].isspace():
        pos += 1

    for spelling in tables.multiword:
        end = pos + len(spelling)
        if text[pos:end].lower() == spelling and _ends_word(text, end):
            return Token(text=text[pos:end], start=pos, end=end)

    end = pos
    while end < len(text) and _is_unit_char(text[end]):
        end += 1

    if end == pos or not _ends_word(text, end):
        return None
    return Token(text=text[pos:end], start=pos, end=end)


def tokenize_leading(line: str, tables: UnitTables = DEFAULT_TABLES) -> LeadingMeasure | None:
    """
    Split the leading "<quantity> <unit>" prefix off an ingredient line.

    Examples:
        "2 cups flour" -> LeadingMeasure("2", "cups", 6)
        "1 1/2 tbsp. sugar" -> LeadingMeasure("1 1/2", "tbsp.", 11)
        "salt to taste" -> None
    """
    quantity = scan_quantity(line)
    if quantity is None:
        return None

    unit = scan_unit(line, quantity.end, tables)
    if unit is None:
        return None

    return LeadingMeasure(quantity=quantity.text.strip(), unit=unit.text, end=unit.end)
