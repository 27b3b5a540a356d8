"""Metric annotation of ingredient lines.

Two passes run over each line:

1. The leading "<quantity> <unit>" prefix ("2 cups flour") is converted
   and the metric equivalent appended to the end of the line.
2. Lengths embedded anywhere in the line ("cut into 1-inch pieces") get
   their equivalent inserted right after the mention.

Original text is never removed or reordered, only parentheticals added.
"""

import re
from functools import lru_cache

from recipecollector.measure.formatting import format_metric, format_short_length
from recipecollector.measure.quantities import FRACTION_GLYPHS, parse_quantity
from recipecollector.measure.tokenizer import tokenize_leading
from recipecollector.measure.units import DEFAULT_TABLES, UnitDomain, UnitTables, lookup_unit

_NUMBER = rf"(?:\d+\s+\d+/\d+|\d+/\d+|(?:\d+\s*)?[{FRACTION_GLYPHS}]|\d+(?:\.\d+)?|\.\d+)"

# A metric parenthetical directly after a match means it was annotated already
_EXISTING_LENGTH_ANNOTATION = re.compile(r"\s*\(\s*\d+(?:\.\d+)?\s*(?:mm|cm|m)\s*\)")


@lru_cache(maxsize=8)
def _embedded_length_pattern(spellings: tuple[str, ...]) -> re.Pattern[str]:
    units = "|".join(re.escape(u) for u in sorted(spellings, key=len, reverse=True))
    return re.compile(
        rf"(?<![\d.])(?P<number>{_NUMBER})[\s-]*(?P<unit>{units})(?![A-Za-z0-9_])",
        re.IGNORECASE,
    )


def _content_end(line: str) -> int:
    return len(line.rstrip())


def annotate_leading_measure(
    line: str,
    tables: UnitTables = DEFAULT_TABLES,
) -> tuple[str, int] | None:
    """
    Convert the quantity + unit prefix of an ingredient line.

    Returns:
        None if the prefix is already metric or its quantity is not a
        number. Otherwise a tuple of (line, prefix_end). The line carries
        the appended annotation when the unit converted and is unchanged
        when there is no prefix, the unit is unknown or the amount is too
        small or too large to display. ``prefix_end`` is
        the length of the annotated prefix, or 0 when nothing was
        converted.
    """
    measure = tokenize_leading(line, tables)
    if measure is None:
        return line, 0

    found = lookup_unit(measure.unit, tables)
    if found is not None and found[0] is UnitDomain.METRIC:
        return None

    quantity = parse_quantity(measure.quantity)
    if quantity is None:
        return None

    if found is None:
        return line, 0

    domain, factor = found
    metric = format_metric(domain, quantity * factor)
    if metric is None:
        return line, 0

    end = _content_end(line)
    annotated = f"{line[:end]} ({metric}){line[end:]}"
    return annotated, measure.end


def annotate_embedded_lengths(
    line: str,
    tables: UnitTables = DEFAULT_TABLES,
    skip_before: int = 0,
) -> str:
    """
    Insert metric equivalents after lengths mentioned inside a line.

    Matches starting before ``skip_before`` are left alone, as are
    matches written as "(<match>)" and matches already followed by a
    metric parenthetical, so repeated runs add nothing new.
    """
    pattern = _embedded_length_pattern(tuple(tables.length))
    pieces: list[str] = []
    cursor = 0

    for match in pattern.finditer(line):
        if match.start() < skip_before:
            continue
        if f"({match.group(0)})" in line:
            continue
        if _EXISTING_LENGTH_ANNOTATION.match(line, match.end()):
            continue

        value = parse_quantity(match.group("number"))
        if value is None:
            continue

        metric = format_short_length(value * tables.length[match.group("unit").lower()])
        if metric is None:
            continue

        pieces.append(line[cursor : match.end()])
        pieces.append(f" ({metric})")
        cursor = match.end()

    if not pieces:
        return line

    pieces.append(line[cursor:])
    return "".join(pieces)


def annotate_ingredient(line: str, tables: UnitTables = DEFAULT_TABLES) -> str:
    """
    Annotate one ingredient line with metric equivalents.

    Examples:
        "2 cups flour" -> "2 cups flour (473 ml)"
        "3 lbs chicken" -> "3 lbs chicken (1.4 kg)"
        "cut into 1-inch pieces" -> "cut into 1-inch (2.5 cm) pieces"
        "200 g flour" -> "200 g flour"
    """
    if not line:
        return line

    leading = annotate_leading_measure(line, tables)
    if leading is None:
        return line

    working, prefix_end = leading
    return annotate_embedded_lengths(working, tables, skip_before=prefix_end)
