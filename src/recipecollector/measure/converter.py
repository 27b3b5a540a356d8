"""Recipe-level metric conversion."""

from collections.abc import Iterable, Mapping
from typing import Any

from recipecollector.logging_config import get_logger
from recipecollector.measure.ingredients import annotate_ingredient
from recipecollector.measure.temperature import annotate_temperatures
from recipecollector.measure.units import DEFAULT_TABLES, UnitTables
from recipecollector.schemas import NormalizedRecipe, RawRecipe

logger = get_logger(__name__)


def convert_ingredients(
    ingredients: Iterable[str] | None,
    tables: UnitTables = DEFAULT_TABLES,
) -> list[str]:
    """Annotate each ingredient line, keeping count and order."""
    if ingredients is None:
        return []
    return [annotate_ingredient(line, tables) for line in ingredients]


def convert_instructions(instructions: Iterable[str] | None) -> list[str]:
    """Annotate Fahrenheit temperatures in each instruction line."""
    if instructions is None:
        return []
    return [annotate_temperatures(line) for line in instructions]


def convert_recipe(
    recipe: RawRecipe | Mapping[str, Any],
    tables: UnitTables = DEFAULT_TABLES,
) -> NormalizedRecipe:
    """
    Convert a recipe's imperial measurements to include metric equivalents.

    Scalar fields pass through untouched. The input is never modified.

    Args:
        recipe: A RawRecipe, or a mapping of the same shape (camelCase or
            snake_case keys; missing lists count as empty).
        tables: Unit tables to convert with.

    Returns:
        A new, frozen NormalizedRecipe.
    """
    raw = recipe if isinstance(recipe, RawRecipe) else RawRecipe.model_validate(recipe)

    ingredients = convert_ingredients(raw.ingredients, tables)
    instructions = convert_instructions(raw.instructions)

    annotated = sum(a != b for a, b in zip(ingredients, raw.ingredients)) + sum(
        a != b for a, b in zip(instructions, raw.instructions)
    )
    logger.debug(
        f"Converted recipe '{raw.title}': {annotated} of "
        f"{len(ingredients) + len(instructions)} lines annotated"
    )

    return NormalizedRecipe.from_raw(raw, ingredients=ingredients, instructions=instructions)
