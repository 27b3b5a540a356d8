"""Recipe extraction from HTML pages.

Structured data (schema.org JSON-LD) is preferred. Fields it lacks fall
back to meta tags and, for ingredient and instruction lists, to elements
whose CSS class hints at their content. Each field is resolved from an
ordered list of candidate sources; the first non-empty value wins.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from bs4 import BeautifulSoup

from recipecollector.config import get_settings
from recipecollector.logging_config import get_logger
from recipecollector.schemas import RawRecipe
from recipecollector.scrape.fetcher import RecipeNotFoundError

logger = get_logger(__name__)

# A candidate reads one possible value for a field from the page
Candidate = Callable[[BeautifulSoup, dict[str, Any] | None], Any]

_ISO_DURATION = re.compile(r"P(?:(\d+)D)?T?(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?", re.IGNORECASE)


# =============================================================================
# Value Normalizers
# =============================================================================


def parse_iso_duration(duration: Any) -> str:
    """
    Render an ISO 8601 duration compactly.

    Examples:
        "PT1H30M" -> "1h 30m"
        "P1DT2H" -> "1d 2h"
        "PT45S" -> "PT45S" (seconds alone are not rendered)
        "20 minutes" -> "20 minutes"
    """
    if not duration or not isinstance(duration, str):
        return ""

    match = _ISO_DURATION.search(duration)
    if not match:
        return duration

    days, hours, minutes = (int(v) if v else 0 for v in match.groups()[:3])
    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return " ".join(parts) if parts else duration


def normalize_list(value: Any) -> list[str]:
    """
    Flatten a JSON-LD list field into trimmed, non-empty strings.

    Accepts lists of strings, HowToStep objects ({"text": ...}),
    HowToSection objects (their itemListElement is flattened) or a single
    newline-separated string.
    """
    if not value:
        return []

    if isinstance(value, str):
        return [line.strip() for line in value.splitlines() if line.strip()]

    if isinstance(value, dict):
        value = [value]

    if not isinstance(value, list):
        return []

    items: list[str] = []
    for item in value:
        if not item:
            continue
        if isinstance(item, str):
            text = item.strip()
        elif isinstance(item, dict) and item.get("text"):
            text = str(item["text"]).strip()
        elif isinstance(item, dict) and item.get("itemListElement"):
            items.extend(normalize_list(item["itemListElement"]))
            continue
        else:
            continue
        if text:
            items.append(text)
    return items


def normalize_image(image: Any) -> str:
    """Pick an image URL from a string, list or ImageObject."""
    if not image:
        return ""
    if isinstance(image, str):
        return image
    if isinstance(image, list) and image:
        first = image[0]
        if isinstance(first, str):
            return first
        if isinstance(first, dict) and first.get("url"):
            return str(first["url"])
    if isinstance(image, dict) and image.get("url"):
        return str(image["url"])
    return ""


# =============================================================================
# JSON-LD Discovery
# =============================================================================


def _is_recipe_type(node_type: Any) -> bool:
    if isinstance(node_type, list):
        return "Recipe" in node_type
    return node_type == "Recipe"


def find_json_ld_recipe(soup: BeautifulSoup) -> dict[str, Any] | None:
    """Return the first schema.org Recipe node in the page's JSON-LD blocks."""
    for script in soup.find_all("script", attrs={"type": "application/ld+json"}):
        raw = script.string or script.get_text()
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug(f"Skipping malformed JSON-LD block: {e}")
            continue

        candidates = parsed if isinstance(parsed, list) else [parsed]
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue

            graph = candidate.get("@graph")
            if isinstance(graph, list):
                for node in graph:
                    if isinstance(node, dict) and _is_recipe_type(node.get("@type")):
                        return node

            if _is_recipe_type(candidate.get("@type")):
                return candidate

    return None


# =============================================================================
# Field Candidates
# =============================================================================


def from_json_ld(*keys: str, parse: Callable[[Any], Any] | None = None) -> Candidate:
    """Candidate reading the first non-empty key of the JSON-LD recipe node."""

    def candidate(soup: BeautifulSoup, structured: dict[str, Any] | None) -> Any:
        if not structured:
            return None
        for key in keys:
            value = structured.get(key)
            if value:
                return parse(value) if parse else value
        return None

    return candidate


def from_meta(attr: str, value: str) -> Candidate:
    """Candidate reading the content of a <meta> tag."""

    def candidate(soup: BeautifulSoup, structured: dict[str, Any] | None) -> Any:
        tag = soup.find("meta", attrs={attr: value})
        return tag.get("content") if tag else None

    return candidate


def from_page_title(soup: BeautifulSoup, structured: dict[str, Any] | None) -> Any:
    """Candidate reading the document <title>."""
    return soup.title.get_text(strip=True) if soup.title else None


def from_elements(selector: str, min_length: int) -> Candidate:
    """Candidate collecting texts of matching elements with at least ``min_length`` chars."""

    def candidate(soup: BeautifulSoup, structured: dict[str, Any] | None) -> Any:
        limit = get_settings().fallback_max_items
        texts = []
        for element in soup.select(selector):
            text = element.get_text(" ", strip=True)
            if len(text) >= min_length:
                texts.append(text)
        return texts[:limit]

    return candidate


FIELD_CANDIDATES: dict[str, tuple[Candidate, ...]] = {
    "title": (
        from_json_ld("name"),
        from_meta("property", "og:title"),
        from_meta("name", "title"),
        from_page_title,
    ),
    "description": (
        from_json_ld("description"),
        from_meta("property", "og:description"),
        from_meta("name", "description"),
    ),
    "image": (
        from_json_ld("image", parse=normalize_image),
        from_meta("property", "og:image"),
        from_meta("name", "image"),
    ),
    "servings": (from_json_ld("recipeYield", "recipeServings"),),
    "prep_time": (from_json_ld("prepTime", "prep_time", parse=parse_iso_duration),),
    "cook_time": (from_json_ld("cookTime", "cook_time", parse=parse_iso_duration),),
    "total_time": (from_json_ld("totalTime", "total_time", parse=parse_iso_duration),),
    "ingredients": (
        from_json_ld("recipeIngredient", "ingredients", parse=normalize_list),
        from_elements("[class*=ingredient]", min_length=3),
    ),
    "instructions": (
        from_json_ld("recipeInstructions", parse=normalize_list),
        from_elements("[class*=instruction], [class*=step], ol li", min_length=5),
    ),
}


def resolve_field(
    candidates: tuple[Candidate, ...],
    soup: BeautifulSoup,
    structured: dict[str, Any] | None,
) -> Any:
    """Evaluate candidates in order and return the first non-empty value."""
    for candidate in candidates:
        value = candidate(soup, structured)
        if isinstance(value, str):
            value = value.strip()
        if value:
            return value
    return None


def extract_recipe(html: str, url: str | None = None) -> RawRecipe:
    """
    Extract a recipe from an HTML page.

    Args:
        html: Page markup.
        url: Source URL, for error reporting.

    Returns:
        RawRecipe with every field that could be found.

    Raises:
        RecipeNotFoundError: If no title can be found.
    """
    soup = BeautifulSoup(html, "html.parser")
    structured = find_json_ld_recipe(soup)
    if structured is None:
        logger.debug("No JSON-LD recipe found, falling back to page markup")

    fields = {
        name: resolve_field(candidates, soup, structured)
        for name, candidates in FIELD_CANDIDATES.items()
    }

    if not fields["title"]:
        raise RecipeNotFoundError("Could not extract a title from the recipe page", url=url)

    recipe = RawRecipe(**{name: value for name, value in fields.items() if value is not None})
    logger.info(
        f"Extracted recipe '{recipe.title}': {len(recipe.ingredients)} ingredients, "
        f"{len(recipe.instructions)} instructions"
    )
    return recipe
