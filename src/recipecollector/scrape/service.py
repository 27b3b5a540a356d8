"""Scrape a recipe page end to end: fetch, extract, convert."""

from recipecollector.logging_config import get_logger
from recipecollector.measure.converter import convert_recipe
from recipecollector.measure.units import has_metric_units
from recipecollector.schemas import NormalizedRecipe
from recipecollector.scrape.extract import extract_recipe
from recipecollector.scrape.fetcher import RecipeFetcher

logger = get_logger(__name__)


async def scrape_recipe(
    url: str,
    fetcher: RecipeFetcher | None = None,
    convert: bool = True,
) -> NormalizedRecipe:
    """
    Fetch a recipe page and return its recipe with metric annotations.

    Args:
        url: Recipe page URL.
        fetcher: Fetcher to use. A temporary one is created if omitted.
        convert: Annotate imperial measurements. When False the extracted
            lines are returned as-is.

    Raises:
        FetchError: If the page cannot be downloaded.
        RecipeNotFoundError: If the page holds no recipe title.
    """
    if fetcher is None:
        async with RecipeFetcher() as owned:
            html = await owned.fetch_html(url)
    else:
        html = await fetcher.fetch_html(url)

    raw = extract_recipe(html, url=url)

    already_metric = sum(1 for line in raw.ingredients if has_metric_units(line))
    if already_metric:
        logger.info(
            f"{already_metric} of {len(raw.ingredients)} ingredients already list metric units"
        )

    if not convert:
        return NormalizedRecipe.from_raw(raw)
    return convert_recipe(raw)
