"""Recipe page fetching and extraction."""

from recipecollector.scrape.extract import (
    extract_recipe,
    find_json_ld_recipe,
    normalize_image,
    normalize_list,
    parse_iso_duration,
)
from recipecollector.scrape.fetcher import (
    FetchError,
    RecipeFetcher,
    RecipeNotFoundError,
    ScrapeError,
)
from recipecollector.scrape.service import scrape_recipe

__all__ = [
    "FetchError",
    "RecipeFetcher",
    "RecipeNotFoundError",
    "ScrapeError",
    "extract_recipe",
    "find_json_ld_recipe",
    "normalize_image",
    "normalize_list",
    "parse_iso_duration",
    "scrape_recipe",
]
