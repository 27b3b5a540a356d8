"""API routes for scraping recipes and converting them to metric."""

import uuid

from fastapi import APIRouter, HTTPException, status

from recipecollector.logging_config import LoggingContext, get_logger
from recipecollector.measure.converter import convert_recipe
from recipecollector.schemas import NormalizedRecipe, RawRecipe, ScrapeRequest
from recipecollector.scrape.fetcher import FetchError, RecipeNotFoundError
from recipecollector.scrape.service import scrape_recipe

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.post("/scrape", response_model=NormalizedRecipe)
async def scrape(request: ScrapeRequest) -> NormalizedRecipe:
    """
    Scrape a recipe page and annotate its measurements with metric units.

    Returns 502 when the page cannot be fetched and 422 when it holds no
    recognizable recipe.
    """
    with LoggingContext(request_id=str(uuid.uuid4()), recipe_url=request.url):
        try:
            recipe = await scrape_recipe(request.url, convert=request.convert)
        except FetchError as e:
            logger.warning(f"Fetch failed: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e
        except RecipeNotFoundError as e:
            logger.warning(f"No recipe found: {e}")
            raise HTTPException(status_code=422, detail=str(e)) from e

        logger.info(f"Scraped recipe '{recipe.title}'")
        return recipe


@router.post("/convert", response_model=NormalizedRecipe)
async def convert(recipe: RawRecipe) -> NormalizedRecipe:
    """Annotate an already extracted recipe with metric equivalents."""
    return convert_recipe(recipe)
