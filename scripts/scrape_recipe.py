"""Script to scrape a recipe page and print it as JSON.

Run with: python scripts/scrape_recipe.py https://example.com/pancakes
Skip metric conversion with: python scripts/scrape_recipe.py URL --raw
"""

import argparse
import asyncio
import sys

from recipecollector.logging_config import configure_logging
from recipecollector.scrape import ScrapeError, scrape_recipe


async def run(url: str, convert: bool) -> int:
    """Scrape and print one recipe."""
    try:
        recipe = await scrape_recipe(url, convert=convert)
    except ScrapeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(recipe.model_dump_json(by_alias=True, indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(description="Scrape a recipe page with metric conversions")
    parser.add_argument("url", help="Recipe page URL")
    parser.add_argument("--raw", action="store_true", help="Skip metric conversion")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    args = parser.parse_args()

    configure_logging(log_level=args.log_level, json_format=False)
    sys.exit(asyncio.run(run(args.url, convert=not args.raw)))


if __name__ == "__main__":
    main()
