"""Pytest configuration and shared fixtures."""

import json

import pytest

# =============================================================================
# Recipe Page Fixtures
# =============================================================================


@pytest.fixture
def pancake_json_ld():
    """Schema.org Recipe node for a pancake recipe."""
    return {
        "@context": "https://schema.org",
        "@type": "Recipe",
        "name": "Fluffy Pancakes",
        "description": "Light and fluffy weekend pancakes.",
        "image": [{"@type": "ImageObject", "url": "https://example.com/pancakes.jpg"}],
        "recipeYield": ["4", "4 servings"],
        "prepTime": "PT10M",
        "cookTime": "PT20M",
        "totalTime": "PT30M",
        "recipeIngredient": [
            "1 1/2 cups flour",
            "2 tbsp sugar",
            "1 cup milk",
            "2 large eggs",
        ],
        "recipeInstructions": [
            {"@type": "HowToStep", "text": "Preheat griddle to 375°F."},
            {"@type": "HowToStep", "text": "Whisk everything together."},
            {"@type": "HowToStep", "text": "Cook until golden."},
        ],
    }


@pytest.fixture
def json_ld_page(pancake_json_ld):
    """Recipe page with a top-level JSON-LD Recipe block."""
    return f"""
    <html>
      <head>
        <title>Pancakes | Example Kitchen</title>
        <meta property="og:title" content="OG Pancakes">
        <meta property="og:image" content="https://example.com/og.jpg">
        <script type="application/ld+json">{json.dumps(pancake_json_ld)}</script>
      </head>
      <body><h1>Fluffy Pancakes</h1></body>
    </html>
    """


@pytest.fixture
def graph_page(pancake_json_ld):
    """Recipe page whose Recipe node sits inside an @graph, after a broken block."""
    graph = {
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebPage", "name": "Pancakes page"},
            {**pancake_json_ld, "@type": ["Recipe", "NewsArticle"]},
        ],
    }
    return f"""
    <html>
      <head>
        <title>Pancakes</title>
        <script type="application/ld+json">{{ not valid json </script>
        <script type="application/ld+json">{json.dumps(graph)}</script>
      </head>
      <body></body>
    </html>
    """


@pytest.fixture
def markup_only_page():
    """Recipe page without structured data."""
    return """
    <html>
      <head>
        <title>Grandma's Brownies - Blog</title>
        <meta property="og:title" content="Grandma's Brownies">
        <meta property="og:description" content="Fudgy and rich.">
        <meta property="og:image" content="https://example.com/brownies.jpg">
      </head>
      <body>
        <ul>
          <li class="recipe-ingredient">8 oz dark chocolate</li>
          <li class="recipe-ingredient">1 cup sugar</li>
          <li class="recipe-ingredient">ok</li>
        </ul>
        <ol>
          <li>Preheat oven to 350°F.</li>
          <li>Line a 9-inch square pan.</li>
          <li>Mix</li>
        </ol>
      </body>
    </html>
    """


@pytest.fixture
def no_recipe_page():
    """Page with nothing to extract."""
    return "<html><head></head><body><p>Nothing to see here.</p></body></html>"


@pytest.fixture
def raw_recipe_data():
    """Extracted recipe as the API receives it (camelCase keys)."""
    return {
        "title": "Roast Chicken",
        "description": "Sunday roast.",
        "image": "https://example.com/chicken.jpg",
        "servings": "4",
        "prepTime": "15m",
        "cookTime": "1h 30m",
        "totalTime": "1h 45m",
        "ingredients": [
            "3 lbs chicken",
            "2 cups chicken stock",
            "1/2 tablespoon salt",
            "200 g butter",
            "salt to taste",
        ],
        "instructions": [
            "Preheat oven to 425°F.",
            "Truss the chicken with 2 feet of twine.",
            "Roast until the thighs reach 165 degrees F.",
        ],
    }
