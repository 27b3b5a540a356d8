"""Recipe record schemas shared by extraction, conversion and the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _RecipeFields(BaseModel):
    """Scalar recipe fields, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    image: str = ""
    servings: str = ""
    prep_time: str = ""
    cook_time: str = ""
    total_time: str = ""

    @field_validator(
        "title",
        "description",
        "image",
        "servings",
        "prep_time",
        "cook_time",
        "total_time",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        """Treat missing values as empty and stringify numbers ("4" servings)."""
        if v is None:
            return ""
        if isinstance(v, list):
            return str(v[0]) if v else ""
        return str(v)


class RawRecipe(_RecipeFields):
    """Recipe as extracted from a page, before metric annotation."""

    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    @field_validator("ingredients", "instructions", mode="before")
    @classmethod
    def default_lines(cls, v: Any) -> Any:
        """Absent lists are empty."""
        if v is None:
            return []
        return v


class NormalizedRecipe(_RecipeFields):
    """Recipe with metric annotations applied. Immutable once built."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    ingredients: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()

    @classmethod
    def from_raw(
        cls,
        raw: RawRecipe,
        ingredients: "list[str] | None" = None,
        instructions: "list[str] | None" = None,
    ) -> "NormalizedRecipe":
        """Copy a raw recipe, optionally replacing its line sequences."""
        return cls(
            **raw.model_dump(exclude={"ingredients", "instructions"}),
            ingredients=tuple(raw.ingredients if ingredients is None else ingredients),
            instructions=tuple(raw.instructions if instructions is None else instructions),
        )


class ScrapeRequest(BaseModel):
    """Request to scrape and convert a recipe page."""

    url: str = Field(min_length=1, description="Recipe page URL (http or https)")
    convert: bool = Field(default=True, description="Annotate imperial units with metric")

    @field_validator("url")
    @classmethod
    def require_http(cls, v: str) -> str:
        """Only http(s) URLs can be fetched."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return v
