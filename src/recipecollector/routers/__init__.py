"""API routers for the recipecollector application."""

from recipecollector.routers.recipes import router as recipes_router

__all__ = [
    "recipes_router",
]
