"""ASGI entrypoint for the recipe nutrition API."""

from recipe_nutrition.api.app import create_app
from recipe_nutrition.containers import build_container

app = create_app(build_container())
