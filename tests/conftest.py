"""Shared test fixtures."""

from pathlib import Path

import pytest

from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer, build_container
from recipe_nutrition.services.aggregator import NutritionAggregator


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        log_level="INFO",
        report_output_file=None,
        example_output_file=str(tmp_path / "example_output.txt"),
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)


@pytest.fixture
def aggregator() -> NutritionAggregator:
    return NutritionAggregator()


@pytest.fixture
def banana_aggregator(aggregator: NutritionAggregator) -> NutritionAggregator:
    """Aggregator holding 300g of banana in a product named Banana Bread."""
    aggregator.create_product("Banana Bread")
    aggregator.catalog.define_ingredient("banana", 118, 118)
    aggregator.catalog.set_nutrient("banana", "Calories", 105)
    aggregator.catalog.set_nutrient("banana", "Carbohydrates", 27)
    aggregator.add_ingredient("banana", 300)
    return aggregator
