"""Product nutrient aggregation."""

import logging
from dataclasses import dataclass, field

from recipe_nutrition.domain.errors import (
    InvalidConfiguration,
    InvalidQuantityError,
    UnknownIngredientError,
)
from recipe_nutrition.domain.product import Product
from recipe_nutrition.domain.reports import (
    IngredientNutrition,
    IngredientUsage,
    NutritionalTable,
    ProductSummary,
)
from recipe_nutrition.services.catalog import IngredientCatalog

TOTAL_PRECISION = 4
REPORT_PRECISION = 2

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAggregator:
    """Scales ingredient label data into product totals.

    Totals are accumulated when an ingredient is added, so nutrient values
    must be set on an ingredient before it is added to the product.
    """

    catalog: IngredientCatalog = field(default_factory=IngredientCatalog)
    product: Product = field(default_factory=Product)

    def create_product(self, name: str) -> None:
        """Name the product. Accumulated totals are kept."""
        self.product.name = name

    def add_ingredient(self, name: str, used_mass: float) -> None:
        """Incorporate ``used_mass`` grams of an ingredient into the product."""
        if used_mass < 0:
            raise InvalidQuantityError(f"Used mass must not be negative: {used_mass}")
        product = self.product
        product.used_mass[name] = product.used_mass.get(name, 0.0) + used_mass
        product.total_mass += used_mass

        ingredient = self.catalog.get(name)
        if ingredient is None:
            _logger.warning(
                "Ingredient %s is not defined; counting %sg of mass only",
                name,
                used_mass,
            )
            return
        if not ingredient.scalable:
            _logger.info(
                "Ingredient %s has no positive label mass; nutrients skipped", name
            )
            return
        for nutrient, amount in ingredient.scaled_nutrients(used_mass).items():
            current = product.nutrient_totals.get(nutrient, 0.0)
            product.nutrient_totals[nutrient] = current + round(
                amount, TOTAL_PRECISION
            )

    def set_serving_size(self, grams: float) -> None:
        """Set the product serving size in grams."""
        if grams <= 0:
            raise InvalidConfiguration(f"Serving size must be positive: {grams}")
        self.product.serving_size = grams

    def summary(self) -> ProductSummary:
        """Return the product summary projection."""
        product = self.product
        return ProductSummary(
            name=product.name,
            total_mass=product.total_mass,
            serving_size=product.serving_size,
            num_servings=product.num_servings,
        )

    def ingredient_list(self) -> list[IngredientUsage]:
        """Return every defined ingredient with its used mass."""
        return [
            IngredientUsage(
                display_name=ingredient.display_name,
                used_mass=self.product.used_mass.get(ingredient.name, 0.0),
            )
            for ingredient in self.catalog.ingredients()
        ]

    def nutritional_table(self) -> NutritionalTable:
        """Return product totals in registry order, per serving when possible."""
        accumulated = self.product.nutrient_totals
        totals = {
            nutrient: round(accumulated[nutrient], TOTAL_PRECISION)
            for nutrient in self.catalog.nutrient_names
            if nutrient in accumulated
        }
        num_servings = self.product.num_servings
        per_serving = None
        if num_servings:
            per_serving = {
                nutrient: round(value / num_servings, REPORT_PRECISION)
                for nutrient, value in totals.items()
            }
        return NutritionalTable(
            totals=totals, num_servings=num_servings, per_serving=per_serving
        )

    def ingredient_nutrition(self, name: str) -> IngredientNutrition:
        """Return the nutrients one ingredient brings to the product."""
        ingredient = self.catalog.get(name)
        if ingredient is None:
            raise UnknownIngredientError(name)
        used_mass = self.product.used_mass.get(name, 0.0)
        in_product = ingredient.scaled_nutrients(used_mass)
        per_serving = ingredient.scaled_nutrients(ingredient.label_serving_size)
        return IngredientNutrition(
            display_name=ingredient.display_name,
            used_mass=used_mass,
            label_serving_size=ingredient.label_serving_size,
            in_product={
                key: round(value, REPORT_PRECISION) for key, value in in_product.items()
            },
            per_label_serving={
                key: round(value, REPORT_PRECISION)
                for key, value in per_serving.items()
            },
        )
