"""Ingredient catalog service."""

import logging
from dataclasses import dataclass, field

from recipe_nutrition.domain.ingredients import Ingredient, default_display_name

_logger = logging.getLogger(__name__)


@dataclass
class IngredientCatalog:
    """Holds ingredient label data and the registry of nutrient names."""

    _ingredients: dict[str, Ingredient] = field(default_factory=dict)
    _nutrients: dict[str, dict[str, float | None]] = field(default_factory=dict)
    _registry: dict[str, None] = field(default_factory=dict)

    def define_ingredient(
        self,
        name: str,
        label_mass: float,
        label_serving_size: float,
        display_name: str | None = None,
    ) -> Ingredient:
        """Register an ingredient, replacing any previous definition."""
        if name in self._ingredients:
            _logger.debug("Redefining ingredient %s", name)
        ingredient = Ingredient(
            name=name,
            label_mass=label_mass,
            label_serving_size=label_serving_size,
            display_name=display_name or default_display_name(name),
            nutrients=self._nutrients.setdefault(name, {}),
        )
        self._ingredients[name] = ingredient
        return ingredient

    def set_nutrient(
        self, ingredient_name: str, nutrient_name: str, value: float | None
    ) -> None:
        """Record a nutrient amount per label mass for an ingredient."""
        if ingredient_name not in self._ingredients:
            _logger.warning(
                "Nutrient %s set on undefined ingredient %s",
                nutrient_name,
                ingredient_name,
            )
        self._nutrients.setdefault(ingredient_name, {})[nutrient_name] = value
        self._registry[nutrient_name] = None

    def get(self, name: str) -> Ingredient | None:
        """Return an ingredient by name, if defined."""
        return self._ingredients.get(name)

    def ingredients(self) -> list[Ingredient]:
        """Return defined ingredients in definition order."""
        return list(self._ingredients.values())

    @property
    def nutrient_names(self) -> list[str]:
        """Every nutrient name supplied so far, in first-seen order."""
        return list(self._registry)
