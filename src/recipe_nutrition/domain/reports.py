"""Read-only report projections."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSummary:
    """Headline figures for the product."""

    name: str
    total_mass: float
    serving_size: float | None
    num_servings: int | None


@dataclass(frozen=True)
class IngredientUsage:
    """A defined ingredient and how much of it the product uses."""

    display_name: str
    used_mass: float


@dataclass(frozen=True)
class NutritionalTable:
    """Product nutrient totals with optional per-serving values."""

    totals: dict[str, float]
    num_servings: int | None
    per_serving: dict[str, float] | None


@dataclass(frozen=True)
class IngredientNutrition:
    """Nutrients contributed by one ingredient."""

    display_name: str
    used_mass: float
    label_serving_size: float
    in_product: dict[str, float]
    per_label_serving: dict[str, float]
