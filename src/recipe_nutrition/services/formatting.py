"""Plain-text rendering of report projections."""

from recipe_nutrition.domain.reports import (
    IngredientNutrition,
    IngredientUsage,
    NutritionalTable,
    ProductSummary,
)

LABEL_WIDTH = 15


def header(title: str) -> str:
    """Return a section header line."""
    return f"=== {title} ==="


def row(label: str, value: str) -> str:
    """Return a left-justified label column followed by its value."""
    return f"{label:<{LABEL_WIDTH}}: {value}"


def format_grams(grams: float) -> str:
    """Format a mass in fixed point without trailing zeros."""
    digits = f"{grams:.4f}".rstrip("0").rstrip(".")
    return f"{digits} g"


def render_summary(summary: ProductSummary) -> list[str]:
    lines = [
        header("Product Summary"),
        row("Product", summary.name),
        row("Total mass", format_grams(summary.total_mass)),
    ]
    if summary.serving_size:
        lines.append(row("Serving size", format_grams(summary.serving_size)))
        lines.append(row("Servings", str(summary.num_servings)))
    return lines


def render_ingredient_list(entries: list[IngredientUsage]) -> list[str]:
    lines = [header("Ingredient List")]
    lines.extend(
        row(entry.display_name, format_grams(entry.used_mass)) for entry in entries
    )
    return lines


def render_nutritional_table(table: NutritionalTable) -> list[str]:
    """Render totals, then the per-serving section when a serving size is set."""
    lines = [header("Nutritional Table")]
    lines.extend(row(name, f"{value:.4f}") for name, value in table.totals.items())
    if table.num_servings is None:
        return lines
    lines.append(header(f"Per Serving ({table.num_servings} servings)"))
    if table.per_serving is None:
        lines.append("Product is smaller than one serving; no per-serving values.")
        return lines
    lines.extend(
        row(name, f"{value:.2f}") for name, value in table.per_serving.items()
    )
    return lines


def render_ingredient_nutrition(report: IngredientNutrition) -> list[str]:
    lines = [
        header(f"Ingredient Nutrition: {report.display_name}"),
        header(f"In product ({format_grams(report.used_mass)})"),
    ]
    lines.extend(row(name, f"{value:.2f}") for name, value in report.in_product.items())
    lines.append(
        header(f"Per label serving ({format_grams(report.label_serving_size)})")
    )
    lines.extend(
        row(name, f"{value:.2f}")
        for name, value in report.per_label_serving.items()
    )
    return lines
