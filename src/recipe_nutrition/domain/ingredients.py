"""Ingredient domain models."""

from dataclasses import dataclass, field


def default_display_name(name: str) -> str:
    """Derive a display name: underscores become spaces, words are capitalized."""
    words = name.replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


@dataclass
class Ingredient:
    """Label data for one ingredient.

    Nutrient values are amounts per ``label_mass`` grams. A value of ``None``
    means the label carries no data for that nutrient, which is not the same
    as zero.
    """

    name: str
    label_mass: float
    label_serving_size: float
    display_name: str
    nutrients: dict[str, float | None] = field(default_factory=dict)

    @property
    def scalable(self) -> bool:
        """Whether label values can be scaled by mass."""
        return self.label_mass > 0

    def scaled_nutrients(self, grams: float) -> dict[str, float]:
        """Return nutrient amounts contained in ``grams`` of this ingredient."""
        if not self.scalable:
            return {}
        return {
            nutrient: value * grams / self.label_mass
            for nutrient, value in self.nutrients.items()
            if value is not None
        }
