"""Product domain models."""

import math
from dataclasses import dataclass, field


@dataclass
class Product:
    """The composite product being assembled in a session."""

    name: str = ""
    total_mass: float = 0.0
    serving_size: float | None = None
    used_mass: dict[str, float] = field(default_factory=dict)
    nutrient_totals: dict[str, float] = field(default_factory=dict)

    @property
    def num_servings(self) -> int | None:
        """Servings per package, rounded half away from zero."""
        if not self.serving_size:
            return None
        return math.floor(self.total_mass / self.serving_size + 0.5)
