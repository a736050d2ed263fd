"""Errors raised by the calculator."""


class NutritionError(Exception):
    """Base class for calculator errors."""


class InvalidConfiguration(NutritionError):
    """Raised when product settings would make a derived value undefined."""


class InvalidQuantityError(NutritionError):
    """Raised when a mass or nutrient value cannot be used."""


class UnknownIngredientError(NutritionError):
    """Raised when a report asks for an ingredient that was never defined."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown ingredient: {name}")
        self.name = name


class CommandError(NutritionError):
    """Raised when a command cannot be executed as given."""


class UnknownCommandError(CommandError):
    """Raised for a command name that is not recognised."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command
