"""Command session: dispatches textual commands to an aggregator."""

import logging
import math
import shlex
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from recipe_nutrition.commands import MANUAL, Command, usage_text
from recipe_nutrition.domain.errors import (
    CommandError,
    InvalidQuantityError,
    UnknownCommandError,
)
from recipe_nutrition.services.aggregator import NutritionAggregator
from recipe_nutrition.services.formatting import (
    render_ingredient_list,
    render_ingredient_nutrition,
    render_nutritional_table,
    render_summary,
)
from recipe_nutrition.services.output import ReportOutput

EXAMPLE_SCRIPT = [
    "create_product 'Banana Bread'",
    "create_ingredient banana 118 118",
    "set_ingredient_nutrient banana Calories 105",
    "set_ingredient_nutrient banana Carbohydrates 27",
    "set_ingredient_nutrient banana Protein 1.3",
    "set_ingredient_nutrient banana Fat 0.4",
    "create_ingredient all_purpose_flour 100 30 'Flour (all purpose)'",
    "set_ingredient_nutrient all_purpose_flour Calories 364",
    "set_ingredient_nutrient all_purpose_flour Carbohydrates 76",
    "set_ingredient_nutrient all_purpose_flour Protein 10",
    "set_ingredient_nutrient all_purpose_flour Fat 1",
    "create_ingredient butter 14 14",
    "set_ingredient_nutrient butter Calories 102",
    "set_ingredient_nutrient butter Fat 11.5",
    "set_ingredient_nutrient butter Protein ''",
    "create_ingredient brown_sugar 4 4",
    "set_ingredient_nutrient brown_sugar Calories 15",
    "set_ingredient_nutrient brown_sugar Carbohydrates 4",
    "create_ingredient egg 50 50",
    "set_ingredient_nutrient egg Calories 72",
    "set_ingredient_nutrient egg Protein 6.3",
    "set_ingredient_nutrient egg Fat 4.8",
    "set_ingredient_nutrient egg Carbohydrates 0.4",
    "add_ingredient_to_product banana 300",
    "add_ingredient_to_product all_purpose_flour 190",
    "add_ingredient_to_product butter 75",
    "add_ingredient_to_product brown_sugar 150",
    "add_ingredient_to_product egg 100",
    "set_serving_size 80",
    "print_summary",
    "print_ingredient_list",
    "print_nutritional_table",
    "print_ingredient_nutrition banana",
]

_logger = logging.getLogger(__name__)


@dataclass
class CommandSession:
    """One calculator session: an aggregator plus where its reports go."""

    aggregator: NutritionAggregator = field(default_factory=NutritionAggregator)
    output: ReportOutput = field(default_factory=ReportOutput)
    allow_files: bool = True
    example_output_file: str = "example_output.txt"

    def execute(self, name: str, args: list[str]) -> None:
        """Run one command with its arguments."""
        command = Command.lookup(name)
        if command is None:
            raise UnknownCommandError(name)
        definition = command.value
        required = len(definition.arguments)
        if not required <= len(args) <= required + len(definition.optional):
            raise CommandError(f"Usage: {definition.usage}")
        _logger.debug("Running %s %s", name, args)
        self._handlers()[command](*args)

    def run_line(self, line: str) -> None:
        """Run a command written as a shell-quoted line."""
        if line.lstrip().startswith("#"):
            return
        tokens = shlex.split(line)
        if tokens:
            self.execute(tokens[0], tokens[1:])

    def run_script(self, lines: Iterable[str]) -> None:
        """Run one command per line."""
        for line in lines:
            self.run_line(line)

    def run_tokens(self, tokens: list[str]) -> None:
        """Run a flat stream of command names each followed by its arguments."""
        position = 0
        while position < len(tokens):
            name = tokens[position]
            command = Command.lookup(name)
            if command is None:
                raise UnknownCommandError(name)
            definition = command.value
            start = position + 1
            end = start + len(definition.arguments)
            if end > len(tokens):
                raise CommandError(f"Usage: {definition.usage}")
            for _ in definition.optional:
                if end < len(tokens) and Command.lookup(tokens[end]) is None:
                    end += 1
            self.execute(name, tokens[start:end])
            position = end

    def _handlers(self) -> dict[Command, Callable[..., None]]:
        return {
            Command.HELP: self._help,
            Command.MANUAL: self._manual,
            Command.EXAMPLE: self._example,
            Command.CREATE_PRODUCT: self.aggregator.create_product,
            Command.CREATE_INGREDIENT: self._create_ingredient,
            Command.SET_INGREDIENT_NUTRIENT: self._set_nutrient,
            Command.ADD_INGREDIENT_TO_PRODUCT: self._add_ingredient,
            Command.SET_SERVING_SIZE: self._set_serving_size,
            Command.SET_OUTPUT_FILE: self._set_output_file,
            Command.PRINT_SUMMARY: self._print_summary,
            Command.PRINT_INGREDIENT_LIST: self._print_ingredient_list,
            Command.PRINT_NUTRITIONAL_TABLE: self._print_nutritional_table,
            Command.PRINT_INGREDIENT_NUTRITION: self._print_ingredient_nutrition,
        }

    def _help(self) -> None:
        self.output.write_lines([usage_text()])

    def _manual(self) -> None:
        self.output.write_lines([MANUAL.rstrip("\n")])

    def _example(self) -> None:
        if not self.allow_files:
            raise CommandError("example is not available in this session")
        example = CommandSession(
            output=ReportOutput(stream=self.output.stream),
            example_output_file=self.example_output_file,
        )
        example.output.redirect(self.example_output_file)
        example.run_script(EXAMPLE_SCRIPT)
        self.output.write_lines(
            [f"Example report written to {self.example_output_file}"]
        )

    def _create_ingredient(
        self,
        name: str,
        label_mass: str,
        serving_size: str,
        display_name: str | None = None,
    ) -> None:
        self.aggregator.catalog.define_ingredient(
            name,
            parse_quantity(label_mass, "label mass"),
            parse_quantity(serving_size, "serving size"),
            display_name,
        )

    def _set_nutrient(self, ingredient: str, nutrient: str, value: str) -> None:
        amount = parse_quantity(value, nutrient) if value.strip() else None
        self.aggregator.catalog.set_nutrient(ingredient, nutrient, amount)

    def _add_ingredient(self, ingredient: str, used_mass: str) -> None:
        self.aggregator.add_ingredient(
            ingredient, parse_quantity(used_mass, "used mass")
        )

    def _set_serving_size(self, grams: str) -> None:
        self.aggregator.set_serving_size(parse_quantity(grams, "serving size"))

    def _set_output_file(self, path: str) -> None:
        if not self.allow_files:
            raise CommandError("set_output_file is not available in this session")
        self.output.redirect(path)

    def _print_summary(self) -> None:
        self.output.write_lines(render_summary(self.aggregator.summary()))

    def _print_ingredient_list(self) -> None:
        self.output.write_lines(
            render_ingredient_list(self.aggregator.ingredient_list())
        )

    def _print_nutritional_table(self) -> None:
        self.output.write_lines(
            render_nutritional_table(self.aggregator.nutritional_table())
        )

    def _print_ingredient_nutrition(self, ingredient: str) -> None:
        self.output.write_lines(
            render_ingredient_nutrition(
                self.aggregator.ingredient_nutrition(ingredient)
            )
        )


def parse_quantity(raw: str, what: str) -> float:
    """Parse a finite numeric command argument."""
    try:
        value = float(raw)
    except ValueError:
        raise InvalidQuantityError(f"Invalid {what}: {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidQuantityError(f"Invalid {what}: {raw!r}")
    return value
