"""Calculator command configuration."""

from dataclasses import dataclass
from enum import Enum

PROGRAM = "recipe-nutrition"


@dataclass(frozen=True)
class CommandDefinition:
    """Declarative command definition."""

    name: str
    description: str
    arguments: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()

    @property
    def usage(self) -> str:
        parts = [self.name]
        parts.extend(f"<{arg}>" for arg in self.arguments)
        parts.extend(f"[{arg}]" for arg in self.optional)
        return " ".join(parts)


class Command(Enum):
    """Enum of calculator commands (single source of truth)."""

    HELP = CommandDefinition("help", "Print usage")
    MANUAL = CommandDefinition("manual", "Print the full manual")
    EXAMPLE = CommandDefinition("example", "Write a sample report to a file")
    CREATE_PRODUCT = CommandDefinition(
        "create_product", "Name the product", ("name",)
    )
    CREATE_INGREDIENT = CommandDefinition(
        "create_ingredient",
        "Define an ingredient from its label",
        ("name", "label_mass", "serving_size"),
        ("display_name",),
    )
    SET_INGREDIENT_NUTRIENT = CommandDefinition(
        "set_ingredient_nutrient",
        "Set a nutrient amount per label mass",
        ("ingredient", "nutrient", "value"),
    )
    ADD_INGREDIENT_TO_PRODUCT = CommandDefinition(
        "add_ingredient_to_product",
        "Add grams of an ingredient to the product",
        ("ingredient", "used_mass"),
    )
    SET_SERVING_SIZE = CommandDefinition(
        "set_serving_size", "Set the product serving size", ("grams",)
    )
    SET_OUTPUT_FILE = CommandDefinition(
        "set_output_file", "Append later reports to a file", ("path",)
    )
    PRINT_SUMMARY = CommandDefinition("print_summary", "Print the product summary")
    PRINT_INGREDIENT_LIST = CommandDefinition(
        "print_ingredient_list", "Print ingredients and used masses"
    )
    PRINT_NUTRITIONAL_TABLE = CommandDefinition(
        "print_nutritional_table", "Print product nutrient totals"
    )
    PRINT_INGREDIENT_NUTRITION = CommandDefinition(
        "print_ingredient_nutrition",
        "Print the nutrients of one ingredient",
        ("ingredient",),
    )

    @classmethod
    def lookup(cls, name: str) -> "Command | None":
        """Return the command with the given name, if any."""
        for entry in cls:
            if entry.value.name == name:
                return entry
        return None


def usage_text() -> str:
    """Return the short usage text."""
    lines = [f"Usage: {PROGRAM} [--script PATH] COMMAND [ARGS] [COMMAND [ARGS]]...", ""]
    lines.append("Commands:")
    width = max(len(entry.value.usage) for entry in Command)
    lines.extend(
        f"  {entry.value.usage:<{width}}  {entry.value.description}"
        for entry in Command
    )
    return "\n".join(lines)


MANUAL = f"""\
{PROGRAM}: nutrition facts for a recipe from ingredient labels

Each ingredient is declared with the mass its label values refer to and the
label's serving size. Nutrient values are set per label mass. When an
ingredient is added to the product, every nutrient it declares is scaled by
used_mass / label_mass and added to the product totals.

Set all nutrients of an ingredient before adding it: totals are accumulated
at the moment of adding and are not revised afterwards. Adding the same
ingredient again adds more of it.

An empty nutrient value ("") means the label has no data for it. Such values
are skipped, unlike 0 which is a real amount. Ingredients whose label mass is
not positive add mass to the product but no nutrients.

set_serving_size divides the product into servings (total mass / serving
size, rounded to the nearest whole serving). The nutritional table then shows
per-serving values as well.

Commands run in the order given, either on the command line or one per line
in a file passed with --script. set_output_file sends every later report to a
file; the file is emptied the first time it is selected.

Example:
  {PROGRAM} create_product "Banana Bread" \\
      create_ingredient banana 118 118 \\
      set_ingredient_nutrient banana Calories 105 \\
      add_ingredient_to_product banana 300 \\
      set_serving_size 25 print_summary print_nutritional_table

Settings are read from the environment or a .env file:
  LOG_LEVEL            logging level (default INFO)
  REPORT_OUTPUT_FILE   file to write reports to instead of standard output
  EXAMPLE_OUTPUT_FILE  file written by the example command

{usage_text()}
"""
