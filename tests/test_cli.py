"""Tests for the command-line entrypoint."""

from pathlib import Path

from recipe_nutrition import cli
from recipe_nutrition.cli import main
from recipe_nutrition.config import Settings
from recipe_nutrition.containers import AppContainer


def test_main_without_commands_prints_help(capsys, container: AppContainer) -> None:
    assert main([], container=container) == 0

    captured = capsys.readouterr()
    assert captured.out.startswith("Usage: recipe-nutrition")


def test_main_runs_command_stream(capsys, container: AppContainer) -> None:
    exit_code = main(
        [
            "create_product", "Banana Bread",
            "create_ingredient", "banana", "118", "118",
            "set_ingredient_nutrient", "banana", "Calories", "105",
            "add_ingredient_to_product", "banana", "300",
            "set_serving_size", "25",
            "print_summary",
            "print_nutritional_table",
        ],
        container=container,
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Servings       : 12" in out
    assert "Calories       : 266.9492" in out
    assert "Calories       : 22.25" in out


def test_main_unknown_command_exits_non_zero(
    capsys, container: AppContainer
) -> None:
    assert main(["bake"], container=container) == 1

    captured = capsys.readouterr()
    assert "Unknown command: bake" in captured.err
    assert "recipe-nutrition help" in captured.err


def test_main_reports_command_errors(capsys, container: AppContainer) -> None:
    assert main(["set_serving_size", "0"], container=container) == 1

    assert "Serving size must be positive" in capsys.readouterr().err


def test_main_runs_script_file(
    capsys, container: AppContainer, tmp_path: Path
) -> None:
    script = tmp_path / "bread.txt"
    script.write_text(
        "\n".join(
            [
                "# banana bread",
                "create_product 'Banana Bread'",
                "create_ingredient banana 118 118 'Ripe Banana'",
                "add_ingredient_to_product banana 300",
            ]
        ),
        encoding="utf-8",
    )

    exit_code = main(
        ["--script", str(script), "print_ingredient_list"], container=container
    )

    assert exit_code == 0
    assert "Ripe Banana    : 300 g" in capsys.readouterr().out


def test_main_example_writes_configured_file(
    capsys, container: AppContainer
) -> None:
    assert main(["example"], container=container) == 0

    path = Path(container.settings.example_output_file)
    assert path.read_text(encoding="utf-8").startswith("=== Product Summary ===")
    assert str(path) in capsys.readouterr().out


def test_main_reports_invalid_settings(capsys, monkeypatch) -> None:
    monkeypatch.setattr(cli, "Settings", lambda: Settings(log_level=["loud"]))

    assert main(["print_summary"]) == 1

    captured = capsys.readouterr()
    assert captured.err.startswith("Error:")
    assert "log_level" in captured.err
