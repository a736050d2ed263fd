"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from recipe_nutrition.config import Settings
from recipe_nutrition.services.aggregator import NutritionAggregator
from recipe_nutrition.services.output import ReportOutput
from recipe_nutrition.services.session import CommandSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    new_session: Callable[..., CommandSession]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()

    def new_session(
        stream: TextIO | None = None, *, allow_files: bool = True
    ) -> CommandSession:
        output = ReportOutput() if stream is None else ReportOutput(stream=stream)
        if allow_files and resolved_settings.report_output_file:
            output.redirect(Path(resolved_settings.report_output_file))
        return CommandSession(
            aggregator=NutritionAggregator(),
            output=output,
            allow_files=allow_files,
            example_output_file=resolved_settings.example_output_file,
        )

    return AppContainer(settings=resolved_settings, new_session=new_session)
