"""Command-line entrypoint."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.commands import PROGRAM
from recipe_nutrition.config import Settings, parse_log_level
from recipe_nutrition.containers import AppContainer, build_container
from recipe_nutrition.domain.errors import NutritionError, UnknownCommandError

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Compute recipe nutrition facts from ingredient labels.",
        add_help=False,
    )
    parser.add_argument("--script", type=Path, help="File with one command per line")
    parser.add_argument("--log-level", help="Override the LOG_LEVEL setting")
    parser.add_argument("tokens", nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None, container: AppContainer | None = None) -> int:
    """Run the commands given on the command line and return an exit code."""
    args = build_parser().parse_args(argv)
    tokens = args.tokens or ([] if args.script else ["help"])
    try:
        resolved = container or build_container(Settings())
        configure_logging(
            parse_log_level(args.log_level or resolved.settings.log_level)
        )
        session = resolved.new_session()
        if args.script:
            with open(args.script, encoding="utf-8") as f:
                session.run_script(f)
        session.run_tokens(tokens)
    except UnknownCommandError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Run '{PROGRAM} help' for usage.", file=sys.stderr)
        return 1
    except NutritionError as exc:
        _logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValidationError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())


if __name__ == "__main__":
    run()
