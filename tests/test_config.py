"""Tests for configuration helpers."""

import logging

from recipe_nutrition.config import Settings, parse_log_level


def test_parse_log_level_accepts_names_and_numbers() -> None:
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" WARNING ") == logging.WARNING
    assert parse_log_level("40") == logging.ERROR


def test_parse_log_level_falls_back_to_info() -> None:
    assert parse_log_level(None) == logging.INFO
    assert parse_log_level("chatty") == logging.INFO


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("EXAMPLE_OUTPUT_FILE", "sample.txt")
    monkeypatch.setenv("REPORT_OUTPUT_FILE", "report.txt")

    settings = Settings()

    assert settings.example_output_file == "sample.txt"
    assert settings.report_output_file == "report.txt"
