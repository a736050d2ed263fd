"""Pydantic models for the report API."""

from pydantic import BaseModel, Field


class ReportRequest(BaseModel):
    """A command script to run in a fresh session."""

    commands: list[str] = Field(min_length=1)


class ReportResponse(BaseModel):
    """Report text produced by the commands."""

    output: str
