"""Runner configuration."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunnerSettings(BaseSettings):
    """Settings for ``tdd-run``.

    Loads from environment variables automatically:
        TDD_LOG_LEVEL, TDD_OUTPUT, TDD_TRACE, TDD_TRACE_OUTPUT

    Command-line options take precedence over the environment.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Level for framework log records written to stderr"
    )
    output: Path | None = Field(default=None, description="File receiving the report instead of stdout")
    trace: bool = Field(default=False, description="Record an OpenTelemetry span per test")
    trace_output: Path = Field(default=Path("traces.jsonl"), description="JSONL file for recorded spans")

    model_config = SettingsConfigDict(
        env_prefix="TDD_",
        extra="ignore",
    )
