"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    sample_tasks: bool = Field(
        default=True,
        description="Start with the demo tasks on the board",
    )

    model_config = {
        "env_prefix": "TASKBOARD_",
    }
