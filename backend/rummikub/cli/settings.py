"""Solver CLI configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class SolverCliSettings(BaseSettings):
    model_config = {"env_prefix": "RUMMIKUB_"}

    log_dir: str | None = Field(default=None, min_length=1)
    # 0 prints every decomposition.
    max_solutions: int = Field(default=0, ge=0)
