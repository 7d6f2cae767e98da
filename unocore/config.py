"""Settings read from the environment (and a local .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

SEED_VAR = "UNOCORE_SEED"
LOG_LEVEL_VAR = "UNOCORE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the CLI."""

    seed: Optional[int] = None
    log_level: str = "WARNING"


def load_settings(dotenv: bool = True) -> Settings:
    """Build settings from environment variables.

    Values already set in the environment win over the .env file.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    raw_seed = os.environ.get(SEED_VAR, "").strip()
    seed: Optional[int] = None
    if raw_seed:
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"{SEED_VAR} must be an integer, got {raw_seed!r}") from None

    log_level = os.environ.get(LOG_LEVEL_VAR, "WARNING").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"{LOG_LEVEL_VAR} must be a logging level name, got {log_level!r}")

    return Settings(seed=seed, log_level=log_level)
