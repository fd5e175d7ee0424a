"""
Build overrides from ``PAGECRAFT_*`` environment variables.

A ``.env`` file in the working directory is read once at import and wins
over variables already set in the process, so a project can pin its output
directory and base URL next to its sources.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "PAGECRAFT_"
DOTENV_NAME = ".env"


def load_project_env(directory: Optional[Path] = None) -> Optional[Path]:
    """
    Load ``.env`` from ``directory`` (default: the working directory).

    Returns the file that was loaded, or None when there is none.
    """
    env_file = (directory or Path.cwd()) / DOTENV_NAME
    if not env_file.is_file():
        return None
    load_dotenv(dotenv_path=env_file, override=True)
    logger.debug("Loaded environment overrides from %s", env_file)
    return env_file


load_project_env()


class Settings(BaseModel):
    """
    Attributes:
        output_dir: ``PAGECRAFT_OUTPUT_DIR``, used when neither the CLI nor the config names one.
        base_url: ``PAGECRAFT_BASE_URL``, enables ``sitemap.xml`` for sites without a base URL.
        log_level: ``PAGECRAFT_LOG_LEVEL``, beats ``--log-level``.
    """
    output_dir: Optional[Path] = Field(default=None, alias=f"{ENV_PREFIX}OUTPUT_DIR")
    base_url: Optional[str] = Field(default=None, alias=f"{ENV_PREFIX}BASE_URL")
    log_level: Optional[str] = Field(default=None, alias=f"{ENV_PREFIX}LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


def _environment_values() -> Dict[str, Optional[str]]:
    values: Dict[str, Optional[str]] = {}
    for field in Settings.model_fields.values():
        raw = (os.getenv(field.alias) or "").strip()
        values[field.alias] = raw or None
    return values


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings snapshot; tests reset it with ``get_settings.cache_clear()``."""
    return Settings(**_environment_values())
