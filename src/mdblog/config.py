"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    site_title:  str = Field(default="Blog",            description="Title of the generated index page")
    site_root:   str = Field(default=".",               description="Directory that markdown body paths resolve against")
    posts_index: str = Field(default="data/posts.json", description="JSON posts index, relative to the CWD")
    output_dir:  str = Field(default="dist",            description="Directory for generated HTML pages")
    locale:      str = Field(default="pt", pattern="^(pt|en)$", description="Date and label language")
    log_level:   str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="Root log level")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
