"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
DEFAULT_CATEGORIES = ["guides", "tutorials", "news", "blog", "technical"]


class Settings(BaseModel):
    app_name:    str = "mdmanifest"
    root_dir:    str = Field(default=".",             description="Directory holding the category folders")
    output_file: str = Field(default="manifest.json", description="Manifest path, relative to root_dir")
    categories:  list[str] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES),
                                   description="Category directory names, scanned in order")
    indent:      int = Field(default=2, ge=0, description="JSON indentation width")

    @field_validator("categories", mode="before")
    @classmethod
    def _split_categories(cls, value: Any) -> Any:
        """Accept 'guides,news' style strings from env vars."""
        if isinstance(value, str):
            return [c.strip() for c in value.split(",") if c.strip()]
        return value

    @property
    def root_path(self) -> Path:
        return Path(self.root_dir)

    @property
    def output_path(self) -> Path:
        return self.root_path / self.output_file


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDMANIFEST_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDMANIFEST_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
