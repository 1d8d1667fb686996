from typing import Any, Dict
from pathlib import Path

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_normalizer import __version__

# Define the root directory of the comment_normalizer package
SERVICE_ROOT_DIR = Path(__file__).parent.parent.resolve()
DEFAULT_CONFIG_PATH = SERVICE_ROOT_DIR / "config" / "app_config.yaml"
# Path to the repository root (two levels up from this settings.py)
PROJECT_ROOT_DIR = SERVICE_ROOT_DIR.parent


class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "CommentNormalizer"
    APP_VERSION: str = __version__
    # Forces DEBUG logging in the CLI
    DEBUG: bool = False

    # Source schema of the input batch ("schemaA" = tuber, "schemaB" = vosonSML)
    SOURCE_SCHEMA: str = "schemaB"

    # Emoji dictionary settings
    EMOJI_DICTIONARY_PATH: str = str(SERVICE_ROOT_DIR / "config" / "emoji_dictionary.csv")
    UNKNOWN_EMOJI_DESCRIPTION: str = "unknown"
    # Fill glyphs missing from the CSV with names from the emoji package
    EMOJI_DICTIONARY_INCLUDE_LIBRARY: bool = True

    # Batch processing settings
    NORMALIZER_MAX_WORKERS: int = 1

    # Logging configuration path (can be overridden by env var)
    LOGGING_CONFIG_PATH: str = str(SERVICE_ROOT_DIR / "config" / "logging_config.yaml")

    @field_validator("NORMALIZER_MAX_WORKERS")
    @classmethod
    def check_max_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError("NORMALIZER_MAX_WORKERS must be at least 1")
        return v

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT_DIR / ".env"),  # Load variables from project root .env
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from env or yaml
    )

    @classmethod
    def load_from_yaml(cls, config_path: Path = DEFAULT_CONFIG_PATH) -> "Settings":
        """
        Build settings with YAML values as defaults.

        Class attributes are the base layer, `config_path` overrides them and
        anything coming from the environment or `.env` wins over both.
        """
        yaml_values: Dict[str, Any] = {}
        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_values = yaml.safe_load(f) or {}

        env_settings = cls()
        merged = {**yaml_values, **env_settings.model_dump(exclude_unset=True)}
        return cls(**merged)


# Instantiate settings
settings = Settings.load_from_yaml()
