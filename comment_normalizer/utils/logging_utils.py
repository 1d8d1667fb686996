import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from ..config.settings import settings  # Use relative import from config within the same package

# JSON output relies on python-json-logger (`pythonjsonlogger.json.JsonFormatter`
# is referenced from logging_config.yaml).

DEFAULT_LOGGING_CONFIG_PATH = Path(settings.LOGGING_CONFIG_PATH)


def setup_logging(
    config_path: Path = DEFAULT_LOGGING_CONFIG_PATH,
    log_level: Optional[str] = None,
    json_format: bool = False,
) -> None:
    """
    Set up logging configuration from a YAML file.

    Args:
        config_path (Path): Path to the logging configuration YAML file.
        log_level (Optional[str]): Overrides the level of the package logger and console handler (any case).
        json_format (bool): Switch the console handler to the JSON formatter.
    """
    if log_level:
        log_level = log_level.upper()
    if config_path.exists():
        try:
            with open(config_path, "rt", encoding="utf-8") as f:
                log_config = yaml.safe_load(f.read())
            handler = log_config.get("handlers", {}).get("console")
            if handler is not None:
                if json_format:
                    handler["formatter"] = "json"
                if log_level:
                    handler["level"] = log_level
            if log_level and "comment_normalizer" in log_config.get("loggers", {}):
                log_config["loggers"]["comment_normalizer"]["level"] = log_level
            logging.config.dictConfig(log_config)
            logging.getLogger(__name__).debug(f"Logging configured successfully from {config_path}")
        except Exception as e:
            logging.basicConfig(level=log_level or logging.INFO)  # Basic config as fallback
            logging.error(f"Error loading logging configuration from {config_path}: {e}. Using basicConfig.")
    else:
        logging.basicConfig(level=log_level or logging.INFO)  # Basic config if no file found
        logging.warning(f"Logging configuration file not found at {config_path}. Using basicConfig.")
