import tomllib
import os
import logging
from typing import Dict, Any

CONFIG_FILE_PATH = "pyproject.toml"

DEFAULT_CONFIG = {
    "logging_level": "WARNING",
    "canonicalize": False,  # Whether the CLI canonicalizes purls before printing them
    "json_indent": 2,
}

def get_logging_level_from_string(level_str: str) -> int:
    """Converts a logging level string to its integer value."""
    return getattr(logging, level_str.upper(), logging.WARNING)

def load_config(path: str = CONFIG_FILE_PATH) -> Dict[str, Any]:
    """
    Loads purlkit configuration from the [tool.purlkit] table of pyproject.toml.
    Falls back to default values if the file or specific keys are not found.
    The environment variable `PURLKIT_LOGGING_LEVEL` overrides `logging_level`.
    """
    config = DEFAULT_CONFIG.copy()
    logger = logging.getLogger(__name__)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
            settings = data.get("tool", {}).get("purlkit", {})

            logging_level = settings.get("logging_level", config["logging_level"])
            if isinstance(logging_level, str):
                config["logging_level"] = logging_level
            else:
                logger.warning(
                    f"Invalid 'logging_level' in {path}. Using default '{DEFAULT_CONFIG['logging_level']}'. "
                    f"Expected a string, got: {logging_level!r}"
                )

            canonicalize = settings.get("canonicalize", config["canonicalize"])
            if isinstance(canonicalize, bool):
                config["canonicalize"] = canonicalize
            else:
                logger.warning(
                    f"Invalid 'canonicalize' in {path}. Using default {DEFAULT_CONFIG['canonicalize']}. "
                    f"Expected true or false, got: {canonicalize!r}"
                )

            json_indent = settings.get("json_indent", config["json_indent"])
            # bool is an int subclass
            if isinstance(json_indent, int) and not isinstance(json_indent, bool) and json_indent >= 0:
                config["json_indent"] = json_indent
            else:
                logger.warning(
                    f"Invalid 'json_indent' in {path}. Using default {DEFAULT_CONFIG['json_indent']}. "
                    f"Expected a non-negative integer, got: {json_indent!r}"
                )

    except FileNotFoundError:
        logger.info(f"{path} not found. Using default configurations.")
    except tomllib.TOMLDecodeError:
        logger.error(f"Error decoding {path}. Using default configurations.")

    config["logging_level"] = os.getenv("PURLKIT_LOGGING_LEVEL", config["logging_level"])

    # Convert logging_level string to its integer representation.
    config["logging_level_int"] = get_logging_level_from_string(str(config["logging_level"]))

    return config

# Load configuration once when the module is imported.
PURL_CONFIG = load_config()
