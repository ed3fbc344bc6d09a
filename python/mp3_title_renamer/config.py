"""Configuration management for MP3 Title Renamer."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

DEFAULT_EXTENSIONS = (".mp3",)
LOGGER_NAME = "mp3_title_renamer"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def parse_extensions(raw: Optional[str]) -> Tuple[str, ...]:
    """
    Parse a comma-separated extension list.

    Args:
        raw: Value such as "mp3, .MP2". None or blank gives the defaults.

    Returns:
        Tuple of lower-case extensions, each with a leading dot.
    """
    if raw is None or not raw.strip():
        return DEFAULT_EXTENSIONS

    extensions = []
    for part in raw.split(","):
        ext = part.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in extensions:
            extensions.append(ext)
    return tuple(extensions)


def load_config(env_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of configuration values.
    """
    if env_file is None:
        env_file = ".env"

    env_path = Path(env_file)
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        eprint(f"Loaded environment from {env_path.resolve()}")
    else:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    return {
        "extensions": parse_extensions(os.getenv("MP3_RENAMER_EXTENSIONS")),
        "log_file": os.getenv("MP3_RENAMER_LOG_FILE") or None,
        "log_level": (os.getenv("MP3_RENAMER_LOG_LEVEL") or "WARNING").upper(),
    }


def validate_config(config: dict) -> List[str]:
    """
    Validate configuration and return list of problems.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        List of problem descriptions (empty if configuration is usable).
    """
    problems = []

    if not config.get("extensions"):
        problems.append("MP3_RENAMER_EXTENSIONS does not name any extension")

    level = config.get("log_level", "WARNING")
    if level not in LOG_LEVELS:
        problems.append(
            f"MP3_RENAMER_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)} (got {level!r})"
        )

    return problems


def setup_logging(verbose: bool = False, log_file: Optional[str] = None,
                  level: str = "WARNING") -> logging.Logger:
    """Configure logging with console and optional file handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    console_level = logging.DEBUG if verbose else getattr(logging, level, logging.WARNING)
    logger.setLevel(logging.DEBUG if log_file else console_level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
