"""UPC Checker - run mode configuration."""

# Python imports
import logging
from os import environ, path

# Third-party imports
from dotenv import load_dotenv

# Local imports

# Load environment variables from .env file
basedir = path.abspath(path.dirname(__file__))
load_dotenv(path.join(basedir, ".env"))


def log_level_from_env(default):
    """Level named by UPC_CHECKER_LOG_LEVEL, or `default` when unset or unknown."""
    level = (environ.get("UPC_CHECKER_LOG_LEVEL") or default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


class Config:
    """Base config."""

    # Fallback candidate used when no UPC is supplied. Whitespace is stripped
    # during normalization.
    DEFAULT_UPC = "6 3938200039 3"

    # Unset means log to stderr.
    UPC_CHECKER_LOG_FILE = environ.get("UPC_CHECKER_LOG_FILE") or None
    LOG_FORMAT = "%(asctime)s %(levelname)s : %(message)s"


class ProdConfig(Config):
    """Production System Configuration"""

    APP_ENV = "production"
    DEBUG = False
    TESTING = False
    LOG_LEVEL = log_level_from_env("WARNING")


class DevConfig(Config):
    """Development System Configuration"""

    APP_ENV = "development"
    DEBUG = True
    TESTING = True
    LOG_LEVEL = log_level_from_env("DEBUG")
