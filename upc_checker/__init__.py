# /__init__.py

# Python Imports
import importlib
import logging
import os
from importlib import metadata
from pathlib import Path

# Third party imports
import toml

# Local imports


def load_config(dotted_path):
    """Resolve a config class from a dotted path such as
    'upc_checker.config.DevConfig'."""
    module_name, _, attr = dotted_path.rpartition(".")
    if not module_name:
        raise ImportError(f"APP_MODE must be a dotted path, got {dotted_path!r}")
    try:
        return getattr(importlib.import_module(module_name), attr)
    except AttributeError as e:
        raise ImportError(f"{module_name!r} has no config class {attr!r}") from e


##################################
### Load Run Mode
### Configuration based
### on environment
### (Production, Development)
##################################
app_config = load_config(os.environ.get("APP_MODE") or "upc_checker.config.ProdConfig")


##################################
### Logging Setup
##################################
if app_config.UPC_CHECKER_LOG_FILE:
    os.makedirs(os.path.dirname(os.path.abspath(app_config.UPC_CHECKER_LOG_FILE)), exist_ok=True)

logging.basicConfig(
    filename=app_config.UPC_CHECKER_LOG_FILE,
    level=app_config.LOG_LEVEL.upper(),
    format=app_config.LOG_FORMAT,
)

logger = logging.getLogger(__name__)


def log_message(message, source="argv"):
    """Helper function to prefix Log messages with the origin of the UPC candidate"""
    return f"[UPC: {source}] {message}"


logger.debug(f"UPC Checker run mode: {app_config.APP_ENV}")


##################################
### Version
##################################
_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def get_version():
    """Get the version of the application."""
    if _PYPROJECT.exists():
        with open(_PYPROJECT, "r") as f:
            pyproject_data = toml.load(f)
        return pyproject_data["project"]["version"]
    # Installed without the source tree.
    return metadata.version("upc-checker")


from upc_checker.checksum.validator import check_upc, compute_check_digit, is_valid_upc  # noqa: E402
from upc_checker.models import UPCCheckOutcome, UPCCheckResult  # noqa: E402
