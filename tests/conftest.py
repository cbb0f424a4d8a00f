import os
import sys
from pathlib import Path

import pytest


# Ensure the project root (repo folder) is importable when running pytest without an install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _clear_import_cache(prefix: str) -> None:
    for name in list(sys.modules.keys()):
        if name == prefix or name.startswith(prefix + "."):
            del sys.modules[name]


@pytest.fixture(scope="session")
def upc_checker(tmp_path_factory):
    """Import the package configured for development with logs in a temp folder.

    The run mode and logging are set up in upc_checker/__init__.py at import
    time, so the environment has to be in place before the (re)import.
    """

    data_dir = tmp_path_factory.mktemp("upc_checker_data")

    os.environ["APP_MODE"] = "upc_checker.config.DevConfig"
    os.environ["UPC_CHECKER_LOG_LEVEL"] = "DEBUG"
    # Keep log output off the CLI runner's streams.
    os.environ["UPC_CHECKER_LOG_FILE"] = str(Path(data_dir) / "test.log")

    _clear_import_cache("upc_checker")

    import upc_checker  # noqa: E402

    return upc_checker


@pytest.fixture()
def default_upc(upc_checker):
    return upc_checker.app_config.DEFAULT_UPC


@pytest.fixture()
def runner():
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture()
def cli(upc_checker):
    from upc_checker.cli import main

    return main
