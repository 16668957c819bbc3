"""Shared pytest fixtures for unit tests."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

# Ensure project root is on sys.path for imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import termline.redraw.resolver as resolver_module
import termline.shared.logging_config as logging_config
from termline.redraw.platforms import OSFamily
from termline.redraw.resolver import RedrawStrategy
from termline.shared.colors import Colors


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Path to the repository root."""
    return PROJECT_ROOT


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Drop the cached strategy, restore colors and undo logging setup."""
    resolver_module._cached = None
    logging_config._file_handler = None
    Colors.enable()
    root = logging.getLogger()
    package_logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    resolver_module._cached = None
    Colors.enable()
    for handler in list(root.handlers):
        if isinstance(handler, RotatingFileHandler) and handler not in original_handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(original_level)
    logging_config._file_handler = None
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def bash_strategy() -> RedrawStrategy:
    return RedrawStrategy(
        clear_prefix="\r",
        clear_suffix="",
        os_family=OSFamily.LINUX,
        shell="/bin/bash",
    )


@pytest.fixture
def zsh_strategy() -> RedrawStrategy:
    return RedrawStrategy(
        clear_prefix=resolver_module.CURSOR_UP_CLEAR_PREFIX,
        clear_suffix=resolver_module.MODE_RESET_SUFFIX,
        os_family=OSFamily.DARWIN,
        shell="/bin/zsh",
    )


@pytest.fixture
def native_strategy() -> RedrawStrategy:
    return RedrawStrategy(
        clear_prefix="\r",
        clear_suffix="",
        requires_native_console=True,
        os_family=OSFamily.WINDOWS,
    )
