"""
Pytest fixtures for astquery tests.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging
from pathlib import Path

import pytest

from astquery.loader import parse_package, roots

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def service_dir() -> Path:
    """Directory with the service fixture modules."""
    return FIXTURES_DIR / "service"


@pytest.fixture
def service_modules(service_dir):
    """Parsed service fixture modules, ordered by path."""
    return parse_package(service_dir)


@pytest.fixture
def service_roots(service_modules):
    """Module nodes of the service fixture package."""
    return roots(service_modules)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() calls made by CLI tests."""
    yield
    logger = logging.getLogger("astquery")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
