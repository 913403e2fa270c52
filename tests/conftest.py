"""
Pytest configuration and fixtures for pluralizer tests.
"""

import logging

import pytest

from pluralizer import core
from pluralizer.core import Inflector
from pluralizer.helpers.log import LOGGER_NAME


@pytest.fixture
def inflector():
    """Inflector seeded with the built-in tables."""
    return Inflector()


@pytest.fixture
def empty():
    """Inflector without any rules."""
    return Inflector(defaults=False)


@pytest.fixture
def default(monkeypatch):
    """Fresh module level inflector, so registrations do not leak between tests."""
    fresh = Inflector()
    monkeypatch.setattr(core, "default", fresh)
    return fresh


@pytest.fixture
def write_config(tmp_path):
    """Write configuration text to a file and return its path."""

    def write(text, name="inflector.cfg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def logger():
    """The "pluralizer" logger, restored after the test."""
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
