"""Pytest configuration and shared fixtures for the rdoc2html test suite.

This module provides shared fixtures and test configuration that are used
across the entire test suite.
"""

import logging
import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from rdoc2html.ast import (
    ListEnd,
    ListItemEnd,
    ListItemStart,
    ListStart,
    ListType,
    Node,
    Paragraph,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the rdoc2html logger after a test reconfigures it.

    Yields
    ------
    logging.Logger
        The ``rdoc2html`` package logger.

    """
    package_logger = logging.getLogger("rdoc2html")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    saved_propagate = package_logger.propagate
    try:
        yield package_logger
    finally:
        for handler in package_logger.handlers:
            if handler not in saved_handlers:
                handler.close()
        package_logger.handlers[:] = saved_handlers
        package_logger.setLevel(saved_level)
        package_logger.propagate = saved_propagate


@pytest.fixture
def nested_bullet_events() -> list[Node]:
    """Provide a bullet list with two items, the second holding a numbered list.

    Returns
    -------
    list of Node
        Events in parser order.

    """
    return [
        ListStart(ListType.BULLET),
        ListItemStart(),
        Paragraph(text="one"),
        ListItemEnd(),
        ListItemStart(),
        Paragraph(text="two"),
        ListStart(ListType.NUMBER),
        ListItemStart(),
        Paragraph(text="inner"),
        ListItemEnd(),
        ListEnd(ListType.NUMBER),
        ListItemEnd(),
        ListEnd(ListType.BULLET),
    ]
