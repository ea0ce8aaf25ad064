"""
Shared test fixtures.

All fixtures are explicit - people are built from literal date strings.
"""

import logging

import pytest

from lifetimes.observability import LOG_NAMESPACES
from tests.fixtures import make_person


@pytest.fixture
def scenario_people():
    """A: 450-380 BCE, B: 50-121 CE, both certain."""
    return [
        make_person("A", "-0450", "-0380", sort_key="Alpha"),
        make_person("B", "0050-03-01", "0121", sort_key="Beta"),
    ]


@pytest.fixture(autouse=True)
def reset_package_loggers():
    """CLI and server configure handlers on stdout; drop them after each test."""
    yield
    for name in LOG_NAMESPACES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
