import logging

import pytest

from gallifreyan import parse

RING_RADIUS = 6.0


@pytest.fixture
def ring_radius() -> float:
    return RING_RADIUS


@pytest.fixture
def tchxd():
    return parse("TCHXD")


@pytest.fixture
def package_logger():
    logger = logging.getLogger("gallifreyan")
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
