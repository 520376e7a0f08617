import logging

import numpy as np
import pytest
from loguru import logger

from container_models import VolumeContainer
from container_models.base import Volume


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(scope="session")
def random_volume() -> Volume:
    """Build a reproducible random volume with a different length along every axis."""
    rng = np.random.default_rng(42)
    volume = rng.normal(size=(4, 5, 6))
    volume.setflags(write=False)
    return volume


@pytest.fixture(scope="session")
def step_volume() -> Volume:
    """Build a single slice that steps from 0 to 1 on its last row."""
    volume = np.array([[[0.0, 0.0, 0.0], [0.0, 0.0, 0.0], [1.0, 1.0, 1.0]]])
    volume.setflags(write=False)
    return volume


@pytest.fixture
def volume_container(random_volume: Volume) -> VolumeContainer:
    return VolumeContainer(data=random_volume.copy())
