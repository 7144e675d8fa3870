"""Shared test fixtures for cachematrix tests."""

from __future__ import annotations

import numpy as np
import pytest
from loguru import logger


class CountingInverter:
    """Inversion routine stub that records every call.

    Delegates to ``numpy.linalg.inv`` unless ``fail_times`` is set, in which
    case the first ``fail_times`` calls raise ``LinAlgError``.
    """

    def __init__(self, fail_times: int = 0) -> None:
        self.fail_times = fail_times
        self.calls: list[tuple[np.ndarray, tuple, dict]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def __call__(self, matrix, *args, **kwargs):
        self.calls.append((np.array(matrix), args, kwargs))
        if self.call_count <= self.fail_times:
            raise np.linalg.LinAlgError("Singular matrix")
        return np.linalg.inv(matrix)


@pytest.fixture
def counting_inverter():
    """Inverter that counts calls and always succeeds."""
    return CountingInverter()


@pytest.fixture
def failing_once_inverter():
    """Inverter whose first call fails."""
    return CountingInverter(fail_times=1)


@pytest.fixture
def log_messages():
    """Capture cachematrix log messages (loguru does not feed pytest's caplog)."""
    messages: list[str] = []
    logger.enable("cachematrix")
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("cachematrix")


@pytest.fixture
def sample_matrix():
    """2x2 matrix [[1, 3], [2, 4]] with inverse [[-2, 1.5], [1, -0.5]]."""
    return np.array([[1.0, 3.0], [2.0, 4.0]])


@pytest.fixture
def sample_inverse():
    """Inverse of ``sample_matrix``."""
    return np.array([[-2.0, 1.5], [1.0, -0.5]])


@pytest.fixture
def singular_matrix():
    """2x2 matrix with linearly dependent rows."""
    return np.array([[1.0, 2.0], [2.0, 4.0]])


@pytest.fixture
def random_matrix():
    """Well-conditioned random 32x32 matrix."""
    rng = np.random.default_rng(1234)
    return rng.standard_normal((32, 32)) + 32 * np.eye(32)
