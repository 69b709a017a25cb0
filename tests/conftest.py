import io
import logging
import random
import pytest
from unittest.mock import MagicMock
from src.utils.log import LOGGER_NAME
from tests.helpers import half_zero_distribution, uniform_distribution, write_file

@pytest.fixture
def random_bytes():
    """40000 pseudo-random bytes, enough for two full 16 KiB chunks and a short one."""
    return random.Random(42).randbytes(40000)

@pytest.fixture
def engineered_file(tmp_path):
    return write_file(tmp_path, "engineered.bin", half_zero_distribution())

@pytest.fixture
def uniform_file(tmp_path):
    return write_file(tmp_path, "uniform.bin", uniform_distribution())

@pytest.fixture
def empty_file(tmp_path):
    return write_file(tmp_path, "empty.bin", b"")

@pytest.fixture
def fake_stdin(monkeypatch):
    """Replaces sys.stdin with a mock whose binary buffer serves the given bytes."""
    def install(data: bytes):
        stdin = MagicMock()
        stdin.buffer = io.BytesIO(data)
        monkeypatch.setattr("sys.stdin", stdin)
        return stdin
    return install

@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
