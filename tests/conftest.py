import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks bound to CliRunner streams once a test finishes."""
    yield
    logger.remove()
