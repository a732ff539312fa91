import pytest

from aliasargs.core.registry import LabelRegistry
from aliasargs.core.values import ValueType
from aliasargs.utils import logging_manager
from aliasargs.utils.logging_manager import LogLevel


@pytest.fixture
def sample_registry():
    """Registry with one group of each type, some with several aliases."""
    registry = LabelRegistry()
    registry.register(["a", "b"], "some int arg documentation", ValueType.INT)
    registry.register(["c"], "some string arg documentation", ValueType.STR)
    registry.register(["d", "e", "f"], "some float arg documentation", ValueType.FLOAT)
    registry.register(["g", "h"], "some bool arg documentation", ValueType.BOOL)
    return registry


@pytest.fixture(autouse=True)
def reset_logging():
    """Cli instances change the shared verbosity; restore it after each test."""
    yield
    logging_manager.set_verbosity(LogLevel.NORMAL)
    logging_manager.cleanup()
