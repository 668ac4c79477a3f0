import pytest

from symdiff import Variable
from symdiff.logging_system import LogLevel, configure_logging


@pytest.fixture
def x():
    return Variable('x')


@pytest.fixture
def y():
    return Variable('y')


@pytest.fixture(autouse=True)
def quiet_logging():
    yield
    # drop any handlers bound to captured streams
    configure_logging(LogLevel.SILENT)
