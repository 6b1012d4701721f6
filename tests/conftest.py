import pytest

from parser_core import engine as engine_module
from parser_core.bank import default_registry
from parser_core.engine import SmsTransactionEngine


@pytest.fixture(autouse=True)
def reset_engine():
    engine_module.reset()
    yield
    engine_module.reset()


@pytest.fixture
def engine():
    return SmsTransactionEngine(default_registry())
