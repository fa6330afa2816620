import pytest

import chronokit.config as chrono_config
from chronokit import ManualClock


@pytest.fixture(autouse=True)
def reset_config():
    # Reset global state around every test
    chrono_config._config = None
    yield
    chrono_config._config = None


@pytest.fixture
def clock():
    return ManualClock(start=100.0)
