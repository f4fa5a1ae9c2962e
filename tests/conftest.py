import math

import pytest


@pytest.fixture
def trig():
    return lambda x: 2 * x - 3 * math.sin(x) + 5


@pytest.fixture
def trig_root():
    return -2.8832368
