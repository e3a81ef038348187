"""Shared fixtures: a small hand-made dataset."""

import pytest

from nations.dataset import parse_entities
from nations.scales import default_scales

RAW = [
    {
        "name": "Bigland", "region": "North",
        "income": [[1800, 1000], [1900, 2000], [2000, 4000]],
        "population": [[1800, 1e8], [2000, 3e8]],
        "lifeExpectancy": [[1800, 30], [1950, 60], [2000, 75]],
    },
    {
        "name": "Smallia", "region": "South",
        "income": [[1850, 500]],
        "population": [[1800, 1e6], [1900, 2e6], [2009, 5e6]],
        "lifeExpectancy": [[1800, 25], [2009, 70]],
    },
    {
        "name": "Middleton", "region": "North",
        "income": [[1800, 800], [1950, 800], [2000, 12000]],
        "population": [[1800, 2e7], [1950, 5e7], [2009, 9e7]],
        "lifeExpectancy": [[1800, 35], [2009, 80]],
    },
]


@pytest.fixture
def raw():
    import copy
    return copy.deepcopy(RAW)


@pytest.fixture
def entities(raw):
    return parse_entities(raw)


@pytest.fixture
def scales():
    return default_scales(["North", "South"])
