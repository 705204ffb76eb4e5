import random

import pytest

from imposter.engine import Session


@pytest.fixture
def category_map():
    return {
        "Animals": ["Cat", "Dog", "Owl"],
        "Food": ["Pizza", "Sushi"],
        "Empty": [],
    }


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(category_map, rng):
    return Session(category_map, rng=rng)
