import pytest

from simplesearch import build_index, load_records

SCENARIO = ["the cat sat", "the dog ran", "cat and dog played"]


@pytest.fixture
def store():
    return load_records(SCENARIO)


@pytest.fixture
def index(store):
    return build_index(store)
