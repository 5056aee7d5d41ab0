import pytest

from phrasetrie import build_trie


FULL_VOCABULARY = {
    "break": 1,
    "shooting": 2,
    "break out": 3,
    "break up": 4,
    "shooting up": 5,
    "break out nicely": 6,
    "r/g": 7,
    "breaking double bottom": 8,
    "double bottom": 9,
}


@pytest.fixture
def full_vocabulary():
    return dict(FULL_VOCABULARY)


@pytest.fixture
def full_trie():
    return build_trie(FULL_VOCABULARY)
