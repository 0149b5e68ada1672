"""Shared fixtures."""

import random

import pytest


class FirstIndexRandom(random.Random):
    """Random source that always picks index 0.

    Shuffling with it keeps the deck in build order, and players always
    play the oldest card in hand.
    """

    def randrange(self, start, stop=None, step=1):
        return 0


@pytest.fixture
def first_index_rng():
    return FirstIndexRandom()


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
