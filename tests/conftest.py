import itertools

import pytest


@pytest.fixture
def sequence_rng():
    """Build an rng that cycles through fixed values in [0, 1)."""
    def make(values):
        it = itertools.cycle(values)
        return lambda: next(it)
    return make
