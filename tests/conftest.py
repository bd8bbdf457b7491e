import random

import pytest


class ScriptedRandom(random.Random):
    """Random source that replays a fixed list of randrange results."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, start, stop=None, step=1):
        value = self.values.pop(0)
        assert start <= value < stop
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
