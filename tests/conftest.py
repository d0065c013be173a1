import pytest

from pwengine.random_source import PseudoIndexSource


class FixedIndexSource:
    """Returns the given indices in order, cycling."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = []

    def randbelow(self, n):
        value = self.indices[len(self.calls) % len(self.indices)]
        self.calls.append(n)
        return value % n


@pytest.fixture
def seeded_source():
    return PseudoIndexSource(seed=1234)


@pytest.fixture
def fixed_source():
    return FixedIndexSource
