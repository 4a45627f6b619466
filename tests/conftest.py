import pytest

from cpgen import PasswordGeneratorBuilder, SeededRandomSource


class ScriptedSource:
    """Returns queued values (modulo bound) and records each bound asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def randbelow(self, bound):
        self.bounds.append(bound)
        return self.values.pop(0) % bound


@pytest.fixture
def seeded():
    return SeededRandomSource(1234)


@pytest.fixture
def builder():
    return PasswordGeneratorBuilder()


@pytest.fixture
def scripted():
    return ScriptedSource
