"""Shared fixtures: classic dice and a SecureRandom with scripted raw draws."""

import pytest

from nontransitive_dice.crypto import SecureRandom
from nontransitive_dice.dice import Die

FIXED_KEY = bytes(range(32))


class ScriptedBits:
    """Stand-in for ``secrets.randbits`` returning queued samples in order."""

    def __init__(self, samples):
        self.samples = list(samples)
        self.requested_bits = []

    def __call__(self, k: int) -> int:
        self.requested_bits.append(k)
        return self.samples.pop(0)


@pytest.fixture
def classic_dice():
    return [
        Die([2, 2, 4, 4, 9, 9]),
        Die([1, 1, 6, 6, 8, 8]),
        Die([3, 3, 5, 5, 7, 7]),
    ]


@pytest.fixture
def scripted_random():
    def factory(*samples):
        bits = ScriptedBits(samples)
        return SecureRandom(randbits=bits, token_bytes=lambda n: FIXED_KEY[:n]), bits
    return factory
