"""
Sources of uniform random indices used by the password generator.

A source only has to provide ``randbelow(bound)``; anything with that method
can be handed to the builder, which keeps generation testable with a fixed
seed.
"""

from __future__ import annotations

import random
import secrets
import threading
from typing import Protocol, runtime_checkable

from .errors import InvalidArgumentError


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform index selection over ``[0, bound)``."""

    def randbelow(self, bound: int) -> int:
        ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise InvalidArgumentError(f"bound must be positive, got {bound}")


class SecureRandomSource:
    """
    Cryptographically secure source backed by the operating system.

    SystemRandom keeps no state in-process, so one instance can be shared
    across threads.
    """

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randbelow(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return "SecureRandomSource()"


class SeededRandomSource:
    """
    Deterministic source for tests and reproducible fixtures.

    NOT suitable for real passwords: the Mersenne Twister output is
    predictable once the seed is known.
    """

    def __init__(self, seed: int | str | bytes | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def randbelow(self, bound: int) -> int:
        _check_bound(bound)
        with self._lock:
            return self._rng.randrange(bound)

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"
