"""Process-wide pseudo-random number source."""

from __future__ import annotations

import random as _stdlib_random
import secrets
from typing import ClassVar, overload


class Random:
    """Uniform random values from one shared Mersenne Twister generator."""

    _generator: ClassVar[_stdlib_random.Random] = _stdlib_random.Random(0)

    @classmethod
    def init(cls, seed: int | None = None) -> None:
        """Reseed the generator; with no seed, seed from system entropy."""
        if seed is None:
            seed = secrets.randbits(32)
        Random._generator = _stdlib_random.Random(seed)

    @classmethod
    def value(cls) -> float:
        """A value in [0, 1)."""
        return Random._generator.random()

    @overload
    @classmethod
    def range(cls, minimum: int, maximum: int) -> int: ...

    @overload
    @classmethod
    def range(cls, minimum: float, maximum: float) -> float: ...

    @classmethod
    def range(cls, minimum, maximum):
        """A value in [minimum, maximum); integral when both bounds are ints."""
        span = maximum - minimum
        if isinstance(minimum, int) and isinstance(maximum, int):
            return int(cls.value() * span) + minimum
        return cls.value() * span + minimum