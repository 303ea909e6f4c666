"""Random number and identifier generators."""

from __future__ import annotations

import random
from typing import Iterator

_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class RandomNumberGenerator:
    """Uniform integers over the full range of fixed-width types, from the OS entropy source."""

    def __init__(self) -> None:
        self._device = random.SystemRandom()

    def i32(self) -> int:
        return self._device.randint(_I32_MIN, _I32_MAX)

    def i64(self) -> int:
        return self._device.randint(_I64_MIN, _I64_MAX)

    def u32(self) -> int:
        return self._device.randint(0, _U32_MAX)

    def u64(self) -> int:
        return self._device.randint(0, _U64_MAX)


class UUIDGenerator:
    """Random identifiers."""

    def __init__(self) -> None:
        self._gen = RandomNumberGenerator()

    def next(self) -> int:
        return self._gen.u64()

    def next_i32(self) -> int:
        return self._gen.i32()


class LinearIDGenerator:
    """Sequential identifiers, starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._id = start

    def next(self) -> int:
        current = self._id
        self._id += 1
        return current

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()