from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:  # returns in [0, stop)
        ...
