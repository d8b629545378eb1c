# rules/rng.py

from __future__ import annotations

import random
from typing import Protocol

import structlog

from rollr.metrics import inc_counter, observe_histogram

from .dice import RollRequest
from .types import CoinFlip, RollResult


class RandomSource(Protocol):
    """Anything that can draw an integer from an inclusive range.

    random.Random and random.SystemRandom both satisfy this.
    """

    def randint(self, a: int, b: int) -> int:
        ...


class DiceRNG:
    def __init__(self, seed: int | None = None, source: RandomSource | None = None):
        self._rng: RandomSource = source if source is not None else random.Random(seed)
        self._log = structlog.get_logger()

    def roll_dice(self, count: int, sides: int) -> list[int]:
        """Draw ``count`` independent values from [1, sides], in generation order."""
        if sides < 1:
            raise ValueError(f"Die needs at least one side, got {sides}")
        if count < 0:
            raise ValueError(f"Dice count cannot be negative, got {count}")
        self._log.debug("rules.rng.roll.start", count=count, sides=sides)
        rolls = [self._rng.randint(1, sides) for _ in range(count)]
        inc_counter("rng.roll")
        inc_counter("rng.dice", count)
        observe_histogram("rng.roll.count", count)
        self._log.debug("rules.rng.roll.result", sides=sides, rolls=rolls)
        return rolls

    def throw(self, request: RollRequest) -> RollResult:
        rolls = self.roll_dice(request.count, request.sides)
        return RollResult(count=request.count, sides=request.sides, rolls=tuple(rolls))

    def flip_coin(self) -> bool:
        out = self._rng.randint(0, 1) == 1
        inc_counter("rng.flip")
        self._log.debug("rules.rng.flip.result", result=out)
        return out

    def flip(self) -> CoinFlip:
        return CoinFlip(tails=self.flip_coin())


def roll_dice(count: int, sides: int, rng: DiceRNG | None = None) -> list[int]:
    return (rng or DiceRNG()).roll_dice(count, sides)


def flip_coin(rng: DiceRNG | None = None) -> bool:
    return (rng or DiceRNG()).flip_coin()
