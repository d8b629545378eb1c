# rules/dice.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

import structlog

from rollr.metrics import inc_counter

# Counts and side values are bounded to unsigned 16-bit; larger groups fall back.
MAX_DICE_COUNT = 65535
_MAX_SIDES = 65535

_DICE_RE = re.compile(r"(?P<count>\d*)d(?P<sides>\d+)", re.IGNORECASE | re.ASCII)

log = structlog.get_logger()


class DieKind(IntEnum):
    """Supported die side counts. No other value is representable."""

    D3 = 3
    D4 = 4
    D5 = 5
    D6 = 6
    D7 = 7
    D8 = 8
    D10 = 10
    D12 = 12
    D14 = 14
    D16 = 16
    D20 = 20
    D24 = 24
    D30 = 30
    D50 = 50
    D60 = 60
    D100 = 100

    @classmethod
    def from_sides(cls, n: int) -> DieKind | None:
        """Return the DieKind for ``n`` sides, or None when unsupported."""
        try:
            return cls(n)
        except ValueError:
            return None

    @property
    def sides(self) -> int:
        return int(self.value)


@dataclass(frozen=True)
class RollRequest:
    count: int
    die: DieKind

    def __post_init__(self) -> None:
        if not isinstance(self.die, DieKind):
            raise ValueError(f"Unsupported die: {self.die!r}")
        if self.count < 1:
            raise ValueError(f"Dice count must be at least 1, got {self.count}")

    @classmethod
    def default(cls) -> RollRequest:
        return cls(count=1, die=DieKind.D6)

    @property
    def sides(self) -> int:
        return self.die.sides

    def __str__(self) -> str:
        return f"{self.count}D{self.sides}"


def _bounded_int(group: str, limit: int) -> int | None:
    digits = group.lstrip("0") or "0"
    # Checked on length first; int() refuses very long digit strings
    if len(digits) > len(str(limit)):
        return None
    n = int(digits)
    return n if n <= limit else None


def _parse_count(group: str) -> int | None:
    n = _bounded_int(group, MAX_DICE_COUNT) if group else None
    return n if n else None


def _parse_die(group: str) -> DieKind | None:
    n = _bounded_int(group, _MAX_SIDES)
    return DieKind.from_sides(n) if n is not None else None


def parse_dice_arg(raw: str | None) -> RollRequest:
    """Turn a ``[count]D<sides>`` token into a RollRequest.

    Never raises. Anything that does not match the grammar yields 1D6. An
    unusable count becomes 1; an unsupported side count becomes D6 while the
    parsed count is kept (``2D99`` -> 2D6).
    """
    inc_counter("dice.parse")
    m = _DICE_RE.fullmatch(raw) if raw else None
    if m is None:
        inc_counter("dice.parse.fallback")
        log.debug("rules.dice.parse.fallback", raw=raw, reason="no_match")
        return RollRequest.default()

    count = _parse_count(m.group("count"))
    if count is None:
        if m.group("count"):
            inc_counter("dice.parse.fallback")
            log.debug("rules.dice.parse.fallback", raw=raw, reason="bad_count")
        count = 1

    die = _parse_die(m.group("sides"))
    if die is None:
        inc_counter("dice.parse.fallback")
        log.debug("rules.dice.parse.fallback", raw=raw, reason="unsupported_sides")
        die = DieKind.D6

    req = RollRequest(count=count, die=die)
    log.debug("rules.dice.parse", raw=raw, count=req.count, sides=req.sides)
    return req
