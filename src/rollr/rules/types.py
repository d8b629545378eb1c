from dataclasses import dataclass

COIN_MARKER = "🪙"


@dataclass(frozen=True)
class RollResult:
    count: int
    sides: int
    rolls: tuple[int, ...]

    def render(self) -> str:
        return f"{self.count}D{self.sides} : {list(self.rolls)}"


@dataclass(frozen=True)
class CoinFlip:
    """Coin outcome; True reads as tails ("pile"), False as heads ("face")."""

    tails: bool

    @property
    def face(self) -> str:
        return "Tails" if self.tails else "Heads"

    def render(self) -> str:
        return f"{COIN_MARKER} {self.face} !"
