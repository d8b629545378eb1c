"""Dice parsing and random outcome generation."""

from .dice import MAX_DICE_COUNT, DieKind, RollRequest, parse_dice_arg
from .rng import DiceRNG, RandomSource, flip_coin, roll_dice
from .types import CoinFlip, RollResult

__all__ = [
    "MAX_DICE_COUNT",
    "CoinFlip",
    "DiceRNG",
    "DieKind",
    "RandomSource",
    "RollRequest",
    "RollResult",
    "flip_coin",
    "parse_dice_arg",
    "roll_dice",
]
