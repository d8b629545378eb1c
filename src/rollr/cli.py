# src/rollr/cli.py
"""
Command-line entry point: roll dice or flip a coin.

Examples:
  rollr            -> 1D6 : [4]
  rollr 2d20       -> 2D20 : [7, 19]
  rollr flip       -> 🪙 Heads !

Only the first argument is read. Anything that is not a coin-flip word is
treated as a dice token and falls back to 1D6 when it cannot be used.
"""
from __future__ import annotations

import click
import structlog
from pydantic import ValidationError

from rollr.config import Settings, load_settings
from rollr.logging import setup_logging
from rollr.metrics import get_counters, inc_counter
from rollr.rules.dice import parse_dice_arg
from rollr.rules.rng import DiceRNG

FLIP_WORDS = frozenset({"f", "flip", "flipcoin"})

log = structlog.get_logger()


def is_flip_request(token: str | None) -> bool:
    return token is not None and token.lower() in FLIP_WORDS


def run(token: str | None, rng: DiceRNG) -> str:
    """Dispatch one token and return the line to print."""
    if is_flip_request(token):
        inc_counter("cli.flip")
        return rng.flip().render()
    inc_counter("cli.roll")
    request = parse_dice_arg(token)
    return rng.throw(request).render()


def _load_settings_or_defaults() -> Settings:
    try:
        return load_settings()
    except ValidationError as exc:
        msg = click.style("WARNING: ignoring invalid ROLLR_* settings.", fg="yellow", bold=True)
        click.echo(f"{msg}\n{exc}", err=True)
        return Settings.model_construct()


def _setup_logging_or_console_only(settings: Settings) -> None:
    try:
        setup_logging(settings)
    except OSError as exc:
        msg = click.style(
            f"WARNING: cannot write log file {settings.logging_file_path!r}; file logging disabled.",
            fg="yellow",
            bold=True,
        )
        click.echo(f"{msg}\n{exc}", err=True)
        setup_logging(settings.model_copy(update={"logging_file": "NONE"}))


@click.command(
    name="rollr",
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
    help="Roll dice given as [COUNT]D<SIDES> (e.g. 2D20), or flip a coin with f/flip/flipcoin.",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(tokens: tuple[str, ...]) -> None:
    settings = _load_settings_or_defaults()
    _setup_logging_or_console_only(settings)

    token = tokens[0] if tokens else None
    if len(tokens) > 1:
        log.debug("cli.extra_args_ignored", ignored=list(tokens[1:]))
    log.debug("cli.invoke", token=token, seeded=settings.rng_seed is not None)

    rng = DiceRNG(seed=settings.rng_seed)
    click.echo(run(token, rng))
    log.debug("cli.done", counters=get_counters())


def main() -> None:  # pragma: no cover
    cli(prog_name="rollr")


if __name__ == "__main__":  # pragma: no cover
    main()
