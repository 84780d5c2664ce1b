"""Headless runner: play a batch of universes and print the winner tally."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

import msgspec
from rich.console import Console
from rich.table import Table

from apologies.config import SimulationConfig
from apologies.logging import configure_logging
from apologies.multiverse import count_wins, create_universes, run_universes, winner_tally


def _load_config(args: argparse.Namespace) -> SimulationConfig:
    config = (
        SimulationConfig.from_toml(args.config) if args.config else SimulationConfig()
    )
    overrides = {
        "size": args.size,
        "colors": tuple(args.colors) if args.colors else None,
        "universes": args.universes,
        "seed": args.seed,
        "max_turns": args.max_turns,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    config.validate()
    return config


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        config = _load_config(args)
    except (OSError, ValueError, msgspec.DecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.guess is not None and args.guess not in config.colors:
        print(f"ERROR: guess {args.guess!r} is not one of {list(config.colors)}", file=sys.stderr)
        return 2

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, config.colors)

    universes = create_universes(
        config.universes, config.size, config.colors, seed=config.seed
    )
    universes = run_universes(universes, max_ticks=config.max_turns)

    tally = winner_tally(universes)
    table = Table(title=f"{config.universes} universe(s) on a {config.size}x{config.size} board")
    table.add_column("Color")
    table.add_column("Wins", justify="right")
    for color in config.colors:
        table.add_row(color, str(tally.get(color, 0)))
    unfinished = sum(1 for u in universes if not u.is_finished)
    if unfinished:
        table.add_row("(unfinished)", str(unfinished))

    console = Console()
    console.print(table)
    if args.guess is not None:
        wins = count_wins(universes, args.guess)
        console.print(f"Guess [bold]{args.guess}[/bold] won {wins} of {len(universes)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apologies",
        description="Run Apologies race simulations across many universes.",
    )
    parser.add_argument("--config", type=str, help="TOML configuration file.")
    parser.add_argument("--size", type=int, help="Board dimension (>= 2).")
    parser.add_argument("--colors", nargs="+", help="Pawn colors in turn order.")
    parser.add_argument("--universes", type=int, help="Number of independent universes.")
    parser.add_argument("--seed", type=int, help="Base seed for reproducible runs.")
    parser.add_argument(
        "--max-turns",
        type=int,
        help="Safety cap: stop after this many ticks even if universes are unfinished.",
    )
    parser.add_argument("--guess", type=str, help="Color predicted to win.")
    parser.add_argument("--verbose", action="store_true", help="Log every roll and move.")
    parser.set_defaults(func=_cmd_run)
    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
