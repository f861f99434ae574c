"""Command-line entry point: set up a game from the terminal."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable

from .mulligan import Card, MulliganSession, PlayerArea
from .turns import update_turn_player

_EXIT_WORDS = {"\x1b", "esc", "escape", "exit", "quit"}

DEFAULT_DECK = [f"Card {n}" for n in range(1, 21)]
DEFAULT_ENERGY = ["First Energy"]


class _ExitRequested(Exception):
    pass


def is_exit_command(text: str) -> bool:
    """Return True if the typed text asks to leave the game."""
    return text.strip().lower() in _EXIT_WORDS


def build_area(names: Iterable[str], first_energy: Iterable[str]) -> PlayerArea:
    """Build a player's area with ``names`` as the library in order."""
    library = [Card(name) for name in names]
    energy = [Card(name) for name in first_energy]
    return PlayerArea(cards=library + energy, library=list(library), first_energy=energy)


def _ask(prompt: str) -> str:
    line = input(prompt)
    if is_exit_command(line):
        raise _ExitRequested
    return line


def _names(text: str) -> list[str]:
    return [name.strip() for name in text.split(",") if name.strip()]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Set up a card game from the terminal.")
    parser.add_argument("--deck", help="comma-separated card names for player 1")
    parser.add_argument("--opponent-deck", help="comma-separated card names for player 2")
    parser.add_argument("--seed", type=int, help="seed for shuffling")
    args = parser.parse_args(argv)

    deck = _names(args.deck) if args.deck else DEFAULT_DECK
    opponent_deck = _names(args.opponent_deck) if args.opponent_deck else DEFAULT_DECK
    session = MulliganSession(
        build_area(deck, DEFAULT_ENERGY),
        build_area(opponent_deck, DEFAULT_ENERGY),
        ask=_ask,
        rng=random.Random(args.seed),
    )
    try:
        result = session.run()
    except (_ExitRequested, EOFError):
        return 0
    update_turn_player(1, result.player_sort)
    return 0