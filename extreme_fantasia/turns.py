"""Turn order bookkeeping."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class PlayerSort:
    """Which player goes first and which goes second."""

    first_player_id: int = 0
    second_player_id: int = 0


@dataclass
class TurnPlayer:
    """The player whose turn it is and the other one."""

    turn_player_id: int = 0
    non_turn_player_id: int = 0


def update_turn_player(
    turn: int, player_sort: PlayerSort, output: Callable[[str], None] = print
) -> TurnPlayer:
    """Odd turns belong to the first player, even turns to the second."""
    if turn % 2 == 1:
        current = TurnPlayer(player_sort.first_player_id, player_sort.second_player_id)
    else:
        current = TurnPlayer(player_sort.second_player_id, player_sort.first_player_id)
    output(f"{current.turn_player_id}, のターンです")
    return current