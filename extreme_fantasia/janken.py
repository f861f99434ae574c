"""Rock-paper-scissors used to decide which player goes first."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

Ask = Callable[[str], str]
Output = Callable[[str], None]

HAND_CHOICES = ("1", "2", "3")
TURN_CHOICES = ("1", "2")


class Hand(Enum):
    """A janken hand, keyed by the digit a player types for it."""

    ROCK = "1"
    SCISSORS = "2"
    PAPER = "3"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def beats(self, other: Hand) -> bool:
        """Return True if this hand wins against ``other``."""
        return _BEATS[self] is other


_LABELS = {Hand.ROCK: "グー", Hand.SCISSORS: "チョキ", Hand.PAPER: "パー"}
_BEATS = {Hand.ROCK: Hand.SCISSORS, Hand.SCISSORS: Hand.PAPER, Hand.PAPER: Hand.ROCK}


def parse_hand(choice: str) -> Hand:
    """Turn a typed choice into a hand; raise ValueError if it names none."""
    try:
        return Hand(choice.strip())
    except ValueError:
        raise ValueError(f"invalid janken choice: {choice!r}") from None


def _describe(valid: Sequence[str]) -> str:
    if len(valid) == 2:
        return f"{valid[0]}または{valid[1]}"
    return ", ".join(valid[:-1]) + f", または {valid[-1]}"


def prompt_choice(
    prompt: str,
    valid: Sequence[str],
    ask: Ask = input,
    output: Output = print,
) -> str:
    """Ask until the answer, stripped, is one of ``valid``."""
    while True:
        answer = ask(prompt).strip()
        if answer in valid:
            return answer
        output(f"無効な選択です。{_describe(valid)}を選んでください。")


def determine_winner(
    player1_choice: str,
    player2_choice: str,
    ask: Ask = input,
    output: Output = print,
) -> int:
    """Play janken until someone wins; return the winning player's number."""
    while True:
        hand1 = parse_hand(player1_choice)
        hand2 = parse_hand(player2_choice)
        if hand1 is not hand2:
            break
        output("あいこです。もう一度選んでください。")
        player1_choice = prompt_choice("Player 1の選択> ", HAND_CHOICES, ask, output)
        player2_choice = prompt_choice("Player 2の選択> ", HAND_CHOICES, ask, output)

    if hand1.beats(hand2):
        output("Player 1の勝ちです！")
        return 1
    output("Player 2の勝ちです！")
    return 2


def decide_turn(winner: int, ask: Ask = input, output: Output = print) -> tuple[int, int]:
    """Let the winner choose to go first or second; return (first, second)."""
    if winner not in (1, 2):
        raise ValueError(f"invalid player id: {winner}")
    output(f"Player {winner}: 先行または後攻を選んでください。(1: 先行, 2: 後攻)")
    choice = prompt_choice("", TURN_CHOICES, ask, output)
    if choice == "1":
        output("勝者は先行を選びました。")
        return winner, 3 - winner
    output("勝者は後攻を選びました。")
    return 3 - winner, winner


def janken(ask: Ask = input, output: Output = print) -> tuple[int, int]:
    """Run the whole janken exchange and return (turn player, non-turn player)."""
    output(
        "じゃんけんをします。Player 1: 1: グー、2: チョキ、3: パー のいずれかを選択してください。"
    )
    player1_choice = prompt_choice("Player 1の選択> ", HAND_CHOICES, ask, output)
    output("Player 2: 1: グー、2: チョキ、3: パー のいずれかを選択してください。")
    player2_choice = prompt_choice("Player 2の選択> ", HAND_CHOICES, ask, output)
    winner = determine_winner(player1_choice, player2_choice, ask, output)
    return decide_turn(winner, ask, output)