"""Opening hands: drawing, mulligans, penalties and the start of play."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .janken import janken
from .turns import PlayerSort

Ask = Callable[[str], str]
Output = Callable[[str], None]

MAX_MULLIGAN_COUNT = 10
MULLIGAN_PENALTY_COUNT = 2
OPENING_HAND_SIZE = 5


class Location(Enum):
    IN_LIBRARY = "library"
    IN_HAND = "hand"


class MulliganState(Enum):
    DEFAULT = "default"
    FIRST = "first"
    SECOND = "second"
    OVER = "over"


@dataclass(eq=False)
class Card:
    """A single card; identity matters, so cards with equal names stay distinct."""

    name: str
    location: Location = Location.IN_LIBRARY
    face_open: bool = False


@dataclass
class PlayerArea:
    """One player's cards, library order and first-energy cards."""

    cards: list[Card] = field(default_factory=list)
    library: list[Card] = field(default_factory=list)
    first_energy: list[Card] = field(default_factory=list)

    def hand(self) -> list[Card]:
        return [card for card in self.cards if card.location is Location.IN_HAND]

    def return_hand_to_library(self, output: Output = print) -> list[Card]:
        """Move every card in hand to the bottom of the library."""
        returned = self.hand()
        for card in returned:
            card.location = Location.IN_LIBRARY
            output(f"{card.name}, をデッキに戻しました")
            self.library.append(card)
        return returned

    def shuffle(self, rng: random.Random) -> None:
        rng.shuffle(self.library)

    def draw(self, count: int, label: str, output: Output = print) -> list[Card]:
        """Draw up to ``count`` cards from the top of the library."""
        drawn = []
        for _ in range(count):
            if not self.library:
                output("デッキにカードがありません。")
                continue
            card = self.library.pop(0)
            card.location = Location.IN_HAND
            output(f"{label}は {card.name}, を引きました")
            drawn.append(card)
        return drawn

    def open_first_energy(self, output: Output = print) -> list[Card]:
        for card in self.first_energy:
            card.face_open = True
            output(f"ファーストエナジーは、{card.name}, です。")
        return list(self.first_energy)


@dataclass
class SetupResult:
    first_hand: list[Card]
    first_hand_opponent: list[Card]
    player_sort: PlayerSort


def check_the_will_of_mulligan(ask: Ask = input, output: Output = print) -> int:
    """Ask whether to mulligan (1) or keep (2) until one of them is given."""
    while True:
        output("[1]:マリガンをする [2]:キープする")
        answer = ask("").strip()
        try:
            choice = int(answer)
        except ValueError:
            choice = 0
        if choice in (1, 2):
            return choice
        output("無効な選択です。もう一度入力してください。")


class MulliganSession:
    """Runs the opening-hand sequence for both players."""

    def __init__(
        self,
        player: PlayerArea,
        opponent: PlayerArea,
        ask: Ask = input,
        output: Output = print,
        rng: random.Random | None = None,
    ) -> None:
        self.player = player
        self.opponent = opponent
        self.ask = ask
        self.output = output
        self.rng = rng if rng is not None else random.Random()
        self.counter = 0
        self.counter_opponent = 0
        self.state = MulliganState.DEFAULT

    def mulligan(self, area: PlayerArea, label: str) -> list[Card]:
        """Return the hand, shuffle, and draw a fresh opening hand."""
        area.return_hand_to_library(self.output)
        area.shuffle(self.rng)
        self.output("Shuffled cards in library:")
        return area.draw(OPENING_HAND_SIZE, label, self.output)

    def _show_hand(self, area: PlayerArea) -> None:
        for card in area.hand():
            self.output(f"{card.name}, ")

    def _mulligan_loop(self, area: PlayerArea, label: str, counter_attr: str) -> int:
        while True:
            self.mulligan(area, label)
            self._show_hand(area)
            count = getattr(self, counter_attr)
            if count >= MAX_MULLIGAN_COUNT:
                self.output("マリガンの回数が上限に達しました。")
                return count
            if check_the_will_of_mulligan(self.ask, self.output) != 1:
                return count
            count += 1
            setattr(self, counter_attr, count)
            self.output(f"マリガン{count}回目です")

    def run_player(self) -> int:
        self.state = MulliganState.FIRST
        return self._mulligan_loop(self.player, "あなた", "counter")

    def run_opponent(self) -> int:
        self.state = MulliganState.SECOND
        return self._mulligan_loop(self.opponent, "相手", "counter_opponent")

    def apply_penalty(self) -> None:
        """Each mulligan-heavy player gives the other an extra card."""
        if self.counter >= MULLIGAN_PENALTY_COUNT:
            self.opponent.draw(1, "相手", self.output)
        if self.counter_opponent >= MULLIGAN_PENALTY_COUNT:
            self.player.draw(1, "あなた", self.output)

    def finish(self) -> SetupResult:
        """Record final hands, decide turn order and open first energy."""
        self.output("your first hands are:")
        first_hand = self.player.hand()
        for card in first_hand:
            self.output(f"{card.name}, ")
        self.output("opponent first hands are:")
        first_hand_opponent = self.opponent.hand()
        for card in first_hand_opponent:
            self.output(f"{card.name}, ")

        first, second = janken(self.ask, self.output)
        sort = PlayerSort(first, second)
        self.output(f"先行: Player {first}, 後攻: Player {second}")

        self.output("ファーストエナジーオープン！！")
        self.player.open_first_energy(self.output)
        self.opponent.open_first_energy(self.output)
        self.state = MulliganState.OVER
        self.output("対戦を開始します")
        return SetupResult(first_hand, first_hand_opponent, sort)

    def run(self) -> SetupResult:
        self.run_player()
        self.run_opponent()
        self.apply_penalty()
        return self.finish()