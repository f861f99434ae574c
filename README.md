# extreme_fantasia

This package runs the setup phase of a two-player card game in the console.
All prompts and messages are in Japanese.

A session goes through these steps in order:

1. **Player 1's opening hand.** The hand goes back into the library, the library is shuffled, and five cards are drawn. Player 1 then chooses to mulligan or to keep. After 10 mulligans there is no further prompt and the current hand is kept.
2. **Player 2's opening hand.** The same steps follow for player 2, under its own limit of 10 mulligans.
3. **Penalty.** A player who mulliganed 2 or more times gives the other player one extra card, drawn from the top of that player's library.
4. **Final hands.** Both final hands are printed.
5. **Turn order.** Rock-paper-scissors (janken) decides the winner, and a tie means both players throw again. The winner chooses to go first or second.
6. **First energy.** Each side's first energy cards are turned face up.

## Installation

```
pip install .
```

## Usage

```
extreme-fantasia [--deck NAMES] [--opponent-deck NAMES] [--seed N]
```

| Option | Meaning |
| --- | --- |
| `--deck` | Comma-separated card names for player 1's library, in order. The default is `Card 1` … `Card 20`. |
| `--opponent-deck` | The same, for player 2. |
| `--seed` | An integer seed for shuffling, so that a session can be repeated. |

Each player also has one first energy card named `First Energy`.

Answer each prompt with a number:

- **Mulligan prompt:** `1` to mulligan, `2` to keep.
- **Janken prompt:** `1` for グー (rock), `2` for チョキ (scissors), `3` for パー (paper).
- **Turn-order prompt:** the winner types `1` to go first or `2` to go second.

The prompt repeats until it gets a valid answer. To leave the program at any prompt, type `esc`, `escape`, `exit` or `quit`, or end input. When setup finishes, the program prints whose turn the first turn is.

## Library use

Every interactive function takes an `ask` callable in place of `input` and an `output` callable in place of `print`.

### `extreme_fantasia.janken`

- `Hand` holds the three throws. `Hand.beats(other)` says whether one throw wins against another.
- `parse_hand(choice)` reads `"1"`, `"2"` or `"3"` as a throw. Any other value raises `ValueError`.
- `prompt_choice(prompt, valid, ask, output)` asks until the answer is one of `valid`.
- `determine_winner(player1_choice, player2_choice, ask, output)` returns `1` or `2`. On a tie it asks both players again.
- `decide_turn(winner, ask, output)` lets the winner pick first or second and returns `(first, second)`. A winner other than 1 or 2 raises `ValueError`.
- `janken(ask, output)` runs the whole exchange.

```python
from extreme_fantasia.janken import determine_winner

lines = []
winner = determine_winner("1", "2", ask=lambda prompt: "1", output=lines.append)
assert winner == 1
```

### `extreme_fantasia.mulligan`

- `Card` is a single card. It has a `name`, a `location` (`Location.IN_LIBRARY` or `Location.IN_HAND`) and a `face_open` flag.
- `PlayerArea` holds one side's cards, its library order and its first energy cards. It has these methods:
  - `hand()`
  - `return_hand_to_library(output)`
  - `shuffle(rng)`
  - `draw(count, label, output)`
  - `open_first_energy(output)`
- `check_the_will_of_mulligan(ask, output)` returns `1` (mulligan) or `2` (keep).
- `MulliganSession(player, opponent, ask, output, rng)` has one method for each step:
  - `run_player()`
  - `run_opponent()`
  - `apply_penalty()`
  - `finish()`

  `run()` runs all of these steps in order. It returns a `SetupResult` with `first_hand`, `first_hand_opponent` and `player_sort`. The limits are `MAX_MULLIGAN_COUNT` (10) and `MULLIGAN_PENALTY_COUNT` (2).

### `extreme_fantasia.turns`

- `PlayerSort` records the first and second player's ids.
- `update_turn_player(turn, player_sort, output)` returns a `TurnPlayer`. Odd turns go to the first player and even turns go to the second.

### `extreme_fantasia.cli`

- `build_area(names, first_energy)` builds a `PlayerArea` with `names` as the library, in order.
- `is_exit_command(text)` recognises the exit words.
- `main(argv)` is the command shown above.

## What it does not do

The package covers setup only. Once turn order is decided and the first energy is revealed, the program announces the first turn player and stops. It has no play phase, no card effects and no rules beyond setup. It has no graphical screen and saves nothing.

## Tests

```
pip install .[test]
pytest
```