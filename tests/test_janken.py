import pytest

from extreme_fantasia.janken import (
    Hand,
    decide_turn,
    determine_winner,
    janken,
    parse_hand,
    prompt_choice,
)


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def collect():
    lines = []
    return lines, lines.append


def test_hand_beats_cycle():
    assert Hand.ROCK.beats(Hand.SCISSORS)
    assert Hand.SCISSORS.beats(Hand.PAPER)
    assert Hand.PAPER.beats(Hand.ROCK)
    assert not Hand.SCISSORS.beats(Hand.ROCK)


@pytest.mark.parametrize("choice", ["1", "2", "3"])
def test_hand_does_not_beat_itself(choice):
    hand = parse_hand(choice)
    assert not hand.beats(parse_hand(choice))


def test_hand_labels():
    assert parse_hand("1").label == "グー"
    assert parse_hand("3").label == "パー"


def test_parse_hand():
    assert parse_hand("1") is Hand.ROCK
    assert parse_hand(" 3\n") is Hand.PAPER


@pytest.mark.parametrize("bad", ["0", "4", "", "rock"])
def test_parse_hand_rejects(bad):
    with pytest.raises(ValueError):
        parse_hand(bad)


def test_prompt_choice_retries_until_valid():
    lines, out = collect()
    result = prompt_choice("> ", ("1", "2", "3"), scripted("9", "x", " 2 "), out)
    assert result == "2"
    assert lines == ["無効な選択です。1, 2, または 3を選んでください。"] * 2


def test_prompt_choice_two_options_message():
    lines, out = collect()
    assert prompt_choice("", ("1", "2"), scripted("3", "1"), out) == "1"
    assert lines == ["無効な選択です。1または2を選んでください。"]


def test_determine_winner_player1():
    lines, out = collect()
    assert determine_winner("1", "2", scripted(), out) == 1
    assert lines[-1] == "Player 1の勝ちです！"


def test_determine_winner_player2():
    lines, out = collect()
    assert determine_winner("1", "3", scripted(), out) == 2
    assert lines[-1] == "Player 2の勝ちです！"


def test_determine_winner_tie_asks_again():
    lines, out = collect()
    assert determine_winner("1", "1", scripted("2", "3"), out) == 1
    assert "あいこです。もう一度選んでください。" in lines


def test_determine_winner_invalid():
    with pytest.raises(ValueError):
        determine_winner("5", "1", scripted(), lambda s: None)


def test_decide_turn_first():
    assert decide_turn(1, scripted("1"), lambda s: None) == (1, 2)


def test_decide_turn_second():
    assert decide_turn(2, scripted("2"), lambda s: None) == (1, 2)


@pytest.mark.parametrize("winner", [1, 2])
@pytest.mark.parametrize("choice", ["1", "2"])
def test_decide_turn_is_permutation(winner, choice):
    first, second = decide_turn(winner, scripted(choice), lambda s: None)
    assert {first, second} == {1, 2}
    assert (first == winner) == (choice == "1")


def test_decide_turn_invalid_winner():
    with pytest.raises(ValueError):
        decide_turn(0, scripted("1"), lambda s: None)


def test_janken_full_exchange():
    result = janken(scripted("3", "1", "2"), lambda s: None)
    assert result == (2, 1)