import pytest

from extreme_fantasia.turns import PlayerSort, TurnPlayer, update_turn_player


def test_odd_turn_is_first_player():
    lines = []
    result = update_turn_player(1, PlayerSort(2, 1), lines.append)
    assert result == TurnPlayer(2, 1)
    assert lines == ["2, のターンです"]


def test_even_turn_is_second_player():
    result = update_turn_player(2, PlayerSort(2, 1), lambda s: None)
    assert result == TurnPlayer(1, 2)


@pytest.mark.parametrize("turn", range(1, 9))
def test_turns_alternate(turn):
    sort = PlayerSort(1, 2)
    now = update_turn_player(turn, sort, lambda s: None)
    nxt = update_turn_player(turn + 1, sort, lambda s: None)
    assert now.turn_player_id == nxt.non_turn_player_id
    assert now.non_turn_player_id == nxt.turn_player_id