import pytest

from pybanker.engine import (
    InvariantError,
    PreconditionError,
    press_multiplier,
    settle_hole,
    settle_match,
    total_wagered,
)
from pybanker.models import Hole, HoleEntry, Player


def _players() -> list[Player]:
    return [
        Player(id="a", name="Alice Adams", display_name="Alice", handicap=10),
        Player(id="b", name="Bob Brown", display_name="Bob", handicap=20),
        Player(id="c", name="Cara Cole", display_name="Cara", handicap=5),
        Player(id="d", name="Dev Diaz", display_name="Dev", handicap=15),
    ]


def _hole(rank: int = 9) -> Hole:
    return Hole(number=1, par=4, yards=400, handicap=rank)


def _entries() -> list[HoleEntry]:
    return [
        HoleEntry(player_id="a", score=4),
        HoleEntry(player_id="b", score=4),
        HoleEntry(player_id="c", score=5, wager=3),
        HoleEntry(player_id="d", score=3, pressed=True),
    ]


def test_banker_wins_unpressed_wager():
    banker = Player(id="a", name="A", display_name="A", handicap=10)
    player = Player(id="b", name="B", display_name="B", handicap=12)
    match = settle_match(_hole(18), banker, player, 4, 5, wager=2)
    assert match.result == 2
    assert match.bet_amount == 2
    assert match.handicap_diff == 0


def test_player_press_doubles_only_that_match():
    banker = Player(id="a", name="A", display_name="A", handicap=10)
    player = Player(id="b", name="B", display_name="B", handicap=12)
    match = settle_match(_hole(18), banker, player, 4, 5, player_pressed=True, wager=2)
    assert match.result == 4
    assert match.player_pressed is True
    assert match.banker_pressed is False


def test_press_multipliers_compound():
    assert press_multiplier(False, False) == 1
    assert press_multiplier(True, False) == 2
    assert press_multiplier(False, True) == 2
    assert press_multiplier(True, True) == 4

    banker = Player(id="a", name="A", display_name="A", handicap=0)
    player = Player(id="b", name="B", display_name="B", handicap=0)
    match = settle_match(_hole(), banker, player, 6, 3, player_pressed=True, banker_pressed=True, wager=3)
    assert match.bet_amount == 12
    assert match.result == -12


def test_tie_on_adjusted_score_is_a_push():
    banker = Player(id="a", name="A", display_name="A", handicap=0)
    player = Player(id="b", name="B", display_name="B", handicap=18)
    # Gap of 18 reaches the hardest hole; the stroke turns a banker win into a push.
    match = settle_match(_hole(1), banker, player, 4, 5, wager=5)
    assert match.banker_adjusted_score == 5
    assert match.player_adjusted_score == 5
    assert match.result == 0
    assert match.bet_amount == 5


def test_settle_hole_builds_one_match_per_opponent():
    hole_score = settle_hole(_hole(), _players(), "a", _entries(), default_wager=1)

    assert hole_score.banker_id == "a"
    assert len(hole_score.matches) == len(_players()) - 1
    assert sorted(match.player_id for match in hole_score.matches) == ["b", "c", "d"]

    by_player = {match.player_id: match for match in hole_score.matches}
    # Gap of 10 reaches rank 9: the banker carries a stroke against Bob.
    assert by_player["b"].handicap_diff == 1
    assert by_player["b"].result == -1
    # Cara plays for her own wager of 3.
    assert by_player["c"].result == 3
    # Dev's press doubles the default wager.
    assert by_player["d"].bet_amount == 2
    assert by_player["d"].result == -2


def test_settle_hole_is_zero_sum():
    hole_score = settle_hole(_hole(), _players(), "a", _entries(), default_wager=2, banker_pressed=True)
    changes = hole_score.net_changes()
    assert sum(changes.values()) == 0
    assert changes["a"] == sum(match.result for match in hole_score.matches)


def test_banker_press_applies_to_every_match():
    hole_score = settle_hole(_hole(), _players(), "a", _entries(), default_wager=1, banker_pressed=True)
    bets = {match.player_id: match.bet_amount for match in hole_score.matches}
    assert bets == {"b": 2, "c": 6, "d": 4}
    assert hole_score.banker_pressed is True
    banker_score = next(score for score in hole_score.player_scores if score.player_id == "a")
    assert banker_score.pressed is True
    assert banker_score.handicap_diff == 0


def test_settle_hole_is_deterministic():
    first = settle_hole(_hole(), _players(), "a", _entries(), default_wager=1)
    second = settle_hole(_hole(), _players(), "a", list(reversed(_entries())), default_wager=1)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_missing_score_is_rejected():
    entries = _entries()[:-1] + [HoleEntry(player_id="d", pressed=True)]
    with pytest.raises(PreconditionError, match="for: d"):
        settle_hole(_hole(), _players(), "a", entries, default_wager=1)

    with pytest.raises(PreconditionError, match="for: c"):
        settle_hole(_hole(), _players(), "a", [e for e in _entries() if e.player_id != "c"], default_wager=1)


def test_unknown_and_duplicate_entries_are_rejected():
    with pytest.raises(PreconditionError):
        settle_hole(_hole(), _players(), "a", _entries() + [HoleEntry(player_id="z", score=4)], default_wager=1)
    with pytest.raises(PreconditionError):
        settle_hole(_hole(), _players(), "a", _entries() + [HoleEntry(player_id="b", score=6)], default_wager=1)


def test_banker_must_be_on_roster():
    with pytest.raises(InvariantError):
        settle_hole(_hole(), _players(), "z", _entries(), default_wager=1)


def test_default_wager_must_be_positive():
    with pytest.raises(PreconditionError):
        settle_hole(_hole(), _players(), "a", _entries(), default_wager=0)


def test_total_wagered_reports_banker_exposure():
    total = total_wagered(_players(), "a", _entries(), default_wager=1)
    assert total == 1 + 3 + 2
    assert total_wagered(_players(), "a", _entries(), default_wager=1, banker_pressed=True) == 12
    # Players without an entry yet still count at the default wager.
    assert total_wagered(_players(), "a", [], default_wager=2) == 6
