"""Handicap stroke allocation between a banker and one opponent."""

from __future__ import annotations

from typing import Optional, Tuple

from .errors import InvariantError


def compute_handicap_stroke(
    banker_handicap: int,
    player_handicap: int,
    hole_difficulty: int,
    *,
    hole_count: Optional[int] = None,
) -> int:
    """Return the stroke adjustment for one banker/player pairing on a hole.

    A stroke is only given when the handicap gap reaches the hole's difficulty
    rank (1 = hardest), so the hardest holes trigger strokes first. The
    stronger player is penalised by one: ``+1`` adds a stroke to the banker's
    adjusted score (the player has the higher handicap), ``-1`` adds one to the
    player's (the banker has the higher handicap). Never more than one stroke.
    """

    if hole_difficulty < 1 or (hole_count is not None and hole_difficulty > hole_count):
        limit = hole_count if hole_count is not None else "N"
        raise InvariantError(f"hole difficulty {hole_difficulty} is outside 1..{limit}")

    diff = abs(banker_handicap - player_handicap)
    if diff < hole_difficulty:
        return 0
    return -1 if banker_handicap > player_handicap else 1


def adjusted_scores(banker_score: int, player_score: int, handicap_diff: int) -> Tuple[int, int]:
    """Apply a stroke adjustment; exactly one side can be adjusted."""

    return banker_score + max(handicap_diff, 0), player_score + max(-handicap_diff, 0)
