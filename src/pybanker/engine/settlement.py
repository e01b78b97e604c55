"""Settle banker-vs-player wagers for a single hole."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from pybanker.models import BankerMatch, Hole, HoleEntry, HoleScore, Player, PlayerScore

from .errors import InvariantError, PreconditionError
from .handicap import adjusted_scores, compute_handicap_stroke


logger = logging.getLogger(__name__)


def press_multiplier(player_pressed: bool, banker_pressed: bool) -> int:
    """Each press doubles the wager; both together make it four times the base."""

    return (2 if player_pressed else 1) * (2 if banker_pressed else 1)


def settle_match(
    hole: Hole,
    banker: Player,
    player: Player,
    banker_score: int,
    player_score: int,
    *,
    player_pressed: bool = False,
    banker_pressed: bool = False,
    wager: int = 1,
    hole_count: Optional[int] = None,
) -> BankerMatch:
    """Settle one pairing. Lower adjusted score wins the (possibly pressed) wager."""

    handicap_diff = compute_handicap_stroke(
        banker.handicap,
        player.handicap,
        hole.handicap,
        hole_count=hole_count,
    )
    banker_adjusted, player_adjusted = adjusted_scores(banker_score, player_score, handicap_diff)
    bet_amount = wager * press_multiplier(player_pressed, banker_pressed)

    if banker_adjusted < player_adjusted:
        result = bet_amount
    elif banker_adjusted > player_adjusted:
        result = -bet_amount
    else:
        result = 0

    return BankerMatch(
        banker_id=banker.id,
        player_id=player.id,
        banker_score=banker_score,
        player_score=player_score,
        banker_adjusted_score=banker_adjusted,
        player_adjusted_score=player_adjusted,
        handicap_diff=handicap_diff,
        result=result,
        bet_amount=bet_amount,
        player_pressed=player_pressed,
        banker_pressed=banker_pressed,
    )


def _index_entries(players: Sequence[Player], entries: Iterable[HoleEntry]) -> Dict[str, HoleEntry]:
    roster = {player.id for player in players}
    indexed: Dict[str, HoleEntry] = {}
    for entry in entries:
        if entry.player_id not in roster:
            raise PreconditionError(f"score entered for unknown player {entry.player_id!r}")
        if entry.player_id in indexed:
            raise PreconditionError(f"more than one entry for player {entry.player_id!r}")
        indexed[entry.player_id] = entry
    return indexed


def _find_banker(players: Sequence[Player], banker_id: str) -> Player:
    for player in players:
        if player.id == banker_id:
            return player
    raise InvariantError(f"banker {banker_id!r} is not on the roster")


def settle_hole(
    hole: Hole,
    players: Sequence[Player],
    banker_id: str,
    entries: Iterable[HoleEntry],
    *,
    default_wager: int,
    banker_pressed: bool = False,
    banker_overridden: bool = False,
    hole_count: Optional[int] = None,
) -> HoleScore:
    """Build the complete :class:`HoleScore` for one hole.

    Every player needs a raw score. Each opponent plays for their own
    ``wager`` when one is set on their entry, otherwise for ``default_wager``.
    The banker's entry only contributes a score; the banker press comes from
    ``banker_pressed``. The result is always computed from scratch, so
    settling the same inputs twice gives equal records.
    """

    if default_wager < 1:
        raise PreconditionError(f"default wager must be at least 1, got {default_wager}")

    banker = _find_banker(players, banker_id)
    indexed = _index_entries(players, entries)

    missing = [player.id for player in players if indexed.get(player.id) is None or indexed[player.id].score is None]
    if missing:
        raise PreconditionError(
            f"hole {hole.number} is missing scores for: {', '.join(missing)}"
        )

    banker_score = indexed[banker.id].score
    player_scores: List[PlayerScore] = []
    matches: List[BankerMatch] = []
    for player in players:
        entry = indexed[player.id]
        if player.id == banker.id:
            player_scores.append(
                PlayerScore(player_id=player.id, score=entry.score, handicap_diff=0, pressed=banker_pressed)
            )
            continue

        match = settle_match(
            hole,
            banker,
            player,
            banker_score,
            entry.score,
            player_pressed=entry.pressed,
            banker_pressed=banker_pressed,
            wager=entry.wager or default_wager,
            hole_count=hole_count,
        )
        matches.append(match)
        player_scores.append(
            PlayerScore(
                player_id=player.id,
                score=entry.score,
                handicap_diff=match.handicap_diff,
                pressed=entry.pressed,
            )
        )

    logger.debug(
        "Settled hole %d with banker %s: %s",
        hole.number,
        banker.id,
        ", ".join(f"{match.player_id}={match.result:+d}" for match in matches),
    )
    return HoleScore(
        hole_number=hole.number,
        banker_id=banker.id,
        player_scores=player_scores,
        matches=matches,
        bet_amount=default_wager,
        banker_pressed=banker_pressed,
        banker_overridden=banker_overridden,
    )


def total_wagered(
    players: Sequence[Player],
    banker_id: str,
    entries: Iterable[HoleEntry],
    *,
    default_wager: int,
    banker_pressed: bool = False,
) -> int:
    """Banker's total exposure on a hole before scores are known."""

    indexed = _index_entries(players, entries)
    total = 0
    for player in players:
        if player.id == banker_id:
            continue
        entry = indexed.get(player.id)
        wager = (entry.wager if entry else None) or default_wager
        pressed = entry.pressed if entry else False
        total += wager * press_multiplier(pressed, banker_pressed)
    return total
