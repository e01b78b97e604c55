"""Fold settled holes into per-player totals and per-hole breakdowns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from pybanker.models import Course, Game, GameSummary, HoleResult, HoleScore, Player, ScorecardTotal

from .errors import InvariantError


HoleScores = Union[Mapping[int, HoleScore], Iterable[HoleScore]]


@dataclass(frozen=True)
class RoundStats:
    holes_played: int
    total_bet: int
    total_matches: int


@dataclass
class _Tally:
    winnings: int = 0
    won: int = 0
    lost: int = 0
    tied: int = 0


def _iter_holes(hole_scores: HoleScores) -> List[HoleScore]:
    if isinstance(hole_scores, Mapping):
        return list(hole_scores.values())
    return list(hole_scores)


def summarize(hole_scores: HoleScores, players: Sequence[Player]) -> List[GameSummary]:
    """Return one :class:`GameSummary` per player, in roster order.

    A banker win credits the banker and debits the opponent; a player win is
    the mirror image; a push counts as a tie for both and moves no money.
    Summation is commutative, so hole order never changes the totals.
    """

    tallies: Dict[str, _Tally] = {player.id: _Tally() for player in players}
    for hole_score in _iter_holes(hole_scores):
        for match in hole_score.matches:
            banker = tallies.get(match.banker_id)
            opponent = tallies.get(match.player_id)
            if banker is None or opponent is None:
                raise InvariantError(
                    f"hole {hole_score.hole_number} references a player outside the roster"
                )
            banker.winnings += match.result
            opponent.winnings -= match.result
            if match.result > 0:
                banker.won += 1
                opponent.lost += 1
            elif match.result < 0:
                opponent.won += 1
                banker.lost += 1
            else:
                banker.tied += 1
                opponent.tied += 1

    return [
        GameSummary(
            player_id=player.id,
            display_name=player.display_name,
            total_winnings=tallies[player.id].winnings,
            holes_won=tallies[player.id].won,
            holes_lost=tallies[player.id].lost,
            holes_tied=tallies[player.id].tied,
        )
        for player in players
    ]


def leaderboard(summaries: Iterable[GameSummary]) -> List[GameSummary]:
    """Biggest winner first; ties keep their incoming order."""

    return sorted(summaries, key=lambda summary: -summary.total_winnings)


def hole_breakdown(
    hole_scores: HoleScores,
    players: Sequence[Player],
    course: Optional[Course] = None,
) -> List[HoleResult]:
    """Net money change per player for every recorded hole, by hole number."""

    results: List[HoleResult] = []
    for hole_score in sorted(_iter_holes(hole_scores), key=lambda item: item.hole_number):
        amounts = {player.id: 0 for player in players}
        for player_id, change in hole_score.net_changes().items():
            if player_id not in amounts:
                raise InvariantError(
                    f"hole {hole_score.hole_number} references a player outside the roster"
                )
            amounts[player_id] += change
        par = None
        if course is not None and hole_score.hole_number <= course.hole_count:
            par = course.hole(hole_score.hole_number).par
        results.append(
            HoleResult(
                hole_number=hole_score.hole_number,
                banker_id=hole_score.banker_id,
                par=par,
                amounts=amounts,
                scores={score.player_id: score.score for score in hole_score.player_scores},
            )
        )
    return results


def running_totals(game: Game, through_hole: Optional[int] = None) -> Dict[str, int]:
    """Net winnings per player over the holes before ``through_hole``.

    Defaults to the hole currently being played, which is what a live
    scorecard shows next to each name. A completed game stays on its last
    hole, so by default every recorded hole counts.
    """

    if through_hole is not None:
        limit = through_hole
    elif game.status == "completed":
        limit = game.current_hole + 1
    else:
        limit = game.current_hole
    played = [hole_score for number, hole_score in game.hole_scores.items() if number < limit]
    return {summary.player_id: summary.total_winnings for summary in summarize(played, game.players)}


def scorecard_totals(game: Game, course: Course) -> List[ScorecardTotal]:
    """Total strokes per player and where that stands against par.

    Only recorded holes count, so mid-round totals compare against the par
    of the holes actually played.
    """

    strokes = {player.id: 0 for player in game.players}
    holes_played = {player.id: 0 for player in game.players}
    par = {player.id: 0 for player in game.players}
    for hole_score in game.ordered_hole_scores():
        hole_par = course.hole(hole_score.hole_number).par
        for score in hole_score.player_scores:
            if score.player_id not in strokes:
                raise InvariantError(
                    f"hole {hole_score.hole_number} references a player outside the roster"
                )
            strokes[score.player_id] += score.score
            par[score.player_id] += hole_par
            holes_played[score.player_id] += 1

    return [
        ScorecardTotal(
            player_id=player.id,
            display_name=player.display_name,
            holes_played=holes_played[player.id],
            strokes=strokes[player.id],
            par=par[player.id],
            to_par=strokes[player.id] - par[player.id],
        )
        for player in game.players
    ]


def round_stats(hole_scores: HoleScores) -> RoundStats:
    holes = _iter_holes(hole_scores)
    return RoundStats(
        holes_played=len(holes),
        total_bet=sum(hole_score.bet_amount for hole_score in holes),
        total_matches=sum(len(hole_score.matches) for hole_score in holes),
    )
