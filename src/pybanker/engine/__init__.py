"""Banker settlement engine and hole-progression state machine."""

from .errors import BankerError, GameCompletedError, InvariantError, PreconditionError
from .handicap import adjusted_scores, compute_handicap_stroke
from .rotation import next_banker, ordered_players, resolve_banker, shuffle_banker_order
from .settlement import press_multiplier, settle_hole, settle_match, total_wagered
from .state import create_game, current_hole, default_wager_for_hole, previous_hole, save_hole
from .summary import (
    RoundStats,
    hole_breakdown,
    leaderboard,
    round_stats,
    running_totals,
    scorecard_totals,
    summarize,
)

__all__ = [
    "BankerError",
    "GameCompletedError",
    "InvariantError",
    "PreconditionError",
    "RoundStats",
    "adjusted_scores",
    "compute_handicap_stroke",
    "create_game",
    "current_hole",
    "default_wager_for_hole",
    "hole_breakdown",
    "leaderboard",
    "next_banker",
    "ordered_players",
    "press_multiplier",
    "previous_hole",
    "resolve_banker",
    "round_stats",
    "running_totals",
    "save_hole",
    "scorecard_totals",
    "settle_hole",
    "settle_match",
    "shuffle_banker_order",
    "summarize",
    "total_wagered",
]
