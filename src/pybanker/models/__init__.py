"""Canonical records for the Banker scoring engine."""

from .game import (
    BankerMatch,
    Game,
    GameStatus,
    GameSummary,
    HoleEntry,
    HoleResult,
    HoleScore,
    PlayerScore,
    ScorecardTotal,
)
from .player import Course, Hole, Player

__all__ = [
    "BankerMatch",
    "Course",
    "Game",
    "GameStatus",
    "GameSummary",
    "Hole",
    "HoleEntry",
    "HoleResult",
    "HoleScore",
    "Player",
    "PlayerScore",
    "ScorecardTotal",
]
