from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from pybanker.models import Game, GameSummary, HoleEntry, HoleResult, Player, ScorecardTotal


class CourseSummaryResponse(BaseModel):
    id: int
    name: str
    hole_count: int
    par: int


class CreateGameRequest(BaseModel):
    course_id: int
    players: List[Player] = Field(..., min_length=1)
    banker_order: List[str] | None = None
    seed: int | None = None


class SaveHoleRequest(BaseModel):
    entries: List[HoleEntry]
    default_wager: int | None = Field(default=None, ge=1)
    banker_pressed: bool = False
    banker_override: str | None = None


class GameResponse(BaseModel):
    game: Game
    current_banker_id: str | None = None
    default_wager: int | None = None
    running_totals: dict[str, int]


class RoundStatsResponse(BaseModel):
    holes_played: int
    total_bet: int
    total_matches: int


class SummaryResponse(BaseModel):
    game_id: str
    status: str
    leaderboard: List[GameSummary]
    holes: List[HoleResult]
    scorecard: List[ScorecardTotal]
    stats: RoundStatsResponse
