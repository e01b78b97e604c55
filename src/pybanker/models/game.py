"""Round records: per-hole settlements, the game snapshot and derived summaries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from .player import Player


GameStatus = Literal["in_progress", "completed"]


class PlayerScore(BaseModel):
    player_id: str
    score: int = Field(..., ge=1)
    # Stroke adjustment relative to the hole's banker; always 0 for the banker.
    handicap_diff: int = Field(default=0, ge=-1, le=1)
    pressed: bool = False

    model_config = ConfigDict(frozen=True)


class HoleEntry(BaseModel):
    """Raw input for one player on one hole, as collected by the caller.

    ``wager`` overrides the hole's default wager for this player's match.
    """

    player_id: str = Field(..., min_length=1)
    score: Optional[int] = Field(default=None, ge=1)
    pressed: bool = False
    wager: Optional[int] = Field(default=None, ge=1)

    model_config = ConfigDict(frozen=True)


class BankerMatch(BaseModel):
    """Outcome of one banker-vs-player wager.

    ``result`` is from the banker's side: positive means the banker collects
    ``result`` from the player, negative means the player collects
    ``abs(result)`` from the banker, zero is a push.
    """

    banker_id: str
    player_id: str
    banker_score: int
    player_score: int
    banker_adjusted_score: int
    player_adjusted_score: int
    handicap_diff: int
    result: int
    bet_amount: int
    player_pressed: bool
    banker_pressed: bool

    model_config = ConfigDict(frozen=True)


class HoleScore(BaseModel):
    hole_number: int = Field(..., ge=1)
    banker_id: str
    player_scores: List[PlayerScore]
    matches: List[BankerMatch]
    bet_amount: int = Field(..., ge=1)
    banker_pressed: bool = False
    banker_overridden: bool = False

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_matches(self) -> "HoleScore":
        opponents = [match.player_id for match in self.matches]
        expected = [score.player_id for score in self.player_scores if score.player_id != self.banker_id]
        if sorted(opponents) != sorted(expected):
            raise ValueError(
                f"hole {self.hole_number} must carry exactly one match per non-banker player"
            )
        if any(match.banker_id != self.banker_id for match in self.matches):
            raise ValueError(f"hole {self.hole_number} has a match settled against another banker")
        return self

    def net_changes(self) -> Dict[str, int]:
        """Per-player money movement for this hole; the values sum to zero."""

        changes = {score.player_id: 0 for score in self.player_scores}
        for match in self.matches:
            changes[match.banker_id] = changes.get(match.banker_id, 0) + match.result
            changes[match.player_id] = changes.get(match.player_id, 0) - match.result
        return changes


class Game(BaseModel):
    """Immutable snapshot of a round in progress.

    Every transition in :mod:`pybanker.engine.state` returns a new snapshot;
    callers own persistence and must serialize updates to the same game.
    """

    id: str = Field(..., min_length=1)
    course_id: int
    players: List[Player] = Field(..., min_length=2)
    banker_order: List[str]
    current_hole: int = Field(default=1, ge=1)
    hole_scores: Dict[int, HoleScore] = Field(default_factory=dict)
    status: GameStatus = "in_progress"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_roster(self) -> "Game":
        player_ids = [player.id for player in self.players]
        if len(set(player_ids)) != len(player_ids):
            raise ValueError("player ids must be unique within a game")
        if sorted(self.banker_order) != sorted(player_ids):
            raise ValueError("banker order must contain every player exactly once")
        roster = set(player_ids)
        for number, hole_score in self.hole_scores.items():
            if hole_score.hole_number != number:
                raise ValueError(f"hole score keyed {number} belongs to hole {hole_score.hole_number}")
            if hole_score.banker_id not in roster:
                raise ValueError(f"hole {number} banker {hole_score.banker_id!r} is not on the roster")
        return self

    @property
    def player_ids(self) -> List[str]:
        return [player.id for player in self.players]

    def player(self, player_id: str) -> Player:
        for player in self.players:
            if player.id == player_id:
                return player
        raise KeyError(f"Player {player_id!r} is not in game {self.id}")

    def ordered_hole_scores(self) -> List[HoleScore]:
        return [self.hole_scores[number] for number in sorted(self.hole_scores)]


class GameSummary(BaseModel):
    player_id: str
    display_name: str
    total_winnings: int = 0
    holes_won: int = 0
    holes_lost: int = 0
    holes_tied: int = 0

    model_config = ConfigDict(frozen=True)


class ScorecardTotal(BaseModel):
    player_id: str
    display_name: str
    holes_played: int = 0
    strokes: int = 0
    par: int = 0
    # Positive is over par.
    to_par: int = 0

    model_config = ConfigDict(frozen=True)


class HoleResult(BaseModel):
    """Per-hole money breakdown used by scorecard views."""

    hole_number: int
    banker_id: str
    par: Optional[int] = None
    amounts: Dict[str, int]
    scores: Dict[str, int]

    model_config = ConfigDict(frozen=True)
