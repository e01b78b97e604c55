"""Pydantic models for API I/O."""

from .game import (
    CourseSummaryResponse,
    CreateGameRequest,
    GameResponse,
    RoundStatsResponse,
    SaveHoleRequest,
    SummaryResponse,
)

__all__ = [
    "CourseSummaryResponse",
    "CreateGameRequest",
    "GameResponse",
    "RoundStatsResponse",
    "SaveHoleRequest",
    "SummaryResponse",
]
