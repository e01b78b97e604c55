"""Load a whole round's scorecard from JSON for batch scoring."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from pybanker.models import HoleEntry, Player


class HoleCard(BaseModel):
    # When set below the game's current hole, the round steps back to re-edit it.
    hole: Optional[int] = Field(default=None, ge=1)
    entries: List[HoleEntry]
    default_wager: Optional[int] = Field(default=None, ge=1)
    banker_pressed: bool = False
    banker_override: Optional[str] = None


class Scorecard(BaseModel):
    course_id: int
    players: List[Player]
    banker_order: Optional[List[str]] = None
    holes: List[HoleCard] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "Scorecard":
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path) -> None:
        path.write_text(self.model_dump_json(indent=2, exclude_none=True), encoding="utf-8")
