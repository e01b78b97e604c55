"""Roster and course records shared by the engine and its collaborators."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class Player(BaseModel):
    """A golfer on the roster. Immutable once a game starts."""

    id: str = Field(..., min_length=1)
    name: str
    display_name: str
    handicap: int = Field(..., ge=0, le=54)

    model_config = ConfigDict(frozen=True)


class Hole(BaseModel):
    number: int = Field(..., ge=1)
    par: int = Field(..., ge=1)
    yards: int = Field(default=0, ge=0)
    # Relative difficulty rank, 1 = hardest.
    handicap: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class Course(BaseModel):
    """Ordered hole layout for a course.

    Hole numbers must run ``1..N`` in order and difficulty ranks must be a
    permutation of ``1..N``; anything else is malformed reference data.
    """

    id: int
    name: str
    holes: List[Hole] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_layout(self) -> "Course":
        count = len(self.holes)
        numbers = [hole.number for hole in self.holes]
        if numbers != list(range(1, count + 1)):
            raise ValueError(f"hole numbers must run 1..{count} in order, got {numbers}")
        ranks = sorted(hole.handicap for hole in self.holes)
        if ranks != list(range(1, count + 1)):
            raise ValueError(f"hole difficulty ranks must be unique within 1..{count}")
        return self

    @property
    def hole_count(self) -> int:
        return len(self.holes)

    @property
    def par(self) -> int:
        return sum(hole.par for hole in self.holes)

    def hole(self, number: int) -> Hole:
        """Return hole ``number``, raising KeyError when it is not on the course."""

        if not 1 <= number <= len(self.holes):
            raise KeyError(f"Course {self.id} has no hole {number}")
        return self.holes[number - 1]
