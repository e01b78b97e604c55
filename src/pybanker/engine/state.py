"""Hole progression for a round: create, save the current hole, step back."""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional, Sequence
from uuid import uuid4

from pybanker.config import EngineSettings, load_settings
from pybanker.models import Course, Game, Hole, HoleEntry, Player

from .errors import GameCompletedError, InvariantError, PreconditionError
from .rotation import ordered_players, resolve_banker, shuffle_banker_order
from .settlement import settle_hole


logger = logging.getLogger(__name__)


def create_game(
    course: Course,
    players: Sequence[Player],
    *,
    banker_order: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
    game_id: Optional[str] = None,
    settings: Optional[EngineSettings] = None,
) -> Game:
    """Start a round on hole 1 with a fixed banker rotation.

    The rotation is shuffled once here unless ``banker_order`` is supplied.
    """

    settings = settings or load_settings()
    if not settings.min_players <= len(players) <= settings.max_players:
        raise PreconditionError(
            f"a game needs {settings.min_players}-{settings.max_players} players, got {len(players)}"
        )
    player_ids = [player.id for player in players]
    if len(set(player_ids)) != len(player_ids):
        raise InvariantError("player ids must be unique within a game")

    if banker_order is None:
        order = shuffle_banker_order(players, rng)
    else:
        order = list(banker_order)
        if sorted(order) != sorted(player_ids):
            raise InvariantError("banker order must contain every player exactly once")

    game = Game(
        id=game_id or uuid4().hex,
        course_id=course.id,
        players=list(players),
        banker_order=order,
    )
    logger.info(
        "Created game %s on %s with %d players, banker order %s",
        game.id,
        course.name,
        len(players),
        ",".join(order),
    )
    return game


def _ensure_playable(game: Game, course: Course) -> None:
    if game.status == "completed":
        raise GameCompletedError(f"game {game.id} is already completed")
    if game.course_id != course.id:
        raise InvariantError(f"game {game.id} is played on course {game.course_id}, not {course.id}")
    if not 1 <= game.current_hole <= course.hole_count:
        raise PreconditionError(
            f"hole {game.current_hole} is outside 1..{course.hole_count}"
        )


def current_hole(game: Game, course: Course) -> Hole:
    _ensure_playable(game, course)
    return course.hole(game.current_hole)


def default_wager_for_hole(game: Game, hole_number: int, fallback: int) -> int:
    """Base wager to offer on a hole.

    A recorded hole keeps its own wager; otherwise the most recent earlier
    hole's wager carries forward, and the first hole uses ``fallback``.
    """

    recorded = game.hole_scores.get(hole_number)
    if recorded is not None:
        return recorded.bet_amount
    earlier = [number for number in game.hole_scores if number < hole_number]
    if earlier:
        return game.hole_scores[max(earlier)].bet_amount
    return fallback


def save_hole(
    game: Game,
    course: Course,
    entries: Iterable[HoleEntry],
    *,
    default_wager: Optional[int] = None,
    banker_pressed: bool = False,
    banker_override: Optional[str] = None,
    settings: Optional[EngineSettings] = None,
) -> Game:
    """Settle the current hole and return the advanced game.

    Any earlier settlement of the hole is replaced wholesale. Saving the last
    hole completes the game and leaves ``current_hole`` on it. The input game
    is never modified; on any error nothing is settled.
    """

    _ensure_playable(game, course)
    hole = course.hole(game.current_hole)
    banker_id, overridden = resolve_banker(game, hole.number, banker_override)
    if default_wager is None:
        fallback = (settings or load_settings()).default_wager
        default_wager = default_wager_for_hole(game, hole.number, fallback)

    hole_score = settle_hole(
        hole,
        ordered_players(game.players, game.banker_order),
        banker_id,
        entries,
        default_wager=default_wager,
        banker_pressed=banker_pressed,
        banker_overridden=overridden,
        hole_count=course.hole_count,
    )

    hole_scores = dict(game.hole_scores)
    replaced = hole.number in hole_scores
    hole_scores[hole.number] = hole_score

    if hole.number == course.hole_count:
        update = {"hole_scores": hole_scores, "status": "completed"}
        logger.info("Game %s completed on hole %d", game.id, hole.number)
    else:
        update = {"hole_scores": hole_scores, "current_hole": hole.number + 1}
    logger.info(
        "%s hole %d of game %s (banker %s)",
        "Re-settled" if replaced else "Saved",
        hole.number,
        game.id,
        banker_id,
    )
    return game.model_copy(update=update)


def previous_hole(game: Game) -> Game:
    """Step back one hole for editing; recorded scores are left untouched."""

    if game.status == "completed":
        raise GameCompletedError(f"game {game.id} is already completed")
    if game.current_hole <= 1:
        return game
    return game.model_copy(update={"current_hole": game.current_hole - 1})
