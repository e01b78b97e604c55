"""REST API exposing the Banker engine to scorecard front-ends."""

from __future__ import annotations

import logging
import random
from typing import Dict

from fastapi import FastAPI, HTTPException

from pybanker.api.schemas import (
    CourseSummaryResponse,
    CreateGameRequest,
    GameResponse,
    RoundStatsResponse,
    SaveHoleRequest,
    SummaryResponse,
)
from pybanker.config import EngineSettings, get_course, iter_courses, load_settings
from pybanker.engine import (
    BankerError,
    GameCompletedError,
    InvariantError,
    PreconditionError,
    create_game,
    default_wager_for_hole,
    hole_breakdown,
    leaderboard,
    previous_hole,
    resolve_banker,
    round_stats,
    running_totals,
    save_hole,
    scorecard_totals,
    summarize,
)
from pybanker.models import Course, Game


logger = logging.getLogger(__name__)


def _error_status(exc: BankerError) -> int:
    if isinstance(exc, GameCompletedError):
        return 409
    if isinstance(exc, PreconditionError):
        return 400
    if isinstance(exc, InvariantError):
        return 422
    return 400


def _to_http(exc: BankerError) -> HTTPException:
    status = _error_status(exc)
    logger.warning("Rejected request (%d): %s", status, exc)
    return HTTPException(status_code=status, detail=str(exc))


def _load_course(course_id: int) -> Course:
    try:
        return get_course(course_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Course {course_id} not found") from exc


def create_app(settings: EngineSettings | None = None) -> FastAPI:
    app = FastAPI(title="pybanker")
    settings = settings or load_settings()
    # Games live only for the lifetime of the process; callers persist them.
    games: Dict[str, Game] = {}
    app.state.games = games
    app.state.settings = settings

    def get_game(game_id: str) -> Game:
        game = games.get(game_id)
        if game is None:
            raise HTTPException(status_code=404, detail="Game not found")
        return game

    def game_response(game: Game) -> GameResponse:
        banker_id = None
        wager = None
        if game.status == "in_progress":
            banker_id, _ = resolve_banker(game, game.current_hole)
            wager = default_wager_for_hole(game, game.current_hole, settings.default_wager)
        return GameResponse(
            game=game,
            current_banker_id=banker_id,
            default_wager=wager,
            running_totals=running_totals(game),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/courses", response_model=list[CourseSummaryResponse])
    async def list_courses() -> list[CourseSummaryResponse]:
        return [
            CourseSummaryResponse(
                id=course.id,
                name=course.name,
                hole_count=course.hole_count,
                par=course.par,
            )
            for course in iter_courses()
        ]

    @app.get("/courses/{course_id}", response_model=Course)
    async def course_detail(course_id: int) -> Course:
        return _load_course(course_id)

    @app.post("/games", response_model=GameResponse, status_code=201)
    async def new_game(request: CreateGameRequest) -> GameResponse:
        course = _load_course(request.course_id)
        rng = random.Random(request.seed) if request.seed is not None else None
        try:
            game = create_game(
                course,
                request.players,
                banker_order=request.banker_order,
                rng=rng,
                settings=settings,
            )
        except BankerError as exc:
            raise _to_http(exc) from exc
        games[game.id] = game
        return game_response(game)

    @app.get("/games/{game_id}", response_model=GameResponse)
    async def game_detail(game_id: str) -> GameResponse:
        return game_response(get_game(game_id))

    @app.post("/games/{game_id}/holes", response_model=GameResponse)
    async def save_current_hole(game_id: str, request: SaveHoleRequest) -> GameResponse:
        game = get_game(game_id)
        course = _load_course(game.course_id)
        try:
            updated = save_hole(
                game,
                course,
                request.entries,
                default_wager=request.default_wager,
                banker_pressed=request.banker_pressed,
                banker_override=request.banker_override,
                settings=settings,
            )
        except BankerError as exc:
            raise _to_http(exc) from exc
        games[game_id] = updated
        return game_response(updated)

    @app.post("/games/{game_id}/previous", response_model=GameResponse)
    async def step_back(game_id: str) -> GameResponse:
        game = get_game(game_id)
        try:
            updated = previous_hole(game)
        except BankerError as exc:
            raise _to_http(exc) from exc
        games[game_id] = updated
        return game_response(updated)

    @app.get("/games/{game_id}/summary", response_model=SummaryResponse)
    async def game_summary(game_id: str) -> SummaryResponse:
        game = get_game(game_id)
        course = _load_course(game.course_id)
        stats = round_stats(game.hole_scores)
        return SummaryResponse(
            game_id=game.id,
            status=game.status,
            leaderboard=leaderboard(summarize(game.hole_scores, game.players)),
            holes=hole_breakdown(game.hole_scores, game.players, course),
            scorecard=scorecard_totals(game, course),
            stats=RoundStatsResponse(
                holes_played=stats.holes_played,
                total_bet=stats.total_bet,
                total_matches=stats.total_matches,
            ),
        )

    return app
