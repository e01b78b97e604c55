"""Command-line interface for scoring a Banker round from a JSON scorecard."""

from __future__ import annotations

import argparse
import csv
import json
import logging
import random
import sys
from pathlib import Path
from typing import Optional

from pybanker.config import EngineSettings, get_course, load_settings
from pybanker.engine import (
    BankerError,
    PreconditionError,
    create_game,
    hole_breakdown,
    leaderboard,
    previous_hole,
    round_stats,
    save_hole,
    scorecard_totals,
    summarize,
)
from pybanker.models import Course, Game
from pybanker.scorecard import Scorecard


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score a Banker golf round")
    parser.add_argument("scorecard", type=Path, help="Path to scorecard JSON")
    parser.add_argument("--course", type=int, default=None, help="Override the scorecard's course id")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the banker shuffle when the scorecard has no banker order",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional hole-by-hole CSV path")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write the round summary JSON",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from PYBANKER_LOG_LEVEL)")
    return parser.parse_args(argv)


def play_scorecard(
    card: Scorecard,
    course: Course,
    *,
    rng: Optional[random.Random] = None,
    settings: Optional[EngineSettings] = None,
) -> Game:
    """Replay every hole card in order and return the resulting game."""

    game = create_game(
        course,
        card.players,
        banker_order=card.banker_order,
        rng=rng,
        settings=settings,
    )
    for hole_card in card.holes:
        if hole_card.hole is not None:
            if hole_card.hole > game.current_hole:
                raise PreconditionError(
                    f"hole {hole_card.hole} cannot be scored before hole {game.current_hole}"
                )
            while game.current_hole > hole_card.hole:
                game = previous_hole(game)
        game = save_hole(
            game,
            course,
            hole_card.entries,
            default_wager=hole_card.default_wager,
            banker_pressed=hole_card.banker_pressed,
            banker_override=hole_card.banker_override,
            settings=settings,
        )
    return game


def _write_holes_csv(path: Path, game: Game, course: Course) -> None:
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["hole", "par", "banker"] + [player.display_name for player in game.players])
        for result in hole_breakdown(game.hole_scores, game.players, course):
            writer.writerow(
                [result.hole_number, result.par, game.player(result.banker_id).display_name]
                + [result.amounts[player.id] for player in game.players]
            )


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    card = Scorecard.load(args.scorecard)
    try:
        course = get_course(args.course if args.course is not None else card.course_id)
    except KeyError as exc:
        print(f"Unknown course: {exc}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        game = play_scorecard(card, course, rng=rng, settings=settings)
    except BankerError as exc:
        print(f"Scorecard rejected: {exc}", file=sys.stderr)
        return 1

    summaries = leaderboard(summarize(game.hole_scores, game.players))
    stats = round_stats(game.hole_scores)
    cards = {total.player_id: total for total in scorecard_totals(game, course)}
    state = "completed" if game.status == "completed" else f"through hole {len(game.hole_scores)}"
    print(f"{course.name}: {stats.holes_played}/{course.hole_count} holes, {state}")
    for rank, summary in enumerate(summaries, start=1):
        print(
            f"{rank:>2}. {summary.display_name:<16} {summary.total_winnings:+5d}"
            f"  W{summary.holes_won} L{summary.holes_lost} T{summary.holes_tied}"
            f"  {cards[summary.player_id].strokes:>3} ({cards[summary.player_id].to_par:+d})"
        )

    if args.output:
        _write_holes_csv(args.output, game, course)
        print(f"Wrote hole results to {args.output}")
    if args.report:
        payload = {
            "game_id": game.id,
            "course_id": course.id,
            "status": game.status,
            "banker_order": game.banker_order,
            "leaderboard": [summary.model_dump() for summary in summaries],
            "holes": [result.model_dump() for result in hole_breakdown(game.hole_scores, game.players, course)],
            "scorecard": [total.model_dump() for total in cards.values()],
            "total_bet": stats.total_bet,
            "total_matches": stats.total_matches,
        }
        args.report.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote round summary to {args.report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
