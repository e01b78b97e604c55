"""Banker rotation through the order fixed at game creation."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Tuple

from pybanker.models import Game, Player

from .errors import InvariantError, PreconditionError


logger = logging.getLogger(__name__)


def shuffle_banker_order(players: Sequence[Player], rng: Optional[random.Random] = None) -> List[str]:
    """Return a random permutation of the roster's ids."""

    order = [player.id for player in players]
    (rng or random.Random()).shuffle(order)
    return order


def next_banker(banker_order: Sequence[str], current_hole: int, player_count: int) -> str:
    """Banker for ``current_hole`` (1-based); repeats every ``player_count`` holes."""

    if player_count < 1 or len(banker_order) != player_count:
        raise InvariantError(
            f"banker order has {len(banker_order)} entries for {player_count} players"
        )
    if current_hole < 1:
        raise PreconditionError(f"hole number must be positive, got {current_hole}")
    return banker_order[(current_hole - 1) % player_count]


def resolve_banker(game: Game, hole_number: int, override: Optional[str] = None) -> Tuple[str, bool]:
    """Pick the banker for a hole and report whether it was chosen manually.

    An explicit ``override`` wins for this hole only. A hole that was already
    settled keeps the banker it was settled with, so re-editing a hole never
    changes who banked it. Otherwise the fixed rotation decides.
    """

    roster = set(game.player_ids)
    if override is not None:
        if override not in roster:
            raise InvariantError(f"banker override {override!r} is not on the roster")
        logger.debug("Hole %d banker overridden to %s", hole_number, override)
        return override, True

    existing = game.hole_scores.get(hole_number)
    if existing is not None:
        return existing.banker_id, existing.banker_overridden

    return next_banker(game.banker_order, hole_number, len(game.players)), False


def ordered_players(players: Sequence[Player], banker_order: Sequence[str]) -> List[Player]:
    """Roster sorted by rotation order; players missing from the order go last."""

    by_id = {player.id: player for player in players}
    ordered = [by_id[player_id] for player_id in banker_order if player_id in by_id]
    seen = {player.id for player in ordered}
    ordered.extend(player for player in players if player.id not in seen)
    return ordered
