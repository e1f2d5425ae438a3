"""Procedural maze generation over a TileMap."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tilemaze.types import ENTRY, EXIT, FREE, WALL, Coord, GenerationError, TileType

if TYPE_CHECKING:
    from tilemaze.grid import TileMap

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


def randomize_walls(
    tilemap: TileMap,
    wall_spawn_rate: float,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """Scatter random walls until the entry can reach the exit.

    Every attempt rebuilds the layout from scratch: each tile other than the
    entry and exit becomes a wall with probability ``wall_spawn_rate``, then
    the Path Tree is recomputed. The first solvable layout is kept and its
    unreachable pockets are sealed with ``fill_dead_ends``.

    Returns the number of attempts used. Raises GenerationError when the map
    lacks an entry or exit, or when ``max_attempts`` layouts all fail.
    """
    if not 0.0 <= wall_spawn_rate <= 1.0:
        raise ValueError(f"wall_spawn_rate must be within [0, 1], got {wall_spawn_rate}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

    entry = tilemap.entry
    if entry is None or tilemap.exit is None:
        raise GenerationError("randomize_walls needs both an entry and an exit")
    if rng is None:
        rng = random.Random()

    for attempt in range(1, max_attempts + 1):
        layout: dict[Coord, TileType] = {}
        for tile in tilemap:
            if tile.type == ENTRY or tile.type == EXIT:
                continue
            layout[tile.pos] = WALL if rng.random() < wall_spawn_rate else FREE
        tilemap.set_tile_types(layout)

        if entry.successor is not None:
            filled = fill_dead_ends(tilemap)
            logger.info(
                "generated maze after %d attempt(s), sealed %d dead-end tiles",
                attempt, filled,
            )
            return attempt

    logger.warning(
        "giving up on maze generation after %d attempts at wall rate %.2f",
        max_attempts, wall_spawn_rate,
    )
    raise GenerationError(
        f"no solvable layout found in {max_attempts} attempts "
        f"at wall rate {wall_spawn_rate}"
    )


def fill_dead_ends(tilemap: TileMap) -> int:
    """Wall off every free tile that has no path to the exit.

    Such tiles carry no links in the Path Tree, so no relaxation is needed.
    Returns the number of tiles sealed.
    """
    filled = 0
    for tile in tilemap:
        if tile.type == FREE and tile.successor is None:
            tile.type = WALL
            filled += 1
    return filled
