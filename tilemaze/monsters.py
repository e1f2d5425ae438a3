"""Monsters walking the Path Tree from the entry to the exit."""
from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tilemaze.types import EXIT, Coord

if TYPE_CHECKING:
    from tilemaze.grid import TileMap

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 0.05


@dataclass(eq=False)
class Monster:
    """An agent positioned in tile units; tile (x, y) spans [x, x + 1).

    ``target`` is the tile the monster is heading for and ``dx``/``dy`` the
    unit direction towards it. A monster without target is idle.
    """

    x: float
    y: float
    speed: float = DEFAULT_SPEED
    dx: int = 0
    dy: int = 0
    target: Coord | None = None

    def __post_init__(self) -> None:
        if not 0 < self.speed <= 1:
            raise ValueError(f"speed must be within (0, 1], got {self.speed}")

    @property
    def tile_pos(self) -> Coord:
        return (math.floor(self.x), math.floor(self.y))

    @property
    def idle(self) -> bool:
        return self.target is None


def _stop(monster: Monster) -> None:
    monster.target = None
    monster.dx = monster.dy = 0


def _retarget(monster: Monster, tilemap: TileMap) -> None:
    current = tilemap.tile(*monster.tile_pos)
    nxt = tilemap.successor(current)
    if nxt is None:
        _stop(monster)
        return
    monster.target = nxt.pos
    monster.dx = nxt.x - current.x
    monster.dy = nxt.y - current.y


def _turn_back(monster: Monster, tilemap: TileMap) -> None:
    monster.dx, monster.dy = -monster.dx, -monster.dy
    x, y = monster.tile_pos
    if tilemap.tile(x, y).type.is_blocking:
        # Already stepped onto the new wall: head back to where we came from.
        x, y = x + monster.dx, y + monster.dy
        if (
            not (0 <= x < tilemap.width and 0 <= y < tilemap.height)
            or tilemap.tile(x, y).type.is_blocking
        ):
            _stop(monster)
            return
    monster.target = (x, y)


def _reached_center(monster: Monster, pos: Coord) -> bool:
    cx, cy = pos[0] + 0.5, pos[1] + 0.5
    if (
        (monster.dx == 1 and monster.x >= cx)
        or (monster.dx == -1 and monster.x <= cx)
        or (monster.dy == 1 and monster.y >= cy)
        or (monster.dy == -1 and monster.y <= cy)
    ):
        monster.x, monster.y = cx, cy
        return True
    return False


def advance(monster: Monster, tilemap: TileMap) -> bool:
    """Move a monster one tick along the Path Tree.

    Returns True once the monster steps onto the exit.
    """
    if monster.target is None:
        _retarget(monster, tilemap)
        if monster.target is None:
            return False

    if tilemap.tile(*monster.target).type.is_blocking:
        _turn_back(monster, tilemap)
        if monster.target is None:
            return False
    target = tilemap.tile(*monster.target)

    monster.x += monster.dx * monster.speed
    monster.y += monster.dy * monster.speed

    if monster.tile_pos == target.pos:
        if target.type == EXIT:
            return True
        if _reached_center(monster, target.pos):
            _retarget(monster, tilemap)
    return False


class Swarm:
    """The set of live monsters on one map."""

    def __init__(self) -> None:
        self._monsters: list[Monster] = []
        self._escaped = 0

    @property
    def escaped(self) -> int:
        """Number of monsters that reached the exit."""
        return self._escaped

    def spawn(self, tilemap: TileMap, speed: float = DEFAULT_SPEED) -> Monster:
        entry = tilemap.entry
        if entry is None:
            raise ValueError("cannot spawn a monster on a map without an entry")
        monster = Monster(entry.x + 0.5, entry.y + 0.5, speed=speed)
        _retarget(monster, tilemap)
        self._monsters.append(monster)
        logger.debug("spawned monster at %r heading for %r", entry.pos, monster.target)
        return monster

    def remove(self, monster: Monster) -> None:
        self._monsters.remove(monster)

    def escape(self, monster: Monster) -> None:
        self.remove(monster)
        self._escaped += 1
        logger.debug("monster escaped, %d so far", self._escaped)

    def clear(self) -> None:
        """Drop every live monster; the escape count is kept."""
        self._monsters.clear()

    def __iter__(self) -> Iterator[Monster]:
        return iter(self._monsters)

    def __len__(self) -> int:
        return len(self._monsters)

