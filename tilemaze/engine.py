"""Engine - fixed-timestep driver moving a Swarm over a TileMap."""
from __future__ import annotations

import logging
import os
import random as _random
from typing import TYPE_CHECKING, Callable

from tilemaze.monsters import DEFAULT_SPEED, Monster, advance

if TYPE_CHECKING:
    from tilemaze.grid import TileMap
    from tilemaze.monsters import Swarm

logger = logging.getLogger(__name__)

ExitCallback = Callable[["TileMap", Monster], None]


class Engine:
    """Advances monsters one tick at a time, optionally spawning on a cadence.

    With ``spawn_every=n`` a monster appears on the entry every ``n`` ticks,
    as long as the map has an entry. The engine never sleeps; callers decide
    when a tick happens.
    """

    def __init__(
        self,
        tilemap: TileMap,
        swarm: Swarm,
        tps: int = 40,
        seed: int | None = None,
        spawn_every: int | None = None,
        monster_speed: float = DEFAULT_SPEED,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if spawn_every is not None and spawn_every <= 0:
            raise ValueError(f"spawn_every must be positive, got {spawn_every}")
        self._tilemap = tilemap
        self._swarm = swarm
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._spawn_every = spawn_every
        self._monster_speed = monster_speed
        self._on_exit: list[ExitCallback] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = _random.Random(seed)

    @property
    def tilemap(self) -> TileMap:
        return self._tilemap

    @property
    def swarm(self) -> Swarm:
        return self._swarm

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Simulated seconds since the engine started."""
        return self._tick_number * self._dt

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> _random.Random:
        return self._rng

    def on_exit(self, callback: ExitCallback) -> None:
        self._on_exit.append(callback)

    def spawn(self) -> Monster:
        return self._swarm.spawn(self._tilemap, speed=self._monster_speed)

    def step(self) -> None:
        self._tick_number += 1
        if (
            self._spawn_every is not None
            and self._tick_number % self._spawn_every == 0
            and self._tilemap.entry is not None
        ):
            self.spawn()

        for monster in list(self._swarm):
            if advance(monster, self._tilemap):
                self._swarm.escape(monster)
                for cb in self._on_exit:
                    cb(self._tilemap, monster)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
        logger.debug(
            "ran %d ticks, now at tick %d with %d monsters, %d escaped",
            n, self._tick_number, len(self._swarm), self._swarm.escaped,
        )
