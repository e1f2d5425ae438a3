"""Game - wires a TileMap, an Engine and a Swarm together."""
from __future__ import annotations

import logging

from tilemaze.config import MazeConfig
from tilemaze.engine import Engine
from tilemaze.grid import TileMap
from tilemaze.monsters import Monster, Swarm
from tilemaze.path import PathSequence

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, config: MazeConfig | None = None) -> None:
        self._config = config if config is not None else MazeConfig()
        self._tilemap = TileMap(self._config.width, self._config.height)
        self._swarm = Swarm()
        self._engine = Engine(
            self._tilemap,
            self._swarm,
            tps=self._config.fps,
            seed=self._config.seed,
            spawn_every=self._config.spawn_interval,
            monster_speed=self._config.monster_speed,
        )

    @property
    def config(self) -> MazeConfig:
        return self._config

    @property
    def tilemap(self) -> TileMap:
        return self._tilemap

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def swarm(self) -> Swarm:
        return self._swarm

    def initialize_level(self) -> PathSequence:
        """Place entry and exit, generate a solvable maze, show the entry's path.

        Monsters left over from a previous level are discarded.
        """
        cfg = self._config
        self._swarm.clear()
        self._tilemap.set_entry(*cfg.entry)
        self._tilemap.set_exit(*cfg.exit)
        attempts = self._tilemap.randomize_walls(
            cfg.wall_spawn_rate,
            rng=self._engine.random,
            max_attempts=cfg.max_generation_attempts,
        )
        entry = self._tilemap.entry
        assert entry is not None
        path = self._tilemap.set_path_origin(entry)
        logger.info(
            "level ready: %dx%d, seed %d, %d generation attempt(s), path cost %s",
            cfg.width, cfg.height, self._engine.seed, attempts, path.cost,
        )
        return path

    def spawn_monster(self) -> Monster:
        return self._engine.spawn()

    def place_wall(self, x: int, y: int) -> bool:
        return self._tilemap.set_wall(self._tilemap.tile(x, y))

    def remove_wall(self, x: int, y: int) -> bool:
        return self._tilemap.clear_wall(self._tilemap.tile(x, y))

    def select(self, x: int, y: int) -> PathSequence:
        return self._tilemap.set_path_origin(self._tilemap.tile(x, y))

    def step(self) -> None:
        self._engine.step()

    def run(self, n: int) -> None:
        self._engine.run(n)
