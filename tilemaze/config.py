"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tilemaze.mazegen import DEFAULT_MAX_ATTEMPTS
from tilemaze.monsters import DEFAULT_SPEED
from tilemaze.types import MAX_DISTANCE, Coord


@dataclass(frozen=True)
class MazeConfig:
    """Immutable configuration for a Game.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        entry: Entry tile coordinate.
        exit: Exit tile coordinate.
        wall_spawn_rate: Probability that a tile becomes a wall during generation.
        fps: Engine ticks per second.
        monster_speed: Monster speed in tiles per tick.
        spawn_interval: Ticks between automatic spawns; None spawns only on request.
        max_generation_attempts: Layouts tried before generation gives up.
        seed: Engine RNG seed; None draws one from the OS.
    """

    width: int = 40
    height: int = 30
    entry: Coord = (6, 2)
    exit: Coord = (34, 26)
    wall_spawn_rate: float = 0.3
    fps: int = 40
    monster_speed: float = DEFAULT_SPEED
    spawn_interval: int | None = None
    max_generation_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"map dimensions must be positive, got {self.width}x{self.height}")
        if self.width * self.height >= MAX_DISTANCE:
            raise ValueError(f"map must have fewer than {MAX_DISTANCE} tiles")
        for name, (x, y) in (("entry", self.entry), ("exit", self.exit)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"{name} {(x, y)} lies outside the {self.width}x{self.height} map")
        if self.entry == self.exit:
            raise ValueError("entry and exit must be distinct")
        if not 0.0 <= self.wall_spawn_rate <= 1.0:
            raise ValueError(f"wall_spawn_rate must be within [0, 1], got {self.wall_spawn_rate}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not 0 < self.monster_speed <= 1:
            raise ValueError(f"monster_speed must be within (0, 1], got {self.monster_speed}")
        if self.spawn_interval is not None and self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {self.spawn_interval}")
        if self.max_generation_attempts < 1:
            raise ValueError(
                f"max_generation_attempts must be >= 1, got {self.max_generation_attempts}"
            )
