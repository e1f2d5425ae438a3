"""Tests for monster movement along the Path Tree."""
from __future__ import annotations

import pytest

from tilemaze import Engine, Monster, Swarm, TileMap, parse_rows
from tilemaze.monsters import advance


def world(rows: list[str]) -> tuple[TileMap, Engine, Swarm, list[Monster]]:
    tm = parse_rows(rows)
    swarm = Swarm()
    engine = Engine(tm, swarm, seed=0)
    exited: list[Monster] = []
    engine.on_exit(lambda _tm, m: exited.append(m))
    return tm, engine, swarm, exited


class TestMonster:
    def test_tile_pos(self) -> None:
        assert Monster(2.5, 3.99).tile_pos == (2, 3)

    @pytest.mark.parametrize("speed", [0, -0.1, 1.5])
    def test_speed_validation(self, speed: float) -> None:
        with pytest.raises(ValueError, match="speed"):
            Monster(0.5, 0.5, speed=speed)


class TestSwarm:
    def test_spawn_on_entry_center(self) -> None:
        tm = parse_rows(["E..X"])
        swarm = Swarm()
        monster = swarm.spawn(tm, speed=0.5)
        assert (monster.x, monster.y) == (0.5, 0.5)
        assert monster.target == (1, 0)
        assert (monster.dx, monster.dy) == (1, 0)
        assert len(swarm) == 1
        assert list(swarm) == [monster]

    def test_spawn_without_entry(self) -> None:
        tm = TileMap(3, 3)
        with pytest.raises(ValueError, match="entry"):
            Swarm().spawn(tm)

    def test_spawn_idle_when_unreachable(self) -> None:
        tm = parse_rows(["E#X"])
        monster = Swarm().spawn(tm, speed=0.5)
        assert monster.idle
        assert advance(monster, tm) is False
        assert (monster.x, monster.y) == (0.5, 0.5)

    def test_remove_uses_identity(self) -> None:
        tm = parse_rows(["E..X"])
        swarm = Swarm()
        first = swarm.spawn(tm)
        second = swarm.spawn(tm)
        swarm.remove(second)
        assert list(swarm) == [first]


class TestMovement:
    def test_walks_to_exit(self) -> None:
        tm, engine, swarm, exited = world(["E..X"])
        monster = swarm.spawn(tm, speed=0.5)

        engine.run(4)
        assert len(swarm) == 1
        assert (monster.x, monster.y) == (2.5, 0.5)
        assert monster.target == (3, 0)

        engine.step()
        assert len(swarm) == 0
        assert swarm.escaped == 1
        assert exited == [monster]

    def test_follows_turns(self) -> None:
        tm, engine, swarm, _ = world([
            "E#",
            ".X",
        ])
        monster = swarm.spawn(tm, speed=0.5)
        assert monster.target == (0, 1)
        engine.run(2)
        assert (monster.x, monster.y) == (0.5, 1.5)
        assert monster.target == (1, 1)
        assert (monster.dx, monster.dy) == (1, 0)
        engine.step()
        assert swarm.escaped == 1

    def test_turns_back_when_target_walled(self) -> None:
        tm, engine, swarm, _ = world(["E....X"])
        monster = swarm.spawn(tm, speed=0.5)
        engine.run(2)
        assert monster.x == 1.5
        assert monster.target == (2, 0)

        tm.set_wall(tm.tile(2, 0))
        engine.step()

        assert monster.x == 1.5
        assert monster.idle
        assert (monster.dx, monster.dy) == (0, 0)

        tm.clear_wall(tm.tile(2, 0))
        engine.step()
        assert monster.target == (2, 0)
        assert monster.x == 2.0

    def test_reroutes_after_wall(self) -> None:
        tm, engine, swarm, _ = world([
            "E..",
            "...",
            "..X",
        ])
        monster = swarm.spawn(tm, speed=0.5)
        first_hop = monster.target
        tm.set_wall(tm.tile(*first_hop))

        engine.run(40)

        assert swarm.escaped == 1
        assert first_hop not in [m.tile_pos for m in swarm]

    def test_monster_on_new_wall_steps_back(self) -> None:
        tm, engine, swarm, _ = world(["E...X"])
        monster = swarm.spawn(tm, speed=0.5)
        engine.step()
        assert monster.tile_pos == (1, 0)

        tm.set_wall(tm.tile(1, 0))
        engine.step()

        assert monster.tile_pos == (0, 0)
        assert (monster.x, monster.y) == (0.5, 0.5)
        assert monster.idle
