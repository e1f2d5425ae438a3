"""Tests for PathSequence and path origin tracking."""
from __future__ import annotations

import pytest

from tilemaze import PathSequence, PathTreeError, TileMap, parse_rows


def test_empty_sequence_rejected():
    with pytest.raises(ValueError):
        PathSequence([])


def test_reachable_path_properties():
    tm = TileMap(1, 4)
    entry = tm.set_entry(0, 0)
    exit_tile = tm.set_exit(0, 3)
    path = tm.path(entry)

    assert path.origin is entry
    assert path.end is exit_tile
    assert path.reachable
    assert path.cost == 3
    assert path.coords() == [(0, 0), (0, 1), (0, 2), (0, 3)]
    assert list(path) == [tm.tile(0, y) for y in range(4)]
    assert path[1:3] == (tm.tile(0, 1), tm.tile(0, 2))


def test_membership_by_tile_and_coord():
    tm = TileMap(1, 3)
    tm.set_exit(0, 2)
    path = tm.path(tm.tile(0, 0))
    assert tm.tile(0, 1) in path
    assert (0, 1) in path
    assert (5, 5) not in path
    assert "nonsense" not in path


def test_unreachable_origin_is_single_element():
    tm = parse_rows(["E#X"])
    path = tm.path(tm.entry)
    assert len(path) == 1
    assert path.origin is tm.entry
    assert not path.reachable
    assert path.cost is None


def test_path_from_exit():
    tm = TileMap(2, 2)
    exit_tile = tm.set_exit(1, 1)
    path = tm.path(exit_tile)
    assert list(path) == [exit_tile]
    assert path.reachable
    assert path.cost == 0


def test_cycle_fails_fast():
    tm = TileMap(2, 1)
    a, b = tm.tile(0, 0), tm.tile(1, 0)
    a.successor = b.pos
    b.successor = a.pos
    with pytest.raises(PathTreeError, match="loops"):
        tm.path(a)


class TestPathOrigin:
    def test_set_path_origin(self):
        tm = TileMap(3, 3)
        entry = tm.set_entry(0, 0)
        tm.set_exit(2, 2)
        path = tm.set_path_origin(entry)
        assert tm.path_origin is entry
        assert tm.current_path is path
        assert path.cost == 4

    def test_no_origin_by_default(self):
        tm = TileMap(3, 3)
        assert tm.path_origin is None
        assert tm.current_path is None

    def test_path_refreshed_when_walled(self):
        tm = TileMap(3, 3)
        entry = tm.set_entry(0, 0)
        tm.set_exit(2, 2)
        tm.set_path_origin(entry)
        on_path = tm.current_path[1]

        tm.set_wall(on_path)

        path = tm.current_path
        assert on_path not in path
        assert path.reachable
        assert path.cost == 4
        assert all(not t.type.is_blocking for t in path)

    def test_path_kept_when_wall_elsewhere(self):
        tm = TileMap(4, 4)
        entry = tm.set_entry(0, 0)
        tm.set_exit(3, 3)
        before = tm.set_path_origin(entry)
        off_path = next(t for t in tm if t not in before and t.type.name == "free")

        tm.set_wall(off_path)

        assert tm.current_path is before

    def test_path_refreshed_on_recompute(self):
        tm = TileMap(1, 3)
        tm.set_exit(0, 2)
        tm.set_path_origin(tm.tile(0, 0))
        tm.set_exit(0, 0)
        assert tm.current_path.coords() == [(0, 0)]
        assert tm.current_path.cost == 0
