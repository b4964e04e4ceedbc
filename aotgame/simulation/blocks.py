"""Buildings on a map, their footprint grid and precomputed shortest paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ..constants import MAP_SIZE, ROAD_ID
from ..errors import LookupKeyError
from ..models import BuildingType, MapSpace, ShortestPath
from .frames import BuildingStats

Point = tuple[int, int]
Grid = list[list[int]]


@dataclass
class Block:
    """A placed building together with its entrance and population."""

    map_space: MapSpace
    absolute_entrance_x: int
    absolute_entrance_y: int
    population: int = 0


@dataclass(frozen=True)
class SourceDest:
    """The two ends of a shortest path."""

    source_x: int
    source_y: int
    dest_x: int
    dest_y: int


def parse_pathlist(pathlist: str) -> list[Point]:
    """Parse a path stored as ``"(x,y)(x,y)..."`` into coordinate pairs."""
    inner = pathlist[1:-1]
    points: list[Point] = []
    for chunk in inner.split(")("):
        parts = chunk.split(",")
        if len(parts) < 2:
            raise ValueError(f"malformed path coordinate {chunk!r} in {pathlist!r}")
        points.append((int(parts[0]), int(parts[1])))
    return points


def build_shortest_paths(rows: Iterable[ShortestPath]) -> dict[SourceDest, list[Point]]:
    """Index stored shortest paths by their endpoints."""
    return {
        SourceDest(row.source_x, row.source_y, row.dest_x, row.dest_y): parse_pathlist(
            row.pathlist
        )
        for row in rows
    }


def _building_type_for(
    map_space: MapSpace, building_types: Mapping[int, BuildingType]
) -> BuildingType:
    try:
        return building_types[map_space.block_type_id]
    except KeyError:
        raise LookupKeyError(map_space.block_type_id, "building_block_map") from None


def build_building_grid(
    map_spaces: Iterable[MapSpace], building_types: Mapping[int, BuildingType]
) -> Grid:
    """A ``MAP_SIZE`` square grid, indexed ``[x][y]``, holding the id of the
    map space that covers each cell, or 0 where nothing does.

    ``building_types`` maps block type ids to their building types.
    """
    grid: Grid = [[0] * MAP_SIZE for _ in range(MAP_SIZE)]
    for map_space in map_spaces:
        building = _building_type_for(map_space, building_types)
        xs = range(map_space.x_coordinate, map_space.x_coordinate + building.width)
        ys = range(map_space.y_coordinate, map_space.y_coordinate + building.height)
        for x in xs:
            for y in ys:
                if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
                    raise IndexError(
                        f"map space {map_space.id} covers ({x}, {y}) outside the map"
                    )
                grid[x][y] = map_space.id
    return grid


@dataclass
class BuildingsManager:
    """The buildings of one map and the paths between points on it."""

    blocks: dict[int, Block] = field(default_factory=dict)
    shortest_paths: dict[SourceDest, list[Point]] = field(default_factory=dict)
    buildings_grid: Grid = field(
        default_factory=lambda: [[0] * MAP_SIZE for _ in range(MAP_SIZE)]
    )

    @classmethod
    def build(
        cls,
        map_spaces: Iterable[MapSpace],
        building_types: Mapping[int, BuildingType],
        shortest_paths: Iterable[ShortestPath],
    ) -> BuildingsManager:
        """Set up the manager from a map's spaces, excluding roads.

        ``building_types`` maps block type ids to building types, and
        ``shortest_paths`` holds the stored path rows of the map.
        """
        buildings = [
            space
            for space in map_spaces
            if _building_type_for(space, building_types).id != ROAD_ID
        ]
        grid = build_building_grid(buildings, building_types)
        blocks = {
            space.id: Block(
                map_space=space,
                absolute_entrance_x=space.x_coordinate,
                absolute_entrance_y=space.y_coordinate,
            )
            for space in buildings
        }
        return cls(
            blocks=blocks,
            shortest_paths=build_shortest_paths(shortest_paths),
            buildings_grid=grid,
        )

    def building_stats(self) -> list[BuildingStats]:
        """The population of every building."""
        return [
            BuildingStats(map_space_id=block.map_space.id, population=block.population)
            for block in self.blocks.values()
        ]