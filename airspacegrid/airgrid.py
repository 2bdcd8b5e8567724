"""Octree subdivision of an airspace into passable and blocked cells."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field

MAX_GRID_SIZE = 20000.0
MAX_LEVEL = 6
DEFAULT_DIMENSIONS = (5, 5, 5)

Vector = tuple[float, float, float]


class CellState(enum.IntEnum):
    """Passability of a cell."""

    FREE = 0
    BLOCKED = 1
    MIXED = 2


@dataclass(frozen=True)
class Obstacle:
    """Something found inside a cell; a tagged obstacle is a tower."""

    name: str
    tags: tuple[str, ...] = ()


Probe = Callable[[Vector, float], Sequence[Obstacle]]
"""Returns the obstacles overlapping a cube given by its centre and half extent."""


@dataclass(eq=False)
class AirBlock:
    """One cell of the airspace grid, possibly split into eight children."""

    id: int
    grid_coordinates: tuple[int, int, int]
    center: Vector
    size: float = MAX_GRID_SIZE
    level: int = 0
    parent: AirBlock | None = field(default=None, repr=False)
    children: list[AirBlock] = field(default_factory=list, repr=False)
    state: CellState = CellState.FREE
    tower_id: str = "-1"
    weather: str = "none"
    wind_power: int = 0
    wind_direction: str = ""

    def walk(self) -> Iterator[AirBlock]:
        """Yield this cell and all its descendants, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()


class AirGrid:
    """A fixed lattice of top-level cells, each refined where obstacles lie."""

    def __init__(
        self,
        dimensions: tuple[int, int, int] = DEFAULT_DIMENSIONS,
        origin: Vector = (0.0, 0.0, 0.0),
        grid_size: float = MAX_GRID_SIZE,
        max_level: int = MAX_LEVEL,
    ):
        self.dimensions = tuple(dimensions)
        self.origin = tuple(origin)
        self.grid_size = grid_size
        self.max_level = max_level
        self.next_id = 0
        nx, ny, nz = self.dimensions
        self.grid: list[list[list[AirBlock]]] = [
            [[self._make_root((x, y, z)) for z in range(nz)] for y in range(ny)]
            for x in range(nx)
        ]

    def _take_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value

    def _make_root(self, coord: tuple[int, int, int]) -> AirBlock:
        return AirBlock(
            id=self._take_id(),
            grid_coordinates=coord,
            center=self.grid_to_world(coord),
            size=self.grid_size,
        )

    def grid_to_world(self, coord: tuple[int, int, int]) -> Vector:
        """World centre of the top-level cell at a lattice coordinate."""
        half = self.grid_size * 0.5
        ox, oy, oz = self.origin
        gx, gy, gz = coord
        return (
            ox + gx * self.grid_size + half,
            oy + gy * self.grid_size + half,
            oz + gz * self.grid_size + half,
        )

    def subdivide(self, cell: AirBlock) -> list[AirBlock]:
        """Append eight half-size children to ``cell`` and return them."""
        quarter = cell.size / 4.0
        child_size = cell.size / 2.0
        cx, cy, cz = cell.center
        created = []
        for octant in range(8):
            dx = quarter if octant & 1 else -quarter
            dy = quarter if octant & 2 else -quarter
            dz = quarter if octant & 4 else -quarter
            child = AirBlock(
                id=self._take_id(),
                grid_coordinates=cell.grid_coordinates,
                center=(cx + dx, cy + dy, cz + dz),
                size=child_size,
                level=cell.level + 1,
                parent=cell,
            )
            cell.children.append(child)
            created.append(child)
        return created

    def detect_obstacles(self, cell: AirBlock, probe: Probe) -> None:
        """Classify ``cell`` with ``probe``, refining it down to the maximum level."""
        overlaps = probe(cell.center, cell.size * 0.5)
        if not overlaps:
            return
        for obstacle in overlaps:
            if obstacle.tags:
                cell.tower_id = obstacle.name
        if cell.level >= self.max_level:
            cell.state = CellState.BLOCKED
            return
        cell.state = CellState.MIXED
        self.subdivide(cell)
        for child in cell.children:
            self.detect_obstacles(child, probe)

    def update(self, probe: Probe) -> None:
        """Scan every top-level cell for obstacles."""
        for cell in self.cells():
            self.detect_obstacles(cell, probe)

    def cells(self) -> Iterator[AirBlock]:
        """Yield the top-level cells in x, then y, then z order."""
        for plane in self.grid:
            for column in plane:
                yield from column

    def _index_range(self, low: float, high: float, axis: int) -> Iterable[int]:
        start = int(low / self.grid_size)
        stop = int(high / self.grid_size)
        limit = self.dimensions[axis]
        for index in range(start, stop + 1):
            if not 0 <= index < limit:
                raise IndexError(f"grid index {index} out of range on axis {axis}")
            yield index

    def set_weather(
        self,
        corner_a: Vector,
        corner_b: Vector,
        weather: str,
        wind_direction: str,
        wind_power: float,
    ) -> list[AirBlock]:
        """Apply weather to every column between two world corners.

        The corners' x and y are truncated to lattice indices; all heights
        in those columns are updated. Returns the updated cells.
        """
        xs = list(self._index_range(corner_a[0], corner_b[0], 0))
        ys = list(self._index_range(corner_a[1], corner_b[1], 1))
        updated = []
        for x in xs:
            for y in ys:
                for cell in self.grid[x][y]:
                    cell.weather = weather
                    cell.wind_direction = wind_direction
                    cell.wind_power = int(wind_power)
                    updated.append(cell)
        return updated