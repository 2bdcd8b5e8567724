"""Showing and hiding square map blocks around a moving camera."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

DEFAULT_BLOCK_SIZE = 1000
DEFAULT_LOAD_RADIUS = 10
DEFAULT_MAP_SIZE = 100


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def snap_to_block(value: float, block_size: int) -> int:
    """Return the lower corner coordinate of the block holding ``value``.

    The value is truncated to an integer first. A negative value is shifted
    down by one block before dividing, so an exact negative multiple lands
    one block lower, as the viewer does.
    """
    n = int(value)
    if n < 0:
        n -= block_size
    return _truncating_div(n, block_size) * block_size


def block_key(x: int, y: int) -> str:
    """The lookup key of the block whose lower corner is ``(x, y)``."""
    return f"{int(x)}_{int(y)}"


@dataclass(eq=False)
class Block:
    """One square block of the map and the scene objects inside it."""

    x0: float
    y0: float
    size: float
    hidden: bool = True
    actors: list[str] = field(default_factory=list)

    @property
    def x1(self) -> float:
        return self.x0 + self.size

    @property
    def y1(self) -> float:
        return self.y0 + self.size

    @property
    def center(self) -> tuple[float, float]:
        return ((self.x0 + self.x1) / 2.0, (self.y0 + self.y1) / 2.0)


@dataclass
class StreamUpdate:
    """Blocks to hide and blocks to show after the camera moved."""

    hidden: list[Block]
    loaded: list[Block]

    @property
    def actors_to_hide(self) -> list[str]:
        return [name for block in self.hidden for name in block.actors]

    @property
    def actors_to_show(self) -> list[str]:
        return [name for block in self.loaded for name in block.actors]


class BlockStreamer:
    """Keeps the blocks within a square radius of the camera loaded."""

    def __init__(
        self,
        block_size: int = DEFAULT_BLOCK_SIZE,
        load_radius: int = DEFAULT_LOAD_RADIUS,
        map_size: int = DEFAULT_MAP_SIZE,
    ):
        if block_size <= 0:
            raise ValueError("block size must be positive")
        self.block_size = block_size
        self.load_radius = load_radius
        self.map_size = map_size
        self.blocks: dict[str, Block] = {}
        self.loaded: dict[str, Block] = {}
        left = -_truncating_div(block_size * map_size, 2)
        for x in range(left, -left, block_size):
            for y in range(left, -left, block_size):
                self.blocks[block_key(x, y)] = Block(x, y, block_size)

    def _block(self, key: str) -> Block:
        try:
            return self.blocks[key]
        except KeyError:
            raise KeyError(f"block {key} lies outside the map") from None

    def assign(self, name: str, x: float, y: float) -> Block:
        """Record that the object ``name`` stands at ``(x, y)``."""
        block = self._block(
            block_key(snap_to_block(x, self.block_size), snap_to_block(y, self.block_size))
        )
        block.actors.append(name)
        return block

    def _keys_around(self, camera_x: float, camera_y: float) -> Iterator[str]:
        cx = snap_to_block(camera_x, self.block_size)
        cy = snap_to_block(camera_y, self.block_size)
        reach = self.block_size * self.load_radius
        for x in range(cx - reach, cx + reach, self.block_size):
            for y in range(cy - reach, cy + reach, self.block_size):
                yield block_key(x, y)

    def update(self, camera_x: float, camera_y: float) -> StreamUpdate:
        """Work out which blocks leave and which stay in view of the camera."""
        needed = {key: self._block(key) for key in self._keys_around(camera_x, camera_y)}
        for block in needed.values():
            block.hidden = False
        hidden = [block for key, block in self.loaded.items() if key not in needed]
        self.loaded = needed
        return StreamUpdate(hidden=hidden, loaded=list(needed.values()))

    def first_load(self, camera_x: float, camera_y: float) -> list[str]:
        """Load around the camera from scratch; return the objects to hide."""
        self.loaded = {}
        self.update(camera_x, camera_y)
        return [
            name for block in self.blocks.values() if block.hidden for name in block.actors
        ]