"""Read-only views over the host world, plus an in-memory snapshot world."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from .materials import Material

Cell = Tuple[int, int, int]


class Tilt(str, Enum):
    NONE = "none"
    UNSTABLE = "unstable"
    PARTIAL = "partial"
    FULL = "full"


@dataclass(frozen=True)
class Location:
    x: float
    y: float
    z: float

    def add(self, dx: float, dy: float, dz: float) -> "Location":
        return Location(self.x + dx, self.y + dy, self.z + dz)

    def block_coords(self) -> Cell:
        return math.floor(self.x), math.floor(self.y), math.floor(self.z)


@dataclass(frozen=True)
class ItemStack:
    material: Material
    amount: int = 1


Slot = Optional[ItemStack]


@dataclass(frozen=True)
class PlayerInventory:
    armor: Sequence[Slot] = ()
    storage: Sequence[Slot] = ()


@dataclass(frozen=True)
class Player:
    name: str
    location: Location
    inventory: PlayerInventory = field(default_factory=PlayerInventory)


@dataclass(frozen=True)
class Block:
    x: int
    y: int
    z: int
    material: Material
    tilt: Optional[Tilt] = None

    @property
    def cell(self) -> Cell:
        return self.x, self.y, self.z

    def with_tilt(self, tilt: Tilt) -> "Block":
        return replace(self, tilt=tilt)


@dataclass
class BlockPhysicsEvent:
    source_block: Block
    cancelled: bool = False


class World(Protocol):
    def block_at(self, x: int, y: int, z: int) -> Block:
        ...

    def set_block(self, block: Block) -> None:
        ...


class SnapshotWorld:
    """Sparse world; cells that were never set read back as air."""

    def __init__(self, blocks: Sequence[Block] = ()) -> None:
        self._blocks: Dict[Cell, Block] = {}
        self.writes: List[Block] = []
        for block in blocks:
            self._blocks[block.cell] = block

    def block_at(self, x: int, y: int, z: int) -> Block:
        block = self._blocks.get((x, y, z))
        if block is None:
            return Block(x, y, z, Material.AIR)
        return block

    def set_block(self, block: Block) -> None:
        self._blocks[block.cell] = block
        self.writes.append(block)
