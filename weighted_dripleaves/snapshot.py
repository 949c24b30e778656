from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .materials import Material
from .world import Block, ItemStack, Location, Player, PlayerInventory, SnapshotWorld, Tilt


class SnapshotError(RuntimeError):
    """Raised when a world snapshot file cannot be loaded."""


def _material(value: Any) -> Material:
    if isinstance(value, Material):
        return value
    material = Material.match(str(value))
    if material is None:
        raise ValueError(f"Unknown material: {value!r}")
    return material


class PositionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float
    y: float
    z: float


class BlockModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: int
    y: int
    z: int
    material: Material
    tilt: Optional[Tilt] = None

    @field_validator("material", mode="before")
    @classmethod
    def validate_material(cls, value: Any) -> Material:
        return _material(value)


class SlotModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    material: Material
    amount: int = Field(default=1, ge=0)

    @field_validator("material", mode="before")
    @classmethod
    def validate_material(cls, value: Any) -> Material:
        return _material(value)


class PlayerModel(BaseModel):
    name: str = Field(min_length=1)
    location: PositionModel
    armor: List[Optional[SlotModel]] = Field(default_factory=list)
    storage: List[Optional[SlotModel]] = Field(default_factory=list)


class WorldSnapshot(BaseModel):
    source: PositionModel
    blocks: List[BlockModel] = Field(default_factory=list)
    players: List[PlayerModel] = Field(default_factory=list)

    def build_world(self) -> SnapshotWorld:
        return SnapshotWorld([Block(b.x, b.y, b.z, b.material, b.tilt) for b in self.blocks])

    def build_players(self) -> List[Player]:
        return [
            Player(
                name=p.name,
                location=Location(p.location.x, p.location.y, p.location.z),
                inventory=PlayerInventory(armor=_stacks(p.armor), storage=_stacks(p.storage)),
            )
            for p in self.players
        ]

    def source_cell(self) -> Tuple[int, int, int]:
        return Location(self.source.x, self.source.y, self.source.z).block_coords()


def _stacks(slots: List[Optional[SlotModel]]) -> Tuple[Optional[ItemStack], ...]:
    return tuple(None if s is None else ItemStack(s.material, s.amount) for s in slots)


def load_snapshot(path: Path) -> WorldSnapshot:
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotError(f"Failed to read snapshot file {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Failed to parse snapshot file {path}: {exc}") from exc
    try:
        return WorldSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid snapshot: {exc}") from exc
