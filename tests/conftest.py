from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from weighted_dripleaves.config import DripleafConfig  # noqa: E402
from weighted_dripleaves.materials import Material  # noqa: E402
from weighted_dripleaves.world import Block, ItemStack, Location, Player, PlayerInventory, SnapshotWorld, Tilt  # noqa: E402

LEAF = (0, 64, 0)


def make_config(
    *,
    armor: bool = True,
    equipment: bool = False,
    all_players: bool = False,
    threshold: float = 5.0,
    weights: Optional[dict] = None,
) -> DripleafConfig:
    return DripleafConfig.model_validate(
        {
            "include": {"armor": armor, "equipment": equipment},
            "calculate-all-players": all_players,
            "weight-to-trigger-dripleaf": threshold,
            "weights": weights if weights is not None else {},
        }
    )


def dripleaf_world(tilt: Tilt = Tilt.UNSTABLE) -> SnapshotWorld:
    x, y, z = LEAF
    return SnapshotWorld(
        [
            Block(x, y, z, Material.BIG_DRIPLEAF, tilt),
            Block(x, y - 1, z, Material.BIG_DRIPLEAF_STEM),
            Block(x, y - 2, z, Material.MOSS_BLOCK),
        ]
    )


def player_on_leaf(name: str = "Ash", armor=(), storage=()) -> Player:
    x, y, z = LEAF
    return Player(
        name=name,
        location=Location(x + 0.5, y + 0.9375, z + 0.5),
        inventory=PlayerInventory(armor=tuple(armor), storage=tuple(storage)),
    )


def stack(material: Material, amount: int = 1) -> ItemStack:
    return ItemStack(material, amount)


@pytest.fixture()
def world() -> SnapshotWorld:
    return dripleaf_world()


@pytest.fixture()
def leaf(world: SnapshotWorld) -> Block:
    return world.block_at(*LEAF)
