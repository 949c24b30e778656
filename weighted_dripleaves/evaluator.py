"""Decides whether a big dripleaf keeps tilting under the players standing on it.

The host calls :meth:`WeightedPresenceEvaluator.on_block_physics` for every
block physics update. Only an ``unstable`` big dripleaf is handled: the default
transition is cancelled and the plant is reset to ``none`` when the players
found above it are lighter than the configured threshold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import DripleafConfig
from .materials import Material
from .world import Block, BlockPhysicsEvent, Location, Player, Slot, Tilt, World

LOG = logging.getLogger("weighted_dripleaves.evaluator")

PROBE_WIDTH = 0.4
PROBE_OFFSETS: Tuple[Tuple[float, float], ...] = (
    (0.0, 0.0),
    (PROBE_WIDTH, 0.0),
    (PROBE_WIDTH, PROBE_WIDTH),
    (PROBE_WIDTH, -PROBE_WIDTH),
    (-PROBE_WIDTH, 0.0),
    (-PROBE_WIDTH, PROBE_WIDTH),
    (-PROBE_WIDTH, -PROBE_WIDTH),
    (0.0, PROBE_WIDTH),
    (0.0, -PROBE_WIDTH),
)


@dataclass(frozen=True)
class Evaluation:
    players: Tuple[str, ...]
    total_weight: float
    threshold: float
    sufficient: bool
    reset: bool


def _is_support(block: Block) -> bool:
    material = block.material
    return not material.is_air and material.is_block and material is not Material.BIG_DRIPLEAF


def find_supporting_block(world: World, location: Location, depth: int) -> Optional[Block]:
    """Return the first solid, non-dripleaf block under the nine probe points, if any."""
    for dx, dz in PROBE_OFFSETS:
        block = world.block_at(*location.add(dx, -depth, dz).block_coords())
        if _is_support(block):
            return block
    return None


def players_on_block(world: World, block: Block, players: Iterable[Player]) -> List[Player]:
    found: List[Player] = []
    for player in players:
        if find_supporting_block(world, player.location, 0) is not None:
            found.append(player)
        elif find_supporting_block(world, player.location, 1) is not None:
            found.append(player)
    return found


def _slots_weight(config: DripleafConfig, slots: Iterable[Slot]) -> float:
    weight = 0.0
    for item in slots:
        if item is None:
            continue
        weight += config.weight_of(item.material) * item.amount
    return weight


def player_weight(config: DripleafConfig, player: Player) -> float:
    weight = 0.0
    if config.include_armor:
        weight += _slots_weight(config, player.inventory.armor)
    if config.include_equipment:
        weight += _slots_weight(config, player.inventory.storage)
    return weight


class WeightedPresenceEvaluator:
    def __init__(self, config: DripleafConfig) -> None:
        self.config = config

    def applies_to(self, block: Block) -> bool:
        return block.material is Material.BIG_DRIPLEAF and block.tilt is Tilt.UNSTABLE

    def total_weight(self, players: Iterable[Player]) -> float:
        weight = 0.0
        for player in players:
            weight += player_weight(self.config, player)
            if not self.config.calculate_all_players:
                break
        return weight

    def on_block_physics(self, event: BlockPhysicsEvent, world: World, players: Iterable[Player]) -> Optional[Evaluation]:
        block = event.source_block
        if not self.applies_to(block):
            return None
        event.cancelled = True

        threshold = self.config.weight_threshold
        standing = players_on_block(world, block, players)
        if not standing:
            LOG.debug("No players on dripleaf at %s, leaving it unstable", block.cell)
            return Evaluation(players=(), total_weight=0.0, threshold=threshold, sufficient=False, reset=False)

        weight = self.total_weight(standing)
        reset = weight < threshold
        if reset:
            world.set_block(block.with_tilt(Tilt.NONE))
        LOG.debug(
            "Dripleaf at %s: players=%d weight=%.3f threshold=%.3f reset=%s",
            block.cell,
            len(standing),
            weight,
            threshold,
            reset,
        )
        return Evaluation(
            players=tuple(p.name for p in standing),
            total_weight=weight,
            threshold=threshold,
            sufficient=not reset,
            reset=reset,
        )
