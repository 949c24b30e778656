from __future__ import annotations

from enum import Enum
from typing import Optional

NAMESPACE = "minecraft:"


class Material(str, Enum):
    AIR = "minecraft:air"
    CAVE_AIR = "minecraft:cave_air"
    VOID_AIR = "minecraft:void_air"

    BIG_DRIPLEAF = "minecraft:big_dripleaf"
    BIG_DRIPLEAF_STEM = "minecraft:big_dripleaf_stem"
    SMALL_DRIPLEAF = "minecraft:small_dripleaf"

    STONE = "minecraft:stone"
    DEEPSLATE = "minecraft:deepslate"
    COBBLESTONE = "minecraft:cobblestone"
    STONE_BRICKS = "minecraft:stone_bricks"
    DIRT = "minecraft:dirt"
    GRASS_BLOCK = "minecraft:grass_block"
    MOSS_BLOCK = "minecraft:moss_block"
    CLAY = "minecraft:clay"
    SAND = "minecraft:sand"
    GRAVEL = "minecraft:gravel"
    OAK_PLANKS = "minecraft:oak_planks"
    OAK_LOG = "minecraft:oak_log"
    GLASS = "minecraft:glass"
    WATER = "minecraft:water"
    LAVA = "minecraft:lava"
    IRON_BLOCK = "minecraft:iron_block"
    GOLD_BLOCK = "minecraft:gold_block"
    DIAMOND_BLOCK = "minecraft:diamond_block"
    NETHERITE_BLOCK = "minecraft:netherite_block"
    ANVIL = "minecraft:anvil"

    LEATHER_HELMET = "minecraft:leather_helmet"
    LEATHER_CHESTPLATE = "minecraft:leather_chestplate"
    LEATHER_LEGGINGS = "minecraft:leather_leggings"
    LEATHER_BOOTS = "minecraft:leather_boots"
    CHAINMAIL_HELMET = "minecraft:chainmail_helmet"
    CHAINMAIL_CHESTPLATE = "minecraft:chainmail_chestplate"
    CHAINMAIL_LEGGINGS = "minecraft:chainmail_leggings"
    CHAINMAIL_BOOTS = "minecraft:chainmail_boots"
    IRON_HELMET = "minecraft:iron_helmet"
    IRON_CHESTPLATE = "minecraft:iron_chestplate"
    IRON_LEGGINGS = "minecraft:iron_leggings"
    IRON_BOOTS = "minecraft:iron_boots"
    GOLDEN_HELMET = "minecraft:golden_helmet"
    GOLDEN_CHESTPLATE = "minecraft:golden_chestplate"
    GOLDEN_LEGGINGS = "minecraft:golden_leggings"
    GOLDEN_BOOTS = "minecraft:golden_boots"
    DIAMOND_HELMET = "minecraft:diamond_helmet"
    DIAMOND_CHESTPLATE = "minecraft:diamond_chestplate"
    DIAMOND_LEGGINGS = "minecraft:diamond_leggings"
    DIAMOND_BOOTS = "minecraft:diamond_boots"
    NETHERITE_HELMET = "minecraft:netherite_helmet"
    NETHERITE_CHESTPLATE = "minecraft:netherite_chestplate"
    NETHERITE_LEGGINGS = "minecraft:netherite_leggings"
    NETHERITE_BOOTS = "minecraft:netherite_boots"
    TURTLE_HELMET = "minecraft:turtle_helmet"
    ELYTRA = "minecraft:elytra"

    IRON_INGOT = "minecraft:iron_ingot"
    GOLD_INGOT = "minecraft:gold_ingot"
    NETHERITE_INGOT = "minecraft:netherite_ingot"
    DIAMOND = "minecraft:diamond"
    EMERALD = "minecraft:emerald"
    COAL = "minecraft:coal"
    FEATHER = "minecraft:feather"
    IRON_SWORD = "minecraft:iron_sword"
    DIAMOND_SWORD = "minecraft:diamond_sword"
    IRON_PICKAXE = "minecraft:iron_pickaxe"
    DIAMOND_PICKAXE = "minecraft:diamond_pickaxe"
    SHIELD = "minecraft:shield"
    BUCKET = "minecraft:bucket"
    WATER_BUCKET = "minecraft:water_bucket"
    LAVA_BUCKET = "minecraft:lava_bucket"

    @property
    def key(self) -> str:
        return self.value[len(NAMESPACE):]

    @property
    def is_air(self) -> bool:
        return self in AIR_MATERIALS

    @property
    def is_block(self) -> bool:
        return self not in ITEM_MATERIALS

    @classmethod
    def match(cls, name: str) -> Optional["Material"]:
        """Resolve ``DIAMOND_HELMET``, ``diamond_helmet`` or ``minecraft:diamond_helmet``."""
        normalized = str(name).strip().lower()
        if normalized.startswith(NAMESPACE):
            normalized = normalized[len(NAMESPACE):]
        return _BY_KEY.get(normalized)


AIR_MATERIALS = frozenset({Material.AIR, Material.CAVE_AIR, Material.VOID_AIR})

# Materials that only exist as items; everything else can be placed in the world.
ITEM_MATERIALS = frozenset(
    m
    for m in Material
    if m.key.endswith(("_helmet", "_chestplate", "_leggings", "_boots", "_ingot", "_sword", "_pickaxe", "bucket"))
) | frozenset({Material.ELYTRA, Material.DIAMOND, Material.EMERALD, Material.COAL, Material.FEATHER, Material.SHIELD})

_BY_KEY = {m.key: m for m in Material}
