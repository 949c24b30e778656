from __future__ import annotations

from weighted_dripleaves.materials import Material


def test_match_accepts_bukkit_bare_and_namespaced_names():
    assert Material.match("DIAMOND_HELMET") is Material.DIAMOND_HELMET
    assert Material.match("diamond_helmet") is Material.DIAMOND_HELMET
    assert Material.match(" minecraft:diamond_helmet ") is Material.DIAMOND_HELMET


def test_match_unknown_name_returns_none():
    assert Material.match("SPACE_HELMET") is None
    assert Material.match("") is None


def test_air_variants():
    assert Material.AIR.is_air
    assert Material.CAVE_AIR.is_air
    assert Material.VOID_AIR.is_air
    assert not Material.STONE.is_air


def test_items_are_not_blocks():
    assert not Material.IRON_CHESTPLATE.is_block
    assert not Material.DIAMOND.is_block
    assert not Material.WATER_BUCKET.is_block
    assert Material.IRON_BLOCK.is_block
    assert Material.BIG_DRIPLEAF_STEM.is_block
