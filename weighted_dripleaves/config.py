from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .materials import Material

LOG = logging.getLogger("weighted_dripleaves.config")
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file is missing or malformed."""


class IncludeSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    armor: bool
    equipment: bool


class DripleafConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, allow_inf_nan=False)

    include: IncludeSettings
    calculate_all_players: bool = Field(alias="calculate-all-players")
    weight_threshold: float = Field(alias="weight-to-trigger-dripleaf")
    item_weights: Mapping[Material, float] = Field(alias="weights")

    @field_validator("item_weights", mode="before")
    @classmethod
    def drop_unknown_materials(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        known: Dict[Material, Any] = {}
        for name, weight in value.items():
            material = Material.match(str(name))
            if material is None:
                LOG.debug("Ignoring weight for unknown material %r", name)
                continue
            if material in known:
                LOG.debug("Weight for %r overrides an earlier entry for %s", name, material.name)
            known[material] = weight
        return known

    @field_validator("item_weights")
    @classmethod
    def freeze_weights(cls, value: Mapping[Material, float]) -> Mapping[Material, float]:
        return MappingProxyType(dict(value))

    @property
    def include_armor(self) -> bool:
        return self.include.armor

    @property
    def include_equipment(self) -> bool:
        return self.include.equipment

    def weight_of(self, material: Material) -> float:
        return self.item_weights.get(material, 0.0)

    def to_dict(self) -> Dict[str, object]:
        return {
            "include": {"armor": self.include_armor, "equipment": self.include_equipment},
            "calculate-all-players": self.calculate_all_players,
            "weight-to-trigger-dripleaf": self.weight_threshold,
            "weights": {material.name: weight for material, weight in sorted(self.item_weights.items(), key=lambda kv: kv[0].name)},
        }


def config_path_from_env() -> Path:
    return Path(os.environ.get("WEIGHTED_DRIPLEAVES_CONFIG", "config.yml"))


def save_default_config(path: Path) -> bool:
    """Write the bundled default configuration unless ``path`` already exists."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_PATH.read_text(encoding="utf-8"), encoding="utf-8")
    LOG.info("Wrote default configuration to %s", path)
    return True


def parse_config(data: Any) -> DripleafConfig:
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")
    try:
        return DripleafConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(path: Path) -> DripleafConfig:
    LOG.info("Loading configuration...")
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse configuration file {path}: {exc}") from exc
    config = parse_config(data)
    log_summary(config)
    return config


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def log_summary(config: DripleafConfig) -> None:
    LOG.info("Loaded configuration:")
    LOG.info("* Include armor: %s.", _yes_no(config.include_armor))
    LOG.info("* Include equipment: %s.", _yes_no(config.include_equipment))
    LOG.info("* Calculate all players: %s.", _yes_no(config.calculate_all_players))
    LOG.info("* Weight to trigger dripleaf: %s.", config.weight_threshold)
    LOG.info("* Weights: %d.", len(config.item_weights))
