from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import ConfigError, config_path_from_env, load_config, save_default_config
from .evaluator import WeightedPresenceEvaluator
from .snapshot import SnapshotError, load_snapshot
from .world import BlockPhysicsEvent

LOG = logging.getLogger("weighted_dripleaves.cli")


def _emit(payload: dict, json_out: Optional[str]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True)
    if json_out:
        out = Path(json_out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
    print(text)


def cmd_init_config(args: argparse.Namespace) -> int:
    path = Path(args.config)
    if not save_default_config(path):
        LOG.info("Configuration already present at %s", path)
    return 0


def cmd_show_config(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config))
    _emit(config.to_dict(), None)
    return 0


def cmd_evaluate(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config))
    snapshot = load_snapshot(Path(args.snapshot))
    world = snapshot.build_world()
    source = world.block_at(*snapshot.source_cell())

    event = BlockPhysicsEvent(source)
    evaluation = WeightedPresenceEvaluator(config).on_block_physics(event, world, snapshot.build_players())
    after = world.block_at(*source.cell)

    payload: dict = {
        "block": {"x": source.x, "y": source.y, "z": source.z, "material": source.material.name},
        "handled": event.cancelled,
        "tilt": after.tilt.value if after.tilt else None,
    }
    if evaluation is not None:
        payload.update(
            {
                "players": list(evaluation.players),
                "total_weight": evaluation.total_weight,
                "threshold": evaluation.threshold,
                "sufficient": evaluation.sufficient,
                "reset": evaluation.reset,
            }
        )
    _emit(payload, args.json_out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="weighted-dripleaves", description="Weighted big dripleaf rule tooling.")
    sub = ap.add_subparsers(dest="command", required=True)

    default_config = str(config_path_from_env())

    p_init = sub.add_parser("init-config", help="Write the default configuration if it is missing.")
    p_init.add_argument("--config", default=default_config)
    p_init.set_defaults(func=cmd_init_config)

    p_show = sub.add_parser("show-config", help="Load and print the configuration.")
    p_show.add_argument("--config", default=default_config)
    p_show.set_defaults(func=cmd_show_config)

    p_eval = sub.add_parser("evaluate", help="Run one physics update against a JSON world snapshot.")
    p_eval.add_argument("--config", default=default_config)
    p_eval.add_argument("--snapshot", required=True)
    p_eval.add_argument("--json-out", default=None)
    p_eval.set_defaults(func=cmd_evaluate)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=os.getenv("WEIGHTED_DRIPLEAVES_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return args.func(args)
    except (ConfigError, SnapshotError) as exc:
        LOG.error("%s", exc)
        return 2
