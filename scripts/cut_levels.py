from __future__ import annotations
import argparse, os, yaml
from typing import List, Optional

from transmission_core.levels.split import cut_levels


"""
Split the level catalogue into one XML file per level.

  <root_dir>/data/<name>.xml   the level, marker comment included
  <root_dir>/<alias>.xml       link to the above when worlds.xml names the level

Usage:
  python -m scripts.cut_levels --config configs/data.yaml
"""


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Cut levels.xml into per-level files.")
    p.add_argument("--config", type=str, default="configs/data.yaml")
    p.add_argument("--levels", type=str, default=None, help="level catalogue (overrides config)")
    p.add_argument("--worlds", type=str, default=None, help="worlds lookup (overrides config)")
    p.add_argument("--out", type=str, default=None, help="output root (overrides config)")
    args = p.parse_args(argv)

    cfg = {}
    if os.path.exists(args.config):
        with open(args.config, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    src = cfg.get("source", {})
    levels_path = args.levels or src.get("levels")
    worlds_path = args.worlds or src.get("worlds")
    out_dir = args.out or cfg.get("levels", {}).get("root_dir")
    if not levels_path or not worlds_path or not out_dir:
        raise SystemExit("Provide --levels, --worlds and --out (or a config that has them)")

    with open(levels_path, "r", encoding="utf-8") as f:
        catalogue = f.read()
    with open(worlds_path, "r", encoding="utf-8") as f:
        worlds = f.read()

    written = cut_levels(catalogue, worlds, out_dir)
    aliased = sum(1 for w in written if w.alias_path)
    print(f"[=] {len(written)} levels, {aliased} aliases -> {out_dir}")


if __name__ == "__main__":
    main()
