from __future__ import annotations
import argparse, os, yaml
from typing import List, Optional

from transmission_core.levels.extract import extract_levels, render_catalogue


"""
Pull the level catalogue out of the raw game asset.

Every embedded <level ...>...</level> block is written with a "<!-- NAME -->"
marker line in front of it, ready for scripts.cut_levels.

Usage:
  python -m scripts.extract_catalogue --config configs/data.yaml
  python -m scripts.extract_catalogue --asset resources.assets --out orig-data/levels.xml
"""


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Extract the level catalogue from a game asset.")
    p.add_argument("--config", type=str, default="configs/data.yaml")
    p.add_argument("--asset", type=str, default=None, help="binary asset (overrides config)")
    p.add_argument("--out", type=str, default=None, help="catalogue to write (overrides config)")
    args = p.parse_args(argv)

    cfg = {}
    if os.path.exists(args.config):
        with open(args.config, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    src = cfg.get("source", {})
    asset = args.asset or src.get("asset")
    out = args.out or src.get("levels")
    if not asset or not out:
        raise SystemExit("Provide --asset and --out (or a config with source.asset / source.levels)")

    with open(asset, "rb") as f:
        data = f.read()
    levels = list(extract_levels(data))
    for lvl in levels:
        if not lvl.name:
            print(f"[WARN] no name found for level at offset {lvl.offset}")

    if os.path.dirname(out):
        os.makedirs(os.path.dirname(out), exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        f.write(render_catalogue(levels))
    print(f"[=] {len(levels)} levels -> {out}")


if __name__ == "__main__":
    main()
