from __future__ import annotations
import argparse, yaml, os
from collections import Counter
from typing import List, Optional

from transmission_core.levels.io import iterate_level_files, count_types, list_aliases
from transmission_core.elements import type_index


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Report element types of the split levels.")
    p.add_argument("--config", type=str, default="configs/data.yaml")
    p.add_argument("--levels_dir", type=str, default=None, help="split levels root (overrides config)")
    args = p.parse_args(argv)

    cfg = {}
    if os.path.exists(args.config):
        with open(args.config, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    root = args.levels_dir or cfg.get("levels", {}).get("root_dir")
    if not root:
        raise SystemExit("Provide --levels_dir (or a config with levels.root_dir)")

    totals: Counter = Counter()
    ok = 0
    bad = 0
    for ref in iterate_level_files(root):
        types = count_types(ref.path)
        totals.update(types)
        unknown = sorted(t for t in types if type_index(t) == -1)
        if unknown:
            bad += 1
            print(f"[skip] {ref.name}: unknown types {', '.join(unknown)}")
        else:
            ok += 1

    for t, n in sorted(totals.items()):
        print(f"  {t}: {n}")
    print(f"aliases: {len(list_aliases(root))}")
    print(f"valid: {ok}, skipped: {bad}")
    if bad:
        raise SystemExit(1)

if __name__ == "__main__":
    main()
