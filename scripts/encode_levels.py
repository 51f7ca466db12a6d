from __future__ import annotations
import argparse, io, os, time, yaml
from typing import List, Optional, Tuple
from multiprocessing import Pool, cpu_count
from tqdm import tqdm

from transmission_core.encoder import encode_level_file
from transmission_core.levels.io import iterate_level_files
from transmission_core.levels.resolve import resolve_level_ref


"""
Encode every split level into the compact text format.

Usage:
  python -m scripts.encode_levels --config configs/data.yaml --jobs 0
  python -m scripts.encode_levels --config configs/data.yaml --level Level_3 --level "First Contact"

An element type without a compact layout stops the whole run; the level it was
found in gets no output file.
"""


def _encode_one(args_tuple) -> Tuple[str, int]:
    name, path, out_dir = args_tuple
    buf = io.StringIO()
    n = encode_level_file(path, buf)
    with open(os.path.join(out_dir, f"{name}.txt"), "w", encoding="utf-8") as f:
        f.write(buf.getvalue())
    return name, n


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Split levels -> compact format")
    p.add_argument("--config", type=str, default="configs/data.yaml")
    p.add_argument("--levels_dir", type=str, default=None, help="split levels root (overrides config)")
    p.add_argument("--out", type=str, default=None, help="output dir (overrides config)")
    p.add_argument("--level", action="append", default=[], help="only this level, canonical or alias name (repeatable)")
    p.add_argument("--jobs", type=int, default=1, help="processes (0→cpu_count)")
    args = p.parse_args(argv)

    cfg = {}
    if os.path.exists(args.config):
        with open(args.config, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    levels_dir = args.levels_dir or cfg.get("levels", {}).get("root_dir")
    out_dir = args.out or cfg.get("encoded", {}).get("out_dir")
    if not levels_dir or not out_dir:
        raise SystemExit("Provide --levels_dir and --out (or a config that has them)")

    if args.level:
        try:
            refs = [resolve_level_ref(levels_dir, name) for name in args.level]
        except FileNotFoundError as e:
            raise SystemExit(str(e))
    else:
        refs = list(iterate_level_files(levels_dir))

    os.makedirs(out_dir, exist_ok=True)
    payload = [(ref.name, ref.path, out_dir) for ref in refs]

    jobs = args.jobs or cpu_count()
    started = time.time()
    if jobs == 1:
        rows = [_encode_one(t) for t in tqdm(payload, desc="Encoding levels", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_encode_one, payload), total=len(payload), desc="Encoding levels", unit="level"))

    total = sum(n for _, n in rows)
    print(f"done: {len(rows)} levels, {total} elements → {out_dir}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
