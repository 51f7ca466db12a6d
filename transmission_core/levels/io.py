from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator
import os

from transmission_core.parser import parse_level_file
from transmission_core.levels.split import level_data_dir

@dataclass
class LevelRef:
    name: str
    path: str


def iterate_level_files(levels_dir: str) -> Iterator[LevelRef]:
    """Iterate over the split levels (levels_dir/data/*.xml), sorted by name."""
    data_dir = level_data_dir(levels_dir)
    if not os.path.isdir(data_dir):
        return
    for fname in sorted(os.listdir(data_dir)):
        if not fname.endswith(".xml"):
            continue
        yield LevelRef(name=fname[:-len(".xml")], path=os.path.join(data_dir, fname))


def list_aliases(levels_dir: str) -> Dict[str, str]:
    """alias -> canonical name, for every alias link in levels_dir."""
    out: Dict[str, str] = {}
    if not os.path.isdir(levels_dir):
        return out
    for fname in sorted(os.listdir(levels_dir)):
        fpath = os.path.join(levels_dir, fname)
        if not fname.endswith(".xml") or not os.path.islink(fpath):
            continue
        target = os.path.basename(os.readlink(fpath))
        out[fname[:-len(".xml")]] = target[:-len(".xml")]
    return out


def count_types(path: str) -> Counter:
    return Counter(e.type for e in parse_level_file(path))

