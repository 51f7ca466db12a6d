from __future__ import annotations
from typing import List
import os

from transmission_core.elements import Element
from transmission_core.parser import parse_level_file
from transmission_core.levels.io import LevelRef
from transmission_core.levels.split import level_data_dir


def resolve_level_path(levels_dir: str, name: str) -> str:
    """Path of a split level given its canonical name or its alias.

    Canonical names live in levels_dir/data, aliases are links in levels_dir.
    """
    for path in (os.path.join(level_data_dir(levels_dir), f"{name}.xml"),
                 os.path.join(levels_dir, f"{name}.xml")):
        if os.path.isfile(path):
            return path
    raise FileNotFoundError(f"No level named {name!r} in {levels_dir}")


def resolve_level_ref(levels_dir: str, name: str) -> LevelRef:
    """LevelRef under the canonical name, whether name is canonical or an alias."""
    path = os.path.realpath(resolve_level_path(levels_dir, name))
    return LevelRef(name=os.path.basename(path)[:-len(".xml")], path=path)


def load_level_by_name(levels_dir: str, name: str) -> List[Element]:
    return parse_level_file(resolve_level_path(levels_dir, name))
