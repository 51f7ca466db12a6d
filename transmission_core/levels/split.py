from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union
import os
import re

MARKER_RE = re.compile(r"^\s*<!-- (.*) -->\s*$")
WORLD_NAME_RE = re.compile(r'name="([^"]*)"')


@dataclass(frozen=True)
class Boundary:
    """A "<!-- NAME -->" line that starts a new level."""
    name: str
    line: str


@dataclass(frozen=True)
class Content:
    line: str


def classify_line(line: str) -> Union[Boundary, Content]:
    m = MARKER_RE.match(line)
    if m:
        return Boundary(name=m.group(1), line=line)
    return Content(line=line)


@dataclass
class LevelUnit:
    name: str
    lines: List[str] = field(default_factory=list)

    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class LevelFiles:
    name: str
    path: str
    alias: Optional[str] = None
    alias_path: Optional[str] = None  # None when no alias or the link could not be made


def split_catalogue(lines: Iterable[str]) -> Iterator[LevelUnit]:
    """Cuts the catalogue into levels at every marker line.

    The marker line is kept as the first line of its level. Lines before the
    first marker belong to no level and are dropped.
    """
    cur: Optional[LevelUnit] = None
    for raw in lines:
        line = raw.rstrip("\r\n")
        tagged = classify_line(line)
        if isinstance(tagged, Boundary):
            if cur is not None:
                yield cur
            cur = LevelUnit(name=tagged.name)
        if cur is not None:
            cur.lines.append(line)
    if cur is not None:
        yield cur


class AliasTable:
    """Alternate level names from the worlds lookup document.

    A level's alias is the name="..." value on the first worlds line that
    contains the level's name in double quotes.
    """
    def __init__(self, worlds_text: str) -> None:
        self.lines = text_lines(worlds_text)

    def lookup(self, level_name: str) -> Optional[str]:
        needle = f'"{level_name}"'
        for line in self.lines:
            if needle in line:
                m = WORLD_NAME_RE.search(line)
                return m.group(1) if m else None
        return None


def text_lines(text: str) -> List[str]:
    """Lines split on newline characters only; a final newline does not start an empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def level_data_dir(out_dir: str) -> str:
    return os.path.join(out_dir, "data")


def _link_alias(out_dir: str, name: str, alias: str) -> Optional[str]:
    link = os.path.join(out_dir, f"{alias}.xml")
    try:
        os.symlink(os.path.join("data", f"{name}.xml"), link)
    except OSError:
        # alias already taken (or links not supported), the level stays reachable by name
        return None
    return link


def write_level(unit: LevelUnit, out_dir: str, aliases: Optional[AliasTable] = None) -> LevelFiles:
    """Writes data/<name>.xml and, if the level has an alias, <alias>.xml linking to it."""
    path = os.path.join(level_data_dir(out_dir), f"{unit.name}.xml")
    with open(path, "w", encoding="utf-8") as f:
        f.write(unit.text())

    alias = aliases.lookup(unit.name) if aliases is not None else None
    alias_path = _link_alias(out_dir, unit.name, alias) if alias else None
    return LevelFiles(name=unit.name, path=path, alias=alias, alias_path=alias_path)


def cut_levels(catalogue_text: str, worlds_text: str, out_dir: str) -> List[LevelFiles]:
    """Splits a whole catalogue into out_dir/data/*.xml plus alias links in out_dir."""
    os.makedirs(level_data_dir(out_dir), exist_ok=True)
    aliases = AliasTable(worlds_text)
    return [write_level(u, out_dir, aliases) for u in split_catalogue(text_lines(catalogue_text))]
