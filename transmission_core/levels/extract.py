from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator
import re

LEVEL_RE = re.compile(rb"<level ver.*?</level>", re.DOTALL)
NAME_WINDOW = 64
NAME_END_GUESS = 9  # the name ends a few bytes before "<level": NAME 00 xx xx 00 00 <level
NAME_CHARS = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_")


@dataclass(frozen=True)
class ExtractedLevel:
    name: str
    xml: str
    offset: int  # byte offset of "<level" in the asset


def guess_name(prefix: bytes) -> str:
    """Best guess of a level's name from the bytes right before its <level> tag.

    Looks at the last NAME_WINDOW bytes, starts NAME_END_GUESS bytes from the
    end, walks back to the start of the run of name characters and reads it
    forward. May return "" when nothing name-like is there.
    """
    window = prefix[-NAME_WINDOW:].rjust(NAME_WINDOW, b"\0")
    i = NAME_WINDOW - NAME_END_GUESS
    while i > 0 and window[i] in NAME_CHARS:
        i -= 1
    i += 1
    out = bytearray()
    while i < NAME_WINDOW and window[i] in NAME_CHARS:
        out.append(window[i])
        i += 1
    return out.decode("ascii")


def extract_levels(data: bytes) -> Iterator[ExtractedLevel]:
    """Every <level ver...>...</level> block embedded in a binary game asset."""
    for m in LEVEL_RE.finditer(data):
        yield ExtractedLevel(
            name=guess_name(data[:m.start()]),
            xml=m.group(0).decode("utf-8", errors="replace"),
            offset=m.start(),
        )


def render_catalogue(levels: Iterable[ExtractedLevel]) -> str:
    """Catalogue text: each level preceded by its "<!-- NAME -->" marker."""
    parts = []
    for lvl in levels:
        parts.append(f"<!-- {lvl.name} -->\n{lvl.xml}\n")
    return "".join(parts)
