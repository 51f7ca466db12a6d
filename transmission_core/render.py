from typing import Iterable

HEADER_WIDTH = 30
RECORD_WIDTH = 42


def render_record(canonical_id: int, type_idx: int, position: str, fields: Iterable, raw: str = "") -> str:
    """One compact-format line.

    "{id} {type} {pos} " padded to HEADER_WIDTH, then the type specific
    fields separated by spaces, the whole padded to RECORD_WIDTH, then
    "  # " and the raw source element. Consumers read the columns before '#'.
    """
    head = f"{canonical_id} {type_idx} {position} ".ljust(HEADER_WIDTH)
    body = head + " ".join("" if v is None else str(v) for v in fields)
    return f"{body.ljust(RECORD_WIDTH)}  # {raw}"
