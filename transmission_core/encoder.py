from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from .elements import Element, ElementType, group_index, type_index
from .identity import IdentityTable
from .parser import parse_level_root, parse_level_str, read_level_root
from .render import render_record

MISSING = -1


class UnimplementedElementType(ValueError):
    """Raised for an element type the compact format has no layout for."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"NotImplemented: {type_name}")
        self.type_name = type_name


# Builders return the type specific columns, or None when the element is not emitted.
FieldBuilder = Callable[[Element, IdentityTable], Optional[List]]


def _group(e: Element) -> int:
    return group_index(e.group)


def _target(e: Element):
    return e.get("target", MISSING)


def _amount(e: Element):
    return e.get("amount", MISSING)


def _receiver(e, ids):
    return [_group(e), _target(e)]


def _transceiver(e, ids):
    return [_group(e), _target(e), _amount(e)]


def _transmitter(e, ids):
    return [_group(e), _amount(e)]


def _placed_signal(e, ids):
    return None


def _radial_transmitter(e, ids):
    # targetAmount is always big enough and extraRadius always 0
    return [_group(e), e.get("minRadius")]


def _signal_block(e, ids):
    return [_group(e), e.get("sx"), e.get("sy"), e.get("ex"), e.get("ey")]


def _signal_block_circle(e, ids):
    return [_group(e), e.get("radius")]


def _swapper_transmitter(e, ids):
    # elementGroup and transmitterGroup are always Cable
    return [group_index(e.get("swapGroup1")), group_index(e.get("swapGroup2")), _target(e), _amount(e)]


def _group_only(e, ids):
    return [_group(e)]


def _signal_block_hexagon(e, ids):
    return [_group(e), e.get("radius"), 1 if e.get("flip") == "True" else 0]


def _objective_signal_count(e, ids):
    return [e.get("signalTarget")]


def _objective_target_value(e, ids):
    return [ids.get(e.get("informationTarget"))]


def _objective_crossed_wires(e, ids):
    return []


FIELD_BUILDERS: Dict[ElementType, FieldBuilder] = {
    ElementType.Receiver: _receiver,
    ElementType.Transceiver: _transceiver,
    ElementType.Transmitter: _transmitter,
    ElementType.PlacedSignal: _placed_signal,
    ElementType.RadialTransmitter: _radial_transmitter,
    ElementType.SignalBlock: _signal_block,
    ElementType.SignalBlockCircle: _signal_block_circle,
    ElementType.SwapperTransmitter: _swapper_transmitter,
    ElementType.CellTransmitter: _group_only,
    ElementType.SignalBlockHexagon: _signal_block_hexagon,
    ElementType.SignalBooster: _group_only,
    ElementType.ObjectiveSignalCount: _objective_signal_count,
    ElementType.ObjectiveTargetValue: _objective_target_value,
    ElementType.ObjectiveCrossedWires: _objective_crossed_wires,
}


def element_type(e: Element) -> ElementType:
    try:
        return ElementType(e.type)
    except ValueError:
        raise UnimplementedElementType(e.type) from None


def encode_element(e: Element, ids: IdentityTable) -> Optional[str]:
    """Compact-format line for one element, None for suppressed types.

    The element's own id is registered before its fields are built, so an
    element that references itself gets its own number.
    """
    cid = ids.get(e.original_id)
    kind = element_type(e)
    fields = FIELD_BUILDERS[kind](e, ids)
    if fields is None:
        return None
    return render_record(cid, type_index(e.type), e.position, fields, e.raw)


def emission_order(elements: Iterable[Element]) -> List[Element]:
    """Useful elements first, then objectives and blocks; document order inside each pass."""
    elements = list(elements)
    return [e for e in elements if e.useful] + [e for e in elements if not e.useful]


class LevelEncoder:
    """One encoding session: a level document in, compact lines out.

    Owns the IdentityTable of the document being encoded.
    """
    def __init__(self) -> None:
        self.ids = IdentityTable()

    def iter_lines(self, elements: Iterable[Element]):
        for e in emission_order(elements):
            line = encode_element(e, self.ids)
            if line is not None:
                yield line


def encode_elements(elements: Iterable[Element], out: TextIO) -> int:
    """Writes one line per emitted element to out; returns the number of lines.

    Raises UnimplementedElementType on the first unknown type; nothing after it
    is written.
    """
    n = 0
    for line in LevelEncoder().iter_lines(elements):
        out.write(line + "\n")
        n += 1
    return n


def encode_document(root, out: TextIO) -> int:
    return encode_elements(parse_level_root(root), out)


def encode_level_str(level_str) -> List[str]:
    return list(LevelEncoder().iter_lines(parse_level_str(level_str)))


def encode_level_file(path: str, out: TextIO) -> int:
    with open(path, "rb") as f:
        return encode_document(read_level_root(f.read()), out)
