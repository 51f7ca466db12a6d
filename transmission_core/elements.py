from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

__all__ = [
    "ElementType",
    "ElementGroup",
    "Element",
    "type_index",
    "group_index",
    "strip_position",
    "is_useful",
]


class ElementType(Enum):
    """Known element types. Declaration order is the compact-format index."""

    CellTransmitter = "CellTransmitter"
    ObjectiveCrossedWires = "ObjectiveCrossedWires"
    ObjectiveSignalCount = "ObjectiveSignalCount"
    ObjectiveTargetValue = "ObjectiveTargetValue"
    PlacedSignal = "PlacedSignal"
    RadialTransmitter = "RadialTransmitter"
    Receiver = "Receiver"
    SignalBlock = "SignalBlock"
    SignalBlockCircle = "SignalBlockCircle"
    SignalBlockHexagon = "SignalBlockHexagon"
    SignalBooster = "SignalBooster"
    SwapperTransmitter = "SwapperTransmitter"
    Transceiver = "Transceiver"
    Transmitter = "Transmitter"


class ElementGroup(Enum):
    # Exchange: white, Wave: orange
    Cable = "Cable"
    Exchange = "Exchange"
    Fibre = "Fibre"
    Wave = "Wave"


_TYPE_ORDER = [t.value for t in ElementType]
_GROUP_ORDER = [g.value for g in ElementGroup]


def type_index(name: Optional[str]) -> int:
    if name in _TYPE_ORDER:
        return _TYPE_ORDER.index(name)
    return -1


def group_index(name: Optional[str]) -> int:
    """Position in ElementGroup, -1 when the attribute is absent."""
    if name in _GROUP_ORDER:
        return _GROUP_ORDER.index(name)
    return -1


def strip_position(position: str) -> str:
    """Drops a trailing ",0" third coordinate: "3,4,0" -> "3,4"."""
    if position.endswith(",0") and position.count(",") == 2:
        return position[:-2]
    return position


def is_useful(type_name: str) -> bool:
    """Circuit elements (not objectives, not blocks) come first in the output."""
    return "Objective" not in type_name and "Block" not in type_name


@dataclass(frozen=True, slots=True)
class Element:
    """
    One puzzle element of a level.

    original_id: id attribute from the source document (opaque string).
    type: raw type name, may be unknown.
    position: coordinates with the trailing ",0" already stripped.
    attrs: every attribute of the source node, as strings.
    raw: the source node serialized back to XML, for traceability.
    """

    original_id: str
    type: str
    position: str
    attrs: Dict[str, str] = field(default_factory=dict)
    raw: str = ""

    def get(self, key: str, default=None):
        return self.attrs.get(key, default)

    @property
    def group(self) -> Optional[str]:
        # elementGroup wins, blocks use blockGroup
        group = self.attrs.get("elementGroup")
        if group is None:
            group = self.attrs.get("blockGroup")
        return group

    @property
    def useful(self) -> bool:
        return is_useful(self.type)
