from transmission_core.elements import (
    Element, ElementType, ElementGroup, type_index, group_index, strip_position, is_useful,
)


def test_type_indices_follow_declaration_order():
    assert type_index("CellTransmitter") == 0
    assert type_index("Transmitter") == len(ElementType) - 1
    assert type_index("SignalBlockHexagon") == 9
    assert type_index("Unknown") == -1


def test_group_indices():
    assert [group_index(g.value) for g in ElementGroup] == [0, 1, 2, 3]
    assert group_index(None) == -1


def test_strip_position():
    assert strip_position("3,4,0") == "3,4"
    assert strip_position("3,4") == "3,4"
    assert strip_position("3,4,1") == "3,4,1"
    assert strip_position("10,0") == "10,0"


def test_useful_elements():
    assert is_useful("Transmitter")
    assert is_useful("SignalBooster")
    assert not is_useful("SignalBlockCircle")
    assert not is_useful("ObjectiveCrossedWires")


def test_group_prefers_element_group():
    e = Element("1", "SignalBlock", "0,0", {"elementGroup": "Wave", "blockGroup": "Cable"})
    assert e.group == "Wave"
    b = Element("2", "SignalBlock", "0,0", {"blockGroup": "Fibre"})
    assert b.group == "Fibre"
    assert Element("3", "ObjectiveCrossedWires", "0,0").group is None
