from typing import List, Union
from lxml import etree

from .elements import Element, strip_position

TAG_ELEMENT = "element"


def _raw(node) -> str:
    return etree.tostring(node, encoding="unicode", with_tail=False)


def parse_element(node) -> Element:
    """Builds an Element from an <element .../> node.

    Required attributes: id, type, position. A missing one raises KeyError,
    there is no recovery for malformed levels.
    """
    attrs = dict(node.attrib)
    return Element(
        original_id=attrs["id"],
        type=attrs["type"],
        position=strip_position(attrs["position"]),
        attrs=attrs,
        raw=_raw(node),
    )


def parse_level_root(root) -> List[Element]:
    """All <element> nodes under root, in document order."""
    return [parse_element(n) for n in root.iter(TAG_ELEMENT)]


def read_level_root(source: Union[str, bytes]):
    if isinstance(source, str):
        source = source.encode("utf-8")
    return etree.fromstring(source)


def parse_level_str(level_str: Union[str, bytes]) -> List[Element]:
    """Parses one level document (split or standalone) into its elements."""
    return parse_level_root(read_level_root(level_str))


def parse_level_file(path: str) -> List[Element]:
    with open(path, "rb") as f:
        return parse_level_str(f.read())
