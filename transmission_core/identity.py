from typing import Dict, Iterator, Tuple


class IdentityTable:
    """Canonical integer ids for one level document.

    Every original id string gets the next free integer (0, 1, 2, ...) the
    first time it is seen, whatever role it is seen in: an element's own id,
    or an id referenced by another element. Later lookups return the same
    integer. One table per document; never share it between levels.
    """
    def __init__(self) -> None:
        self._ids: Dict[str, int] = {}

    def get(self, original_id) -> int:
        key = "" if original_id is None else str(original_id)
        if key not in self._ids:
            self._ids[key] = len(self._ids)
        return self._ids[key]

    def __contains__(self, original_id) -> bool:
        return ("" if original_id is None else str(original_id)) in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._ids.items())
