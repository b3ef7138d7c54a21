"""Assignment of register indices to qubit names, in order of first use."""

from __future__ import annotations

DEFAULT_ID_BASE = 100


class QubitIdTable:
    """Map qubit names to register indices ``0, 1, 2, ...`` in the order they appear.

    Identifiers are stored internally offset by ``base``; the value returned by
    :meth:`query` is the register index, i.e. the stored identifier minus ``base``.
    """

    def __init__(self, base: int = DEFAULT_ID_BASE) -> None:
        self.base = base
        self._ids: dict[str, int] = {}
        self._next_id = base

    def query(self, qubit_name: str) -> int:
        """Return the register index of ``qubit_name``, assigning the next free one if new."""
        qubit_id = self._ids.get(qubit_name)
        if qubit_id is None:
            qubit_id = self._next_id
            self._ids[qubit_name] = qubit_id
            self._next_id += 1
        return qubit_id - self.base

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, qubit_name: object) -> bool:
        return qubit_name in self._ids

    def __repr__(self) -> str:
        return f"QubitIdTable(base={self.base}, assigned={len(self._ids)})"