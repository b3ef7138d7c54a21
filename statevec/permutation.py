"""Permutations of qubit order and the index maps they induce."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def perm(value: int, mapping: Sequence[int], num_qubits: int) -> int:
    """Return the index whose bit ``i`` is bit ``mapping[i]`` of ``value``."""
    result = 0
    for i, source in enumerate(mapping[:num_qubits]):
        result |= ((value >> source) & 1) << i
    return result


def dec2bin(value: int, num_bits: int) -> str:
    """Return the ``num_bits`` low bits of ``value``, least significant first."""
    return "".join("1" if (value >> i) & 1 else "0" for i in range(num_bits))


def bin2dec(bits: str) -> int:
    """Inverse of :func:`dec2bin`: read a least-significant-first bit string."""
    return sum((1 << i) * int(ch) for i, ch in enumerate(bits))


class Permutation:
    """A qubit permutation together with its inverse."""

    def __init__(self, mapping: int | Iterable[int]) -> None:
        if isinstance(mapping, int):
            mapping = range(mapping)
        self.set_new_permutation(mapping)

    @property
    def num_qubits(self) -> int:
        return len(self.map)

    def __getitem__(self, i: int) -> int:
        if not 0 <= i < len(self.map):
            raise IndexError(f"qubit {i} outside a permutation of {len(self.map)}")
        return self.map[i]

    def __len__(self) -> int:
        return len(self.map)

    def __repr__(self) -> str:
        return f"Permutation({list(self.map)!r})"

    def map_str(self) -> str:
        return "".join(f" {m}" for m in self.map)

    def imap_str(self) -> str:
        return "".join(f" {m}" for m in self.imap)

    def find(self, position: int) -> int:
        """Return the index ``i`` with ``map[i] == position``."""
        try:
            return self.map.index(position)
        except ValueError:
            raise ValueError(f"position {position} is not in the permutation") from None

    def set_new_permutation(self, mapping: Iterable[int]) -> None:
        """Replace the map, checking that it is a permutation, and rebuild the inverse."""
        new_map = tuple(mapping)
        if sorted(new_map) != list(range(len(new_map))):
            raise ValueError(f"{list(new_map)} is not a permutation")
        inverse = [0] * len(new_map)
        for i, m in enumerate(new_map):
            inverse[m] = i
        self.map = new_map
        self.imap = tuple(inverse)

    def lin2perm_index(self, value: int) -> int:
        return perm(value, self.map, self.num_qubits)

    def perm2lin_index(self, value: int) -> int:
        return perm(value, self.imap, self.num_qubits)

    def lin2perm(self, value: int | str) -> str:
        """Reorder the bits of ``value`` (an index or a bit string) through the map."""
        bits = dec2bin(value, self.num_qubits) if isinstance(value, int) else value
        return "".join(bits[self.map[i]] for i in range(len(bits)))

    def perm2lin(self, value: int | str) -> str:
        """Reorder the bits of ``value`` (an index or a bit string) through the inverse map."""
        bits = dec2bin(value, self.num_qubits) if isinstance(value, int) else value
        return "".join(bits[self.imap[i]] for i in range(len(bits)))

    def prange(self) -> list[str]:
        """Return one line per basis index showing where the permutation sends it."""
        return [
            f"map({i:3d}) = {bin2dec(self.lin2perm(i)):3d}"
            for i in range(1 << self.num_qubits)
        ]


class PermutedState:
    """A test state vector whose qubit order follows a :class:`Permutation`."""

    def __init__(self, permutation: Permutation, name: str) -> None:
        self.permutation = permutation
        self.name = name
        self.state = [complex(i % 3, i % 7) for i in range(1 << permutation.num_qubits)]

    def permute(self, new_permutation: Permutation) -> None:
        """Reorder the amplitudes so that the state follows ``new_permutation``."""
        old = self.permutation
        if new_permutation.num_qubits != old.num_qubits:
            raise ValueError("permutations act on different numbers of qubits")
        mapping = [old.map[new_permutation.imap[i]] for i in range(old.num_qubits)]
        new_state = [0j] * len(self.state)
        for i, amplitude in enumerate(self.state):
            new_state[perm(i, mapping, old.num_qubits)] = amplitude
        self.permutation = new_permutation
        self.state = new_state

    def lines(self) -> list[str]:
        """Return a listing of the state, one amplitude per line."""
        out = [f"name::{self.name} {self.permutation.map_str()}"]
        out.extend(
            f"{self.permutation.lin2perm(i)} {{{a.real:f} {a.imag:f}}}"
            for i, a in enumerate(self.state)
        )
        return out

    def __eq__(self, other) -> bool:
        if not isinstance(other, PermutedState):
            return NotImplemented
        if len(self.state) != len(other.state):
            raise ValueError("states have different sizes")
        return self.state == other.state

    __hash__ = None  # type: ignore[assignment]