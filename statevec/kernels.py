"""Loops that apply a 2x2 gate matrix to pairs of state-vector amplitudes.

Each loop visits pairs ``(state0[i0], state1[i1])`` and replaces them with
``m @ (in0, in1)``.  With ``specialize`` set, the matrix is inspected first
and a cheaper update is chosen for common gates (identity, Pauli, phase,
real matrices).  The result is the same either way.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable, MutableSequence
from dataclasses import dataclass, field
from typing import Any, Optional

BYTES_PER_AMPLITUDE = 16

_PairOp = Callable[[complex, complex], "tuple[Optional[complex], Optional[complex]]"]


@dataclass(frozen=True)
class KernelRecord:
    """Time spent by one kernel call and the bytes of state it touched."""

    seconds: float
    bytes_moved: float

    @property
    def bandwidth(self) -> float:
        """Bytes per second; infinite when the call took no measurable time."""
        if self.seconds > 0:
            return self.bytes_moved / self.seconds
        return math.inf


@dataclass
class KernelStats:
    """Collects timing records for the single-, double- and triple-nested loops."""

    sn: list[KernelRecord] = field(default_factory=list)
    dn: list[KernelRecord] = field(default_factory=list)
    tn: list[KernelRecord] = field(default_factory=list)

    def record_sn(self, seconds: float, bytes_moved: float) -> None:
        self.sn.append(KernelRecord(seconds, bytes_moved))

    def record_dn(self, seconds: float, bytes_moved: float) -> None:
        self.dn.append(KernelRecord(seconds, bytes_moved))

    def record_tn(self, seconds: float, bytes_moved: float) -> None:
        self.tn.append(KernelRecord(seconds, bytes_moved))

    @property
    def calls(self) -> int:
        return len(self.sn) + len(self.dn) + len(self.tn)

    @property
    def total_seconds(self) -> float:
        return sum(r.seconds for r in (*self.sn, *self.dn, *self.tn))


def _entries(matrix: Any) -> tuple[complex, complex, complex, complex]:
    try:
        return (complex(matrix[0][0]), complex(matrix[0][1]),
                complex(matrix[1][0]), complex(matrix[1][1]))
    except (IndexError, TypeError) as exc:
        raise ValueError("a 2x2 matrix is required") from exc


def _general(m00: complex, m01: complex, m10: complex, m11: complex) -> _PairOp:
    return lambda a, b: (m00 * a + m01 * b, m10 * a + m11 * b)


def _specialize(m00: complex, m01: complex, m10: complex,
                m11: complex) -> tuple[str, float, Optional[_PairOp]]:
    """Pick the update for this matrix: label, fraction of state touched, pair update."""
    if m01 == 0 and m10 == 0:
        if m00 == 1:
            if m11 == 1:
                return "_Id", 0.0, None
            if m11 == -1:
                return "_Z", 0.5, lambda a, b: (None, -b)
            if m11 == 1j:
                return "_S", 0.5, lambda a, b: (None, complex(0.0, 1.0) * b)
            return "_100c", 0.5, lambda a, b: (None, m11 * b)
        return "", 1.0, lambda a, b: (m00 * a, m11 * b)
    if m00 == 0 and m11 == 0:
        if m01.real == 0 and m10.real == 0:
            if m01.imag == -1 and m10.imag == 1:
                return "_Y", 1.0, lambda a, b: (complex(0.0, -1.0) * b,
                                                complex(0.0, 1.0) * a)
            c01 = complex(0.0, m01.imag)
            c10 = complex(0.0, m10.imag)
            return "", 1.0, lambda a, b: (c01 * b, c10 * a)
        if m01 == 1 and m10 == 1:
            return "_X", 1.0, lambda a, b: (b, a)
        return "", 1.0, lambda a, b: (m01 * b, m10 * a)
    if m00.imag == 0 and m01.imag == 0 and m10.imag == 0 and m11.imag == 0:
        return "_H", 1.0, _general(m00, m01, m10, m11)
    return "", 1.0, _general(m00, m01, m10, m11)


def _choose(matrix: Any, specialize: bool) -> tuple[float, Optional[_PairOp]]:
    m00, m01, m10, m11 = _entries(matrix)
    if not specialize:
        return 1.0, _general(m00, m01, m10, m11)
    _, fraction, op = _specialize(m00, m01, m10, m11)
    return fraction, op


def specialization_label(matrix: Any) -> str:
    """Return the label of the specialized update chosen for ``matrix``."""
    return _specialize(*_entries(matrix))[0]


def _update(state0: MutableSequence[complex], state1: MutableSequence[complex],
            i0: int, i1: int, op: _PairOp) -> None:
    out0, out1 = op(state0[i0], state1[i1])
    if out0 is not None:
        state0[i0] = out0
    if out1 is not None:
        state1[i1] = out1


def loop_sn(start: int, end: int, state0: MutableSequence[complex],
            state1: MutableSequence[complex], shift0: int, shift1: int, matrix: Any,
            specialize: bool = False, timer: Optional[KernelStats] = None) -> None:
    """Update pairs ``(state0[i + shift0], state1[i + shift1])`` for ``start <= i < end``."""
    began = time.perf_counter()
    fraction, op = _choose(matrix, specialize)
    if op is not None:
        for i in range(start, end):
            _update(state0, state1, i + shift0, i + shift1, op)
    if timer is not None:
        elapsed = time.perf_counter() - began
        factor = 2.0 if state0 is state1 else 4.0
        timer.record_sn(elapsed, factor * fraction * BYTES_PER_AMPLITUDE * (end - start))


def loop_dn(gstart: int, gend: int, pos: int, state0: MutableSequence[complex],
            state1: MutableSequence[complex], shift0: int, shift1: int, matrix: Any,
            specialize: bool = False, timer: Optional[KernelStats] = None) -> None:
    """Update pairs in groups of ``2**(pos+1)`` indices, touching the first half of each."""
    began = time.perf_counter()
    fraction, op = _choose(matrix, specialize)
    half = 1 << pos
    if op is not None:
        for group in range(gstart, gend, half << 1):
            for ind0 in range(group, group + half):
                _update(state0, state1, ind0 + shift0, ind0 + shift1, op)
    if timer is not None:
        elapsed = time.perf_counter() - began
        timer.record_dn(elapsed, 2.0 * fraction * BYTES_PER_AMPLITUDE * (gend - gstart))


def loop_tn(state: MutableSequence[complex], c11: int, c12: int, c13: int,
            c21: int, c22: int, c23: int, c31: int, c32: int, shift: int,
            matrix: Any, specialize: bool = False,
            timer: Optional[KernelStats] = None) -> None:
    """Update pairs ``(state[k], state[k + shift])`` over three nested index ranges."""
    if c13 <= 0 or c23 <= 0:
        raise ValueError("loop strides must be positive")
    if (c12 - c11) % c13 != 0:
        raise ValueError("outer range is not a multiple of its stride")
    if (c22 - c21) % c23 != 0:
        raise ValueError("middle range is not a multiple of its stride")
    began = time.perf_counter()
    op = _general(*_entries(matrix))
    for l1 in range(c11, c12, c13):
        for l2 in range(l1 + c21, l1 + c22, c23):
            for ind0 in range(l2 + c31, l2 + c32):
                _update(state, state, ind0, ind0 + shift, op)
    if timer is not None:
        elapsed = time.perf_counter() - began
        count = ((c12 - c11) // c13) * ((c22 - c21) // c23) * (c32 - c31)
        timer.record_tn(elapsed, 4.0 * BYTES_PER_AMPLITUDE * count)


def scale_state(start: int, end: int, state: MutableSequence[complex], factor: complex,
                timer: Optional[KernelStats] = None) -> None:
    """Multiply ``state[start:end]`` in place by ``factor``; a factor of 1 is a no-op."""
    began = time.perf_counter()
    if factor != 1:
        for i in range(start, end):
            state[i] *= factor
    if timer is not None:
        elapsed = time.perf_counter() - began
        timer.record_sn(elapsed, 2.0 * BYTES_PER_AMPLITUDE * (end - start))