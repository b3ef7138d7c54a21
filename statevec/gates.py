"""Standard gate matrices and a reference discrete Fourier transform."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

from .tinymatrix import TinyMatrix


def _gate(values, name: str) -> TinyMatrix:
    return TinyMatrix(2, 2, values, name=name)


def generate_gate_set() -> tuple[list[tuple[str, TinyMatrix]], list[tuple[str, TinyMatrix]]]:
    """Return the single-qubit gates and the gates used under a control.

    Each entry is a ``(label, matrix)`` pair.
    """
    sqrt_x = _gate([[0.5 + 0.5j, 0.5 - 0.5j], [0.5 - 0.5j, 0.5 + 0.5j]], "x_1_2")
    sqrt_y = _gate([[0.5 + 0.5j, -0.5 - 0.5j], [0.5 + 0.5j, 0.5 + 0.5j]], "y_1_2")
    pauli_z = _gate([[1 + 0j, 0j], [0j, -1 + 0j]], "z")
    sqrt_z = _gate([[1 + 0j, 0j], [0j, 1j]], "z_1_2")
    t_gate = _gate([[1 + 0j, 0j],
                    [0j, complex(math.cos(math.pi / 4.0), math.sin(math.pi / 4.0))]], "t")
    f = 1.0 / math.sqrt(2.0)
    hadamard = _gate([[complex(f, 0.0), complex(f, 0.0)],
                      [complex(f, 0.0), complex(-f, 0.0)]], "h")

    single = [(" h ", hadamard), (" x_1_2 ", sqrt_x), (" y_1_2 ", sqrt_y),
              (" z_1_2 ", sqrt_z), (" t ", t_gate)]
    controlled = [(" cz ", pauli_z), (" ch ", hadamard.copy())]
    return single, controlled


def phase_shift_matrix(k: int) -> TinyMatrix:
    """Return ``diag(1, exp(i*pi / 2**k))``, the controlled phase of the Fourier circuit."""
    if k < 0:
        raise ValueError("k must be non-negative")
    angle = math.pi / float(1 << k)
    return _gate([[1 + 0j, 0j], [0j, complex(math.cos(angle), math.sin(angle))]],
                 f"phase_{k}")


def classical_fourier_transform(amplitudes: Sequence[complex]) -> list[complex]:
    """Return ``y[k] = sum_j x[j] exp(2*pi*i*j*k/N) / sqrt(N)`` for the given amplitudes."""
    x = [complex(a) for a in amplitudes]
    n = len(x)
    if n == 0:
        raise ValueError("cannot transform an empty vector")
    norm = math.sqrt(n)
    return [
        sum(xj * cmath.exp(complex(0.0, 2.0 * math.pi * j * k / n)) for j, xj in enumerate(x))
        / norm
        for k in range(n)
    ]