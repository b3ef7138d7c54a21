import cmath
import math

import pytest

from statevec.gates import classical_fourier_transform, generate_gate_set, phase_shift_matrix

TOL = 1e-12


def _mul_flat(a, b):
    return [sum(a[i, k] * b[k, j] for k in range(2)) for i in range(2) for j in range(2)]


def _flat(m):
    return [m[i, j] for i in range(2) for j in range(2)]


def _gram_flat(m):
    return [sum(m[k, i].conjugate() * m[k, j] for k in range(2))
            for i in range(2) for j in range(2)]


def _gates():
    single, controlled = generate_gate_set()
    return dict(single), dict(controlled)


def test_gate_labels():
    single, controlled = generate_gate_set()
    assert [label for label, _ in single] == [" h ", " x_1_2 ", " y_1_2 ", " z_1_2 ", " t "]
    assert [label for label, _ in controlled] == [" cz ", " ch "]


def test_gate_names():
    single, _ = _gates()
    assert single[" h "].name == "h"
    assert single[" t "].name == "t"


@pytest.mark.parametrize("index", range(5))
def test_single_qubit_gates_are_unitary(index):
    single, _ = generate_gate_set()
    gram = _gram_flat(single[index][1])
    assert gram == pytest.approx([1, 0, 0, 1], abs=TOL)


@pytest.mark.parametrize("index", range(2))
def test_controlled_gates_are_unitary(index):
    _, controlled = generate_gate_set()
    gram = _gram_flat(controlled[index][1])
    assert gram == pytest.approx([1, 0, 0, 1], abs=TOL)


def test_sqrt_x_squares_to_x():
    single, _ = _gates()
    m = single[" x_1_2 "]
    assert _mul_flat(m, m) == pytest.approx([0, 1, 1, 0], abs=TOL)


def test_sqrt_y_squares_to_y():
    single, _ = _gates()
    m = single[" y_1_2 "]
    assert _mul_flat(m, m) == pytest.approx([0, -1j, 1j, 0], abs=TOL)


def test_t_squares_to_sqrt_z():
    single, _ = _gates()
    t = single[" t "]
    sqrt_z = single[" z_1_2 "]
    assert _mul_flat(t, t) == pytest.approx(_flat(sqrt_z), abs=TOL)


def test_hadamard_is_involution():
    single, _ = _gates()
    h = single[" h "]
    assert _mul_flat(h, h) == pytest.approx([1, 0, 0, 1], abs=TOL)
    assert h[0, 0] == pytest.approx(1 / math.sqrt(2))


def test_phase_shift_is_diagonal_unitary():
    m = phase_shift_matrix(5)
    assert m[0, 1] == 0 and m[1, 0] == 0
    assert abs(m[1, 1]) == pytest.approx(1.0)


def test_phase_shift_rejects_negative():
    with pytest.raises(ValueError):
        phase_shift_matrix(-1)


def test_fourier_of_basis_zero_is_uniform():
    n = 8
    y = classical_fourier_transform([1] + [0] * (n - 1))
    assert all(abs(v - 1 / math.sqrt(n)) < 1e-12 for v in y)


def test_fourier_of_basis_one_is_phase_ramp():
    n = 4
    y = classical_fourier_transform([0, 1, 0, 0])
    for k, v in enumerate(y):
        assert abs(v - cmath.exp(2j * math.pi * k / n) / 2) < 1e-12


def test_fourier_preserves_norm():
    x = [0.3 + 0.1j, -0.2j, 0.5, 0.1 - 0.4j, 0.2, 0.0, -0.3 + 0.3j, 0.1j]
    y = classical_fourier_transform(x)
    assert sum(abs(v) ** 2 for v in y) == pytest.approx(sum(abs(v) ** 2 for v in x))


def test_fourier_applied_four_times_is_identity():
    x = [0.3 + 0.1j, -0.2j, 0.5, 0.1 - 0.4j]
    y = x
    for _ in range(4):
        y = classical_fourier_transform(y)
    assert all(abs(a - b) < 1e-12 for a, b in zip(x, y))


def test_fourier_rejects_empty():
    with pytest.raises(ValueError):
        classical_fourier_transform([])