# statevec

Pure-Python building blocks for simulating pure quantum states held as
vectors of complex amplitudes. The package has no dependencies outside the
standard library.

## Installation

```
pip install statevec
```

Install the test extra with `pip install statevec[test]`.

## Contents

- `statevec.tinymatrix.TinyMatrix`: a small matrix whose shape is fixed at
  construction, mainly used for 2x2 gates. It supports `m[i, j]` indexing
  and assignment, `m[i]` for a whole row, `row`, `sub_matrix` with start
  indices and strides, `copy`, equality with another matrix or a nested
  sequence, `len()` (number of elements), a compact `str()` form and a
  readable listing from `describe(name)`.
- `statevec.permutation`: `Permutation` maps qubit positions and converts
  indices between the linear order and a permuted order (`lin2perm`,
  `perm2lin` give bit strings; `lin2perm_index`, `perm2lin_index` give
  integers). `find` returns where a position sits in the map, and `prange`
  lists where every basis index is sent. `PermutedState` holds a test
  amplitude vector together with its permutation and moves the amplitudes
  when `permute` is called with a new permutation. The module also provides
  the helpers `perm`, `dec2bin` and `bin2dec` (bit strings are written least
  significant bit first).
- `statevec.kernels`: loops that apply a 2x2 matrix to pairs of amplitudes.
  `loop_sn` covers a contiguous range, `loop_dn` strided groups of
  `2**(pos+1)` indices and `loop_tn` three nested index ranges within one
  vector. `scale_state` multiplies a slice of amplitudes by a scalar. With
  `specialize=True`, `loop_sn` and `loop_dn` pick a cheaper update for
  identity, Pauli, phase and real-valued matrices (see
  `specialization_label`); the result is the same either way. Passing a
  `KernelStats` records the time and bytes touched by each call; each
  `KernelRecord` reports a `bandwidth`.
- `statevec.qubit_ids.QubitIdTable`: gives each qubit name a register index
  `0, 1, 2, ...` in the order the names are first queried.
- `statevec.gates`: `generate_gate_set()` returns the one-qubit gates
  (Hadamard, square roots of X, Y and Z, T) and the gates used under a
  control (Z, Hadamard) as `(label, matrix)` pairs.
  `phase_shift_matrix(k)` returns `diag(1, exp(i*pi/2**k))`, the controlled
  phase of the quantum Fourier transform circuit, and
  `classical_fourier_transform` is a reference DFT to compare against.
- `statevec.errors`: `CommunicationError` and `check_result`, which raises
  it for any non-zero result code.

## Example

```python
from statevec.gates import generate_gate_set
from statevec.kernels import loop_sn

single, controlled = generate_gate_set()
name, hadamard = single[0]

state = [1 + 0j, 0j]
loop_sn(0, 1, state, state, 0, 1, hadamard, True, None)
print(state)  # both amplitudes equal 1/sqrt(2)
```

## What it does not do

statevec provides the pieces, not a complete simulator: there is no qubit
register class with gate methods, no measurement or noise model, no
circuit-text interpreter and no command-line program. Everything runs in a
single process; state vectors are not distributed across machines.