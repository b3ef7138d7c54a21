"""Building blocks for pure-state quantum simulation: gate matrices, qubit permutations, amplitude kernels and gate sets."""

__version__ = "2.0.0"
__all__ = ["errors", "gates", "kernels", "permutation", "qubit_ids", "tinymatrix"]