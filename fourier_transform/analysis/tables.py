"""Precomputed tables for the radix-2 decimation-in-time FFT.

Both tables depend only on the transform length ``N`` and are returned as
read-only arrays so they can be shared between concurrent transform calls.
"""

from __future__ import annotations

import numpy as np


def _check_length(n: int) -> int:
    n = int(n)
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"Transform length must be a power of two >= 1, got {n}")
    return n


def bit_reversal_table(n: int) -> np.ndarray:
    """Index permutation ``i -> reverse_bits(i, log2(n))`` for ``i = 0..n-1``.

    The permutation is an involution, so gathering with it (``x[table]``) is the
    same as swapping each pair ``(i, table[i])`` once.
    """
    n = _check_length(n)
    bits = n.bit_length() - 1
    idx = np.arange(n, dtype=np.intp)
    rev = np.zeros(n, dtype=np.intp)
    for b in range(bits):
        rev |= ((idx >> b) & 1) << (bits - 1 - b)
    rev.setflags(write=False)
    return rev


def twiddle_table(n: int) -> np.ndarray:
    r"""Twiddle factors ``W_N^k = exp(-2*pi*i*k/N)`` for ``k = 0..N/2-1``.

    Stage ``s`` of the butterfly (group size ``m = 2**s``) needs
    \(W_m^j = W_N^{j N/m}\), i.e. every ``N/m``-th entry of this table.
    Empty for ``N == 1``.
    """
    n = _check_length(n)
    k = np.arange(n // 2, dtype=float)
    tw = np.exp(-2j * np.pi * k / float(n))
    tw.setflags(write=False)
    return tw
