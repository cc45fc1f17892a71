"""Integer matrix helpers and GF(2) polynomial reduction."""

from __future__ import annotations

import numpy as np


def is_square(A: np.ndarray) -> bool:
    A = np.asarray(A)
    return A.ndim == 2 and A.shape[0] == A.shape[1]


def characteristic_polynomial(A: np.ndarray) -> np.ndarray:
    """Characteristic polynomial by Souriau's (Faddeev-LeVerrier) method.

    Runs over plain integers; nothing is reduced modulo 2 here.

    Args:
        A: Square integer matrix of size n.

    Returns:
        np.ndarray: Coefficients of length n + 1, ``coeffs[i]`` multiplies
        ``x**i``; ``coeffs[n] == 1``.

    Raises:
        ValueError: If ``A`` is not square.
    """
    A = np.asarray(A, dtype=np.int64)
    if not is_square(A) or A.shape[0] == 0:
        raise ValueError("Cannot compute characteristic polynomial of a non-square matrix")

    n = A.shape[0]
    P = np.zeros(n + 1, dtype=np.int64)
    I = np.eye(n, dtype=np.int64)

    P[n] = 1
    C = A.copy()
    P[n - 1] = -np.trace(C)
    for k in range(2, n + 1):
        C = A @ (C + P[n - k + 1] * I)
        # the trace is an exact multiple of k
        P[n - k] = -(np.trace(C) // k)
    return P


def reduce_mod2(coeffs: np.ndarray) -> np.ndarray:
    """Map each coefficient to its parity (0 for even, 1 for odd)."""
    return (np.asarray(coeffs, dtype=np.int64) % 2).astype(np.int8)


def evaluate_at_one_mod2(coeffs: np.ndarray) -> int:
    return int(np.sum(np.asarray(coeffs, dtype=np.int64)) % 2)
