"""Shared utility helpers for bit encodings, formatting and progress."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def int_to_bits(i: int, n_bits: int) -> np.ndarray:
    """Convert an integer to an MSB-first bit vector.

    Args:
        i: Integer value to convert.
        n_bits: Number of bits in the output vector.

    Returns:
        np.ndarray: Bit vector of shape (n_bits,) with dtype int8.

    Example:
        >>> int_to_bits(5, 3).tolist()
        [1, 0, 1]
    """
    if n_bits < 1:
        raise ValueError("n_bits must be >= 1")
    s = np.binary_repr(int(i), width=n_bits)
    return np.array([int(c) for c in s], dtype=np.int8)


def bits_to_int(bits: Iterable[int]) -> int:
    """Convert an MSB-first bit vector (or ``"0101"`` string) to an integer."""
    val = 0
    for b in bits:
        val = (val << 1) | (int(b) & 1)
    return val


def to_binary_str(i: int, n_digits: int) -> str:
    """Fixed-width MSB-first binary string of ``i``."""
    return "".join(str(b) for b in int_to_bits(i, n_digits).tolist())


def rules_to_string(rules: Sequence[int]) -> str:
    """Format a rule vector as ``"[ 170 240 57 ]"``."""
    return "[ " + "".join(f"{int(r)} " for r in rules) + "]"


def matrix_to_string(A: np.ndarray) -> str:
    """Space-separated rows, one per line."""
    A = np.asarray(A)
    return "\n".join(" ".join(str(int(v)) for v in row) for row in A)


def polynomial_to_string(coeffs: Sequence[int]) -> str:
    """Render coefficients (``coeffs[i]`` multiplies ``x**i``) highest power first.

    Example:
        >>> polynomial_to_string([1, 0, 1, 1])
        'x³ + x² + 1'
    """
    coeffs = [int(c) for c in coeffs]
    degree = len(coeffs) - 1
    while degree > 0 and coeffs[degree] == 0:
        degree -= 1
    if degree <= 0 and (not coeffs or coeffs[0] == 0):
        return "0"

    out = []
    for n in range(degree, -1, -1):
        c = coeffs[n]
        if c == 0:
            continue
        if n != degree:
            out.append(" - " if c < 0 else " + ")
        elif c < 0:
            out.append("-")
        if abs(c) != 1 or n == 0:
            out.append(str(abs(c)))
        if n != 0:
            out.append("x" + (str(n).translate(_SUPERSCRIPTS) if n > 1 else ""))
    return "".join(out)


def make_progress_iterator(
    total: int,
    *,
    progress: bool,
    progress_mode: str = "auto",
    progress_desc: str = "Search",
) -> tuple[Iterable[int], object | None, bool]:
    """Build an index iterator with optional progress UI.

    Returns:
        (iterator, progress_bar_object, use_print_progress)
    """
    if not progress:
        return range(total), None, False

    mode = progress_mode.strip().lower()
    if mode not in {"auto", "tqdm", "print"}:
        raise ValueError("progress_mode must be one of: auto, tqdm, print")

    if mode in {"auto", "tqdm"}:
        try:
            from tqdm.auto import tqdm  # type: ignore

            bar = tqdm(range(total), total=total, desc=progress_desc)
            return bar, bar, False
        except ImportError:
            if mode == "tqdm":
                raise
            return range(total), None, True

    return range(total), None, True
