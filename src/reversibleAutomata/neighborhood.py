"""Neighborhood extraction under null or periodic boundaries."""

from __future__ import annotations

import numpy as np

from .config import NULL, normalize_boundary
from .utils import int_to_bits


def config_bits(num_cells: int) -> np.ndarray:
    """Bit matrix of every configuration.

    Returns:
        np.ndarray: Shape (2**num_cells, num_cells), dtype int8; row ``c`` is
        the MSB-first bit string of configuration ``c`` (cell 0 leftmost).
    """
    configs = np.arange(1 << num_cells, dtype=np.int64)
    shifts = np.arange(num_cells - 1, -1, -1, dtype=np.int64)
    return ((configs[:, None] >> shifts[None, :]) & 1).astype(np.int8)


class NeighborhoodResolver:
    """Resolve the dependent neighbors of each cell.

    For offsets ``d`` in ``[-l_radius, r_radius]`` the neighbor of cell ``i``
    is ``i + d``. Periodic boundaries wrap modulo ``num_cells``; null
    boundaries read a constant 0 outside ``[0, num_cells)``.
    """

    def __init__(self, num_cells: int, l_radius: int, r_radius: int, boundary: str):
        self.num_cells = int(num_cells)
        self.l_radius = int(l_radius)
        self.r_radius = int(r_radius)
        self.boundary = normalize_boundary(boundary)
        self.num_neighbors = self.l_radius + self.r_radius + 1
        self._table: np.ndarray | None = None

    def neighbor_indices(self, cell_index: int) -> list[int]:
        """Neighbor cell indices left to right; ``-1`` marks a null-boundary zero."""
        out = []
        for d in range(-self.l_radius, self.r_radius + 1):
            j = cell_index + d
            if 0 <= j < self.num_cells:
                out.append(j)
            elif self.boundary == NULL:
                out.append(-1)
            else:
                out.append(j % self.num_cells)
        return out

    def neighborhood(self, cell_index: int, config: int | str) -> str:
        """Neighborhood bit string of ``cell_index`` in ``config``."""
        if isinstance(config, str):
            config_str = config
        else:
            config_str = "".join(str(b) for b in int_to_bits(config, self.num_cells).tolist())
        return "".join(
            "0" if j < 0 else config_str[j] for j in self.neighbor_indices(cell_index)
        )

    def table(self) -> np.ndarray:
        """Neighborhood values of every cell in every configuration.

        Returns:
            np.ndarray: Shape (num_cells, 2**num_cells), dtype int64. Cached,
            since cell positions and the boundary never change.
        """
        if self._table is not None:
            return self._table

        bits = config_bits(self.num_cells).astype(np.int64)
        table = np.zeros((self.num_cells, bits.shape[0]), dtype=np.int64)
        for i in range(self.num_cells):
            for p, j in enumerate(self.neighbor_indices(i)):
                if j < 0:
                    continue
                table[i] |= bits[:, j] << (self.num_neighbors - 1 - p)
        table.setflags(write=False)
        self._table = table
        return table
