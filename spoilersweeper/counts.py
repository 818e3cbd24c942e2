from __future__ import annotations
import numpy as np

# Moore neighbourhood offsets, centre excluded
NEIGHBOR_OFFSETS = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0))


def adjacent_mine_counts(mask: np.ndarray) -> np.ndarray:
    """Count mines around every cell of a boolean (rows, columns) mask.

    The mask is zero-padded by one cell so edge cells only see the
    neighbours that exist; nothing wraps around. Mine cells get a count
    too, callers ignore it.
    """
    mask = np.asarray(mask, dtype=bool)
    rows, columns = mask.shape
    padded = np.pad(mask.astype(np.int8), 1)
    counts = np.zeros((rows, columns), dtype=np.int8)
    for dr, dc in NEIGHBOR_OFFSETS:
        counts += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + columns]
    return counts.astype(int)
