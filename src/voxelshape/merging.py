"""Consolidation of touching boxes into a smaller covering set."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from voxelshape.contracts import AABox

logger = logging.getLogger(__name__)


def _first_touching_pair(work: Sequence[AABox]) -> Optional[Tuple[int, int]]:
    count = len(work)
    for i in range(count):
        for j in range(count):
            if i == j:
                continue
            if work[i].touches(work[j]):
                return i, j
    return None


def merge_touching(boxes: Iterable[AABox]) -> List[AABox]:
    """Merge touching or overlapping boxes until no pair touches.

    Each round takes the first touching pair in ascending (i, j) order,
    replaces both with their bounding union (appended at the end) and
    restarts the scan.  The union is lossy: gaps between the pair become
    filled volume.
    """
    work: List[AABox] = list(boxes)
    merges = 0

    while True:
        pair = _first_touching_pair(work)
        if pair is None:
            break
        i, j = pair
        hi, lo = max(i, j), min(i, j)
        a = work.pop(hi)
        b = work.pop(lo)
        work.append(a.union(b))
        merges += 1

    logger.debug("Merged %d pair(s), %d box(es) remain", merges, len(work))
    return work


def union_volume(boxes: Iterable[AABox]) -> float:
    """Exact volume of the union of *boxes*.

    Uses coordinate compression: the distinct box bounds split space into a
    grid of cells, each of which is either fully inside some box or not.
    """
    solid = [b for b in boxes if b.volume > 0.0]
    if not solid:
        return 0.0

    arr = np.array([b.as_tuple() for b in solid], dtype=np.float64)
    xs = np.unique(np.concatenate([arr[:, 0], arr[:, 3]]))
    ys = np.unique(np.concatenate([arr[:, 1], arr[:, 4]]))
    zs = np.unique(np.concatenate([arr[:, 2], arr[:, 5]]))

    occupied = np.zeros((len(xs) - 1, len(ys) - 1, len(zs) - 1), dtype=bool)
    for x0, y0, z0, x1, y1, z1 in arr:
        i0, i1 = np.searchsorted(xs, x0), np.searchsorted(xs, x1)
        j0, j1 = np.searchsorted(ys, y0), np.searchsorted(ys, y1)
        k0, k1 = np.searchsorted(zs, z0), np.searchsorted(zs, z1)
        occupied[i0:i1, j0:j1, k0:k1] = True

    cell_volumes = (
        np.diff(xs)[:, None, None]
        * np.diff(ys)[None, :, None]
        * np.diff(zs)[None, None, :]
    )
    return float(cell_volumes[occupied].sum())
