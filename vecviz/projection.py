"""Block-averaging projection to 3D for vecviz.

The n dimensions of a vector are split into three contiguous blocks; each
axis coordinate is the mean of its block, multiplied by a fixed scale.
The remainder of n / 3 goes to the x block first, then the y block.

    n = 9   ->  3, 3, 3
    n = 10  ->  4, 3, 3
    n = 11  ->  4, 4, 3

This is a layout aid, not a distance-preserving reduction.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from loguru import logger

from .types import InvalidArgument, ProjectedVectorItem, VectorItem

SCALE: float = 5.0
MIN_DIMENSIONS: int = 3

Block = Tuple[int, int]
Position = Tuple[float, float, float]


def axis_blocks(n: int) -> Tuple[Block, Block, Block]:
    """Half-open ``(start, stop)`` index ranges of the x, y and z blocks."""
    if n < MIN_DIMENSIONS:
        raise InvalidArgument(
            f"vector must have at least {MIN_DIMENSIONS} dimensions, got {n}"
        )
    base, rem = divmod(n, 3)
    x_len = base + (1 if rem > 0 else 0)
    y_len = base + (1 if rem > 1 else 0)
    return (0, x_len), (x_len, x_len + y_len), (x_len + y_len, n)


def _block_mean(values: List[float], block: Block) -> float:
    start, stop = block
    total = 0.0
    for v in values[start:stop]:
        total += v
    return total / (stop - start)


def project_vector(vector: Sequence[float], scale: float = SCALE) -> Position:
    """Map one vector to a scaled ``(x, y, z)`` point."""
    arr = np.asarray(vector, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidArgument(f"vector must be 1-D, got shape {arr.shape}")
    blocks = axis_blocks(arr.shape[0])
    values = arr.tolist()
    x, y, z = (_block_mean(values, b) * scale for b in blocks)
    return (x, y, z)


def project(items: Sequence[VectorItem], scale: float = SCALE) -> List[ProjectedVectorItem]:
    """Project every item; output has the input's length and order.

    The source items are left untouched. ``primary_cluster`` is a copy of
    ``clusters[0]``, or None when the item has no clusters.
    """
    projected = [
        ProjectedVectorItem(
            item=item,
            position=project_vector(item.vector, scale),
            primary_cluster=item.clusters[0] if item.clusters else None,
        )
        for item in items
    ]
    logger.debug(f"Projected {len(projected)} items to 3D (scale={scale})")
    return projected
