"""Synthetic dataset generator for vecviz.

generate - build a batch of VectorItems whose vectors sit near one of ten
           per-call cluster centers, each carrying randomized metadata.

All randomness flows through a local ``numpy.random.Generator``; the global
numpy RNG is never touched.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from .types import InvalidArgument, Metadata, VectorItem

CLUSTER_NAMES = (
    "Group A", "Group B", "Group C", "Group D", "Group E",
    "Group F", "Group G", "Group H", "Group I", "Group J",
)

NAMES = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi", "Rho",
    "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
)

ATTRIBUTES = (
    "Small", "Medium", "Large", "Extra Large", "Compact", "Expanded", "Basic",
    "Advanced", "Premium", "Standard", "Custom", "Regular", "Special",
    "Limited", "Unlimited",
)

CATEGORIES = (
    "Primary", "Secondary", "Tertiary", "Quaternary", "Quinary", "Senary",
    "Septenary", "Octonary", "Nonary", "Denary",
)

TYPES = (
    "Type A", "Type B", "Type C", "Type D", "Type E",
    "Type F", "Type G", "Type H", "Type I", "Type J",
)

RATINGS = (1, 2, 3, 4, 5)
STATUSES = ("Active", "Inactive", "Pending", "Archived", "Draft")
PRIORITIES = ("Low", "Medium", "High", "Critical")
REGIONS = ("North", "South", "East", "West", "Central")
DEPARTMENTS = ("Sales", "Marketing", "Engineering", "Support", "Finance", "HR")

KEY_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
KEY_LENGTH = 8

CENTER_RANGE = 1.0
NOISE_AMPLITUDE = 0.25
ACTIVE_PROBABILITY = 0.8
CREATED_WINDOW = timedelta(days=365)

_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


# ---------------------------------------------------------------------------
# Typed random draws
# ---------------------------------------------------------------------------


def _pick_str(rng: np.random.Generator, items: Sequence[str]) -> str:
    return items[int(rng.integers(len(items)))]


def _pick_int(rng: np.random.Generator, items: Sequence[int]) -> int:
    return items[int(rng.integers(len(items)))]


def _pick_subset(
    rng: np.random.Generator,
    items: Sequence[str],
    min_items: int,
    max_items: int,
) -> List[str]:
    """Draw between ``min_items`` and ``max_items`` distinct entries.

    The size is uniform over the inclusive range; the entries are drawn
    uniformly without replacement, so the result never holds duplicates.
    """
    size = int(rng.integers(min_items, max_items + 1))
    order = rng.permutation(len(items))[:size]
    return [items[int(i)] for i in order]


def _random_key(rng: np.random.Generator, length: int = KEY_LENGTH) -> str:
    idx = rng.integers(len(KEY_ALPHABET), size=length)
    return "".join(KEY_ALPHABET[int(i)] for i in idx)


def _truncate(value: float, decimals: int) -> float:
    factor = 10 ** decimals
    return int(value * factor) / factor


# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------


def make_cluster_centers(rng: np.random.Generator, dimensions: int) -> np.ndarray:
    """One center per cluster name, components uniform in [-1, 1].

    Returns
    -------
    Read-only array of shape ``(len(CLUSTER_NAMES), dimensions)``; row ``i``
    is the center of ``CLUSTER_NAMES[i]``.
    """
    centers = rng.uniform(-CENTER_RANGE, CENTER_RANGE, size=(len(CLUSTER_NAMES), dimensions))
    centers.setflags(write=False)
    return centers


def make_metadata(rng: np.random.Generator, now: datetime) -> Metadata:
    """Populate every metadata field independently from its vocabulary."""
    age = rng.uniform(0.0, CREATED_WINDOW.total_seconds())
    created = now - timedelta(seconds=float(age))
    return Metadata(
        name=f"{_pick_str(rng, ATTRIBUTES)} {_pick_str(rng, NAMES)}",
        type=_pick_str(rng, TYPES),
        category=_pick_str(rng, CATEGORIES),
        rating=_pick_int(rng, RATINGS),
        value=_truncate(float(rng.uniform(10.0, 1000.0)), 2),
        status=_pick_str(rng, STATUSES),
        priority=_pick_str(rng, PRIORITIES),
        region=_pick_str(rng, REGIONS),
        department=_pick_str(rng, DEPARTMENTS),
        created=created.astimezone(timezone.utc).strftime(_TIMESTAMP_FORMAT),
        is_active=bool(rng.random() < ACTIVE_PROBABILITY),
        score=int(rng.integers(1, 101)),
        tags=tuple(_pick_subset(rng, ATTRIBUTES, 0, 5)),
    )


def _check_size(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def generate(
    count: int,
    dimensions: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> List[VectorItem]:
    """Generate ``count`` labeled vectors with cluster-coherent structure.

    Parameters
    ----------
    count      : number of items, >= 0.
    dimensions : length of every vector, >= 1 (>= 3 to be projectable).
    seed       : seed for a fresh ``numpy.random.default_rng``; ignored when
                 ``rng`` is given.
    rng        : explicit random source.
    now        : anchor of the ``created`` window (default: current UTC time).

    Returns
    -------
    List of ``count`` VectorItems in generation order with ids "0", "1", ….
    Identical ``seed`` and ``now`` yield identical output.
    """
    _check_size("count", count, 0)
    _check_size("dimensions", dimensions, 1)
    count, dimensions = int(count), int(dimensions)

    if rng is None:
        rng = np.random.default_rng(seed)
    if now is None:
        now = datetime.now(timezone.utc)

    centers = make_cluster_centers(rng, dimensions)
    center_index = {name: i for i, name in enumerate(CLUSTER_NAMES)}

    items: List[VectorItem] = []
    for i in range(count):
        clusters = _pick_subset(rng, CLUSTER_NAMES, 1, 3)
        center = centers[center_index[clusters[0]]]
        noise = rng.uniform(-NOISE_AMPLITUDE, NOISE_AMPLITUDE, size=dimensions)
        vector = center + noise

        items.append(
            VectorItem(
                id=str(i),
                key=_random_key(rng),
                vector=tuple(vector.tolist()),
                metadata=make_metadata(rng, now),
                clusters=tuple(clusters),
            )
        )

    logger.debug(f"Generated {count} items with dimensions={dimensions}, seed={seed}")
    return items
