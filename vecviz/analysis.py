"""Colour-mapping helpers for vecviz.

top_clusters            - cluster names ranked by membership count
analyze_metadata_fields - metadata fields with few enough values to colour by
color_mapping           - value -> colour table for one field
item_color              - colour of one item under a mapping
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .types import ClusterInfo, FieldMetadata, InvalidArgument, ProjectedVectorItem, VectorItem

Item = Union[VectorItem, ProjectedVectorItem]

CLUSTERS_FIELD = "clusters"
MIN_CARDINALITY = 2

DEFAULT_COLORS: Tuple[str, ...] = (
    "#FF5733",  # red-orange
    "#33FF57",  # green
    "#3357FF",  # blue
    "#F033FF",  # purple
    "#FFFF33",  # yellow
    "#33FFF5",  # cyan
    "#FF33A8",  # pink
    "#A833FF",  # violet
    "#FF8C33",  # orange
    "#33FFB8",  # teal
)


def _as_label(value) -> Optional[str]:
    """String form used as a colour key; None for missing or list values."""
    if value is None or isinstance(value, (list, tuple, dict)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    # whole floats render without a fraction, as JSON numbers do in JS
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Clusters
# ---------------------------------------------------------------------------


def top_clusters(items: Sequence[Item], max_clusters: int = 10) -> List[ClusterInfo]:
    """Rank clusters by how many items list them (any position).

    Ties keep first-seen order.
    """
    counts: Counter = Counter()
    for item in items:
        counts.update(item.clusters)
    # Counter.most_common is stable for equal counts
    return [ClusterInfo(name, n) for name, n in counts.most_common(max_clusters)]


# ---------------------------------------------------------------------------
# Field discovery
# ---------------------------------------------------------------------------


def analyze_metadata_fields(
    items: Sequence[Item],
    max_cardinality: int = 10,
) -> List[FieldMetadata]:
    """Find metadata fields suitable for colouring.

    A field qualifies when its scalar values take between 2 and
    ``max_cardinality`` distinct string forms. A ``clusters`` entry is always
    placed first, listing up to ``max_cardinality`` cluster names.
    """
    if not items:
        return []

    field_counts: Dict[str, Counter] = {}
    for item in items:
        for name, value in item.metadata.to_dict().items():
            label = _as_label(value)
            if label is None:
                continue
            field_counts.setdefault(name, Counter())[label] += 1

    fields = [
        FieldMetadata(name=name, values=list(counts), counts=dict(counts))
        for name, counts in field_counts.items()
        if MIN_CARDINALITY <= len(counts) <= max_cardinality
    ]

    seen: Dict[str, None] = {}
    for item in items:
        for cluster in item.clusters:
            seen.setdefault(cluster, None)
    fields.insert(0, FieldMetadata(name=CLUSTERS_FIELD, values=list(seen)[:max_cardinality]))
    return fields


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------


def color_mapping(
    items: Sequence[Item],
    field: str,
    colors: Sequence[str] = DEFAULT_COLORS,
) -> Tuple[Dict[str, str], List[str]]:
    """Assign colours to the values of ``field``.

    Returns
    -------
    (mapping, values) - ``mapping`` is value -> colour, ``values`` the mapped
    values in assignment order. For ``clusters`` only the top
    ``len(colors)`` clusters are mapped; other fields cycle through
    ``colors``.
    """
    if not colors:
        raise InvalidArgument("colors must not be empty")

    if field == CLUSTERS_FIELD:
        ranked = top_clusters(items, len(colors))
        mapping = {c.name: colors[i % len(colors)] for i, c in enumerate(ranked)}
        return mapping, [c.name for c in ranked]

    values: Dict[str, None] = {}
    for item in items:
        label = _as_label(item.metadata.get(field))
        if label is not None:
            values.setdefault(label, None)
    mapping = {v: colors[i % len(colors)] for i, v in enumerate(values)}
    return mapping, list(values)


def item_color(
    item: Item,
    field: str,
    mapping: Dict[str, str],
    default: str,
) -> str:
    """Colour of ``item`` when colouring by ``field``."""
    if field == CLUSTERS_FIELD:
        for cluster in item.clusters:
            if cluster in mapping:
                return mapping[cluster]
        return default

    label = _as_label(item.metadata.get(field))
    if label is not None and label in mapping:
        return mapping[label]
    return default
