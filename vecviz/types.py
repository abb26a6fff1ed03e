"""Core record types for vecviz.

VectorItem          - one generated, labeled high-dimensional vector.
Metadata            - fixed-field metadata attached to every VectorItem.
ProjectedVectorItem - a VectorItem plus its 3D position.
ClusterInfo / FieldMetadata - aggregation records used for colouring.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

MetadataValue = Union[str, int, float, bool, List[str]]


class InvalidArgument(ValueError):
    """Raised when a size, vector or palette argument is out of its domain."""


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

# attribute name -> wire name
_WIRE_NAMES: Dict[str, str] = {
    "name": "name",
    "type": "type",
    "category": "category",
    "rating": "rating",
    "value": "value",
    "status": "status",
    "priority": "priority",
    "region": "region",
    "department": "department",
    "created": "created",
    "is_active": "isActive",
    "score": "score",
    "tags": "tags",
}
_ATTR_NAMES: Dict[str, str] = {v: k for k, v in _WIRE_NAMES.items()}


@dataclass(frozen=True)
class Metadata:
    """Randomized descriptive fields of a VectorItem.

    Schema
    ------
    name       : "<attribute> <greek name>", e.g. "Premium Sigma"
    type       : "Type A" … "Type J"
    category   : "Primary" … "Denary"
    rating     : int in [1, 5]
    value      : float in [10, 1000), two decimals
    status     : Active / Inactive / Pending / Archived / Draft
    priority   : Low / Medium / High / Critical
    region     : North / South / East / West / Central
    department : Sales / Marketing / Engineering / Support / Finance / HR
    created    : ISO-8601 UTC timestamp within the past year
    is_active  : bool (wire name ``isActive``)
    score      : int in [1, 100]
    tags       : 0–5 distinct attribute words
    """

    name: str
    type: str
    category: str
    rating: int
    value: float
    status: str
    priority: str
    region: str
    department: str
    created: str
    is_active: bool
    score: int
    tags: Tuple[str, ...] = ()

    @staticmethod
    def field_names() -> List[str]:
        """Wire names of every metadata field, in schema order."""
        return list(_WIRE_NAMES.values())

    def get(self, wire_name: str) -> Optional[MetadataValue]:
        """Look a field up by its wire name; None for unknown names."""
        attr = _ATTR_NAMES.get(wire_name)
        if attr is None:
            return None
        value = getattr(self, attr)
        if attr == "tags":
            return list(value)
        return value

    def to_dict(self) -> Dict[str, MetadataValue]:
        return {wire: self.get(wire) for wire in _WIRE_NAMES.values()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metadata":
        kwargs = {attr: data[wire] for attr, wire in _WIRE_NAMES.items() if wire in data}
        kwargs["tags"] = tuple(kwargs.get("tags", ()))
        return cls(**kwargs)


# ---------------------------------------------------------------------------
# VectorItem
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VectorItem:
    """One labeled vector produced by the generator.

    Schema
    ------
    id       : ordinal position within its batch, as a string ("0", "1", …)
    key      : 8-character alphanumeric token
    vector   : tuple of floats, length = batch dimensionality
    metadata : Metadata record
    clusters : 1–3 distinct cluster names; clusters[0] is the primary cluster
    """

    id: str
    key: str
    vector: Tuple[float, ...]
    metadata: Metadata
    clusters: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(set(self.clusters)) != len(self.clusters):
            raise InvalidArgument(f"clusters must be distinct, got {self.clusters!r}")

    # ------------------------------------------------------------------

    @property
    def np_vector(self):
        """Return the vector as a numpy float64 array."""
        import numpy as np
        return np.array(self.vector, dtype=np.float64)

    @property
    def primary_cluster(self) -> Optional[str]:
        return self.clusters[0] if self.clusters else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "vector": list(self.vector),
            "metadata": self.metadata.to_dict(),
            "clusters": list(self.clusters),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VectorItem":
        return cls(
            id=str(data["id"]),
            key=data["key"],
            vector=tuple(float(x) for x in data["vector"]),
            metadata=Metadata.from_dict(data["metadata"]),
            clusters=tuple(data["clusters"]),
        )


# ---------------------------------------------------------------------------
# ProjectedVectorItem
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectedVectorItem:
    """A VectorItem together with its derived 3D position."""

    item: VectorItem
    position: Tuple[float, float, float]
    primary_cluster: Optional[str] = None

    # Read-through accessors so a projected item can stand in for its source.

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def key(self) -> str:
        return self.item.key

    @property
    def vector(self) -> Tuple[float, ...]:
        return self.item.vector

    @property
    def metadata(self) -> Metadata:
        return self.item.metadata

    @property
    def clusters(self) -> Tuple[str, ...]:
        return self.item.clusters

    def to_dict(self) -> Dict[str, Any]:
        data = self.item.to_dict()
        data["position"] = list(self.position)
        if self.primary_cluster is not None:
            data["primaryCluster"] = self.primary_cluster
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


# ---------------------------------------------------------------------------
# Aggregation records
# ---------------------------------------------------------------------------


@dataclass
class ClusterInfo:
    """A cluster name and how many items list it."""

    name: str
    count: int


@dataclass
class FieldMetadata:
    """A colourable field: its distinct values and per-value counts."""

    name: str
    values: List[str]
    counts: Dict[str, int] = field(default_factory=dict)
