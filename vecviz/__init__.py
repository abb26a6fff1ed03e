"""vecviz - synthetic labeled vectors and their 3D projection.

Generates cluster-coherent high-dimensional vectors with randomized metadata
and reduces each one to a 3D point by block averaging.

Public API::

    from vecviz import generate, project, VectorItem, ProjectedVectorItem
"""

from loguru import logger

from .types import (
    ClusterInfo,
    FieldMetadata,
    InvalidArgument,
    Metadata,
    ProjectedVectorItem,
    VectorItem,
)
from .generator import CLUSTER_NAMES, generate
from .projection import SCALE, axis_blocks, project, project_vector
from .analysis import (
    DEFAULT_COLORS,
    analyze_metadata_fields,
    color_mapping,
    item_color,
    top_clusters,
)

logger.disable("vecviz")

__version__ = "0.1.0"
__all__ = [
    "ClusterInfo",
    "FieldMetadata",
    "InvalidArgument",
    "Metadata",
    "ProjectedVectorItem",
    "VectorItem",
    "CLUSTER_NAMES",
    "generate",
    "SCALE",
    "axis_blocks",
    "project",
    "project_vector",
    "DEFAULT_COLORS",
    "analyze_metadata_fields",
    "color_mapping",
    "item_color",
    "top_clusters",
]
