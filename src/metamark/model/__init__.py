"""Marker model types.

- Markers: the ``Marker`` base, ``@marker`` and built-in system markers
- Mappings: closure nodes and the named mapping factories
"""

from metamark.model.markers import (
    MARKERS_ATTR,
    Marker,
    Repeatable,
    RepeatableGroup,
    attach,
    declared_markers,
    is_marker_type,
    marker,
)
from metamark.model.mapping import (
    MAPPING_FACTORIES,
    GenericMarkerMapping,
    MappingFactory,
    MarkerMapping,
    ResolvedMarkerMapping,
    generic_mapping,
    get_mapping_factory,
    resolved_mapping,
)

__all__ = [
    # Markers
    "MARKERS_ATTR",
    "Marker",
    "Repeatable",
    "RepeatableGroup",
    "attach",
    "declared_markers",
    "is_marker_type",
    "marker",
    # Mappings
    "MAPPING_FACTORIES",
    "GenericMarkerMapping",
    "MappingFactory",
    "MarkerMapping",
    "ResolvedMarkerMapping",
    "generic_mapping",
    "get_mapping_factory",
    "resolved_mapping",
]
