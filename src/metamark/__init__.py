"""metamark - resolve meta-markers and repeatable markers into one closure.

Public API
----------
    from metamark import (
        Marker, marker, Repeatable,
        RepeatableMetaMarkedElement, generic_mapping,
    )

    @marker
    class Audited(Marker):
        pass

    @Audited()
    @marker
    class Role(Marker):
        name: str = ""

    @Role("admin")
    class Handler:
        ...

    element = RepeatableMetaMarkedElement.create(Handler, generic_mapping)
    element.get_marker(Audited)   # Audited(), found through Role
"""

from metamark.core import (
    Config,
    InvalidElementError,
    MarkerDefinitionError,
    MetamarkError,
    TargetImportError,
    UnknownStrategyError,
)
from metamark.model import (
    GenericMarkerMapping,
    MappingFactory,
    Marker,
    MarkerMapping,
    Repeatable,
    RepeatableGroup,
    ResolvedMarkerMapping,
    declared_markers,
    generic_mapping,
    get_mapping_factory,
    is_marker_type,
    marker,
    resolved_mapping,
)
from metamark.collectors import RepeatableMarkerCollector
from metamark.resolution import Closure, RepeatableMetaMarkedElement, resolve_closure
from metamark.sources import AttributeMarkerSource, MarkerSource, TableMarkerSource

__version__ = "0.1.0"

__all__ = [
    # Core
    "Config",
    "MetamarkError",
    "InvalidElementError",
    "MarkerDefinitionError",
    "UnknownStrategyError",
    "TargetImportError",
    # Model
    "Marker",
    "marker",
    "Repeatable",
    "RepeatableGroup",
    "declared_markers",
    "is_marker_type",
    "MarkerMapping",
    "GenericMarkerMapping",
    "ResolvedMarkerMapping",
    "MappingFactory",
    "generic_mapping",
    "resolved_mapping",
    "get_mapping_factory",
    # Resolution
    "RepeatableMarkerCollector",
    "Closure",
    "resolve_closure",
    "RepeatableMetaMarkedElement",
    # Sources
    "MarkerSource",
    "AttributeMarkerSource",
    "TableMarkerSource",
]
