"""Reflection-style query surface over a resolved marker closure."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

from ..collectors.base import RepeatableMarkerCollector
from ..collectors.registry import standard
from ..collectors.standard import StandardCollector
from ..model.mapping import MappingFactory, MarkerMapping
from ..model.markers import Marker
from ..sources.base import MarkerSource
from .closure import Closure, resolve_closure

M = TypeVar("M", bound=MarkerMapping)
T = TypeVar("T", bound=Marker)


class RepeatableMetaMarkedElement(Generic[M]):
    """An element viewed through its resolved marker closure.

    The closure includes the element's own markers, the instances held by
    container markers, and meta-markers of every marker type reached,
    transitively. Resolution happens once, in the constructor.

    Lookups come in two scopes: the full closure (``get_marker``,
    ``get_markers_by_type``...) and the declared scope
    (``get_declared_*``), limited to markers directly present on the
    element. Iteration yields mappings in discovery order.

    Two instances are equal when they wrap the same element object and
    the same mapping factory object.

    Example:
        element = RepeatableMetaMarkedElement.create(Handler, generic_mapping)
        element.is_marker_present(Audited)   # via a meta-marker
        element.get_markers_by_type(Role)    # every Role, containers expanded
        element.get_declared_marker(Role)    # None if only found indirectly
    """

    def __init__(
        self,
        collector: RepeatableMarkerCollector,
        element: Any,
        mapping_factory: MappingFactory,
        *,
        source: Optional[MarkerSource] = None,
    ):
        """Resolve the closure of ``element``.

        Args:
            collector: Strategy for expanding container markers.
            element: The root element.
            mapping_factory: Called as ``factory(source, marker)`` per node.
            source: Marker source; defaults to decorator-attached markers.

        Raises:
            InvalidElementError: If ``element`` is None.
        """
        self._collector = collector
        self._element = element
        self._mapping_factory = mapping_factory
        self._closure: Closure[M] = resolve_closure(
            element, collector, mapping_factory, source
        )

    @classmethod
    def create(
        cls,
        element: Any,
        mapping_factory: MappingFactory,
        collector: Optional[RepeatableMarkerCollector] = None,
        *,
        source: Optional[MarkerSource] = None,
    ) -> "RepeatableMetaMarkedElement[M]":
        """Create an instance, using the standard collector by default.

        When ``source`` is given without a collector, the standard rule
        reads repeatability declarations from that same source.
        """
        if collector is None:
            collector = standard() if source is None else StandardCollector(source)
        return cls(collector, element, mapping_factory, source=source)

    @property
    def element(self) -> Any:
        """The original element, unchanged."""
        return self._element

    @property
    def mapping_factory(self) -> MappingFactory:
        return self._mapping_factory

    @property
    def collector(self) -> RepeatableMarkerCollector:
        return self._collector

    @property
    def closure(self) -> Closure[M]:
        return self._closure

    # -------------------------------------------------------------------------
    # Full closure
    # -------------------------------------------------------------------------

    def is_marker_present(self, marker_type: type[Marker]) -> bool:
        return marker_type in self._closure.by_type

    def get_marker(self, marker_type: type[T]) -> T | None:
        """Get the first-discovered marker of a type, or None."""
        mappings = self._closure.by_type.get(marker_type)
        return mappings[0].marker if mappings else None

    def get_markers_by_type(self, marker_type: type[T]) -> list[T]:
        """Get every marker of a type in discovery order."""
        return [m.marker for m in self._closure.by_type.get(marker_type, ())]

    def get_markers(self) -> list[Marker]:
        """Get every marker in the closure, in discovery order."""
        return [m.marker for m in self._closure.mappings]

    def get_mappings(self, marker_type: type[Marker]) -> list[M]:
        """Get the mappings of a marker type, with their provenance."""
        return list(self._closure.by_type.get(marker_type, ()))

    # -------------------------------------------------------------------------
    # Declared scope
    # -------------------------------------------------------------------------

    def is_declared_marker_present(self, marker_type: type[Marker]) -> bool:
        return marker_type in self._closure.declared_by_type

    def get_declared_marker(self, marker_type: type[T]) -> T | None:
        """Get the first marker of a type directly present on the element."""
        mappings = self._closure.declared_by_type.get(marker_type)
        return mappings[0].marker if mappings else None

    def get_declared_markers_by_type(self, marker_type: type[T]) -> list[T]:
        return [
            m.marker for m in self._closure.declared_by_type.get(marker_type, ())
        ]

    def get_declared_markers(self) -> list[Marker]:
        return [m.marker for m in self._closure.declared]

    # -------------------------------------------------------------------------
    # Protocols
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[M]:
        return iter(self._closure.mappings)

    def __len__(self) -> int:
        return len(self._closure)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, RepeatableMetaMarkedElement):
            return NotImplemented
        return (
            self._element is other._element
            and self._mapping_factory is other._mapping_factory
        )

    def __hash__(self) -> int:
        return hash((id(self._element), id(self._mapping_factory)))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(element={self._element!r}, "
            f"mappings={len(self)})"
        )
