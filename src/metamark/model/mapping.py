"""Marker mappings: closure nodes pairing a marker with its provenance.

A mapping records the marker that was discovered and the mapping one
step closer to the root whose expansion produced it (``source``). Root
markers have no source.

Two flavors exist:

- ``GenericMarkerMapping`` exposes the marker unchanged.
- ``ResolvedMarkerMapping`` additionally carries the attribute-resolution
  capability flag.

The flavors are never equal to each other, even for the same marker and
source.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, TypeVar

from ..core.exceptions import MarkerDefinitionError, UnknownStrategyError
from .markers import Marker

M = TypeVar("M", bound="MarkerMapping")

# Factory type: takes (source mapping or None, marker), returns a mapping
MappingFactory = Callable[[Optional[M], Marker], M]


class MarkerMapping(ABC):
    """Read-only closure node wrapping a resolved marker."""

    __slots__ = ("_marker", "_source")

    def __init__(self, marker: Marker, source: MarkerMapping | None = None):
        if not isinstance(marker, Marker):
            raise MarkerDefinitionError(f"Not a marker instance: {marker!r}")
        self._marker = marker
        self._source = source

    @property
    def marker(self) -> Marker:
        """The wrapped marker instance."""
        return self._marker

    @property
    def source(self) -> MarkerMapping | None:
        """The mapping whose expansion discovered this one, if any."""
        return self._source

    @property
    def marker_type(self) -> type[Marker]:
        return type(self._marker)

    @property
    def is_root(self) -> bool:
        """True if the marker is directly present on the root element."""
        return self._source is None

    @property
    @abstractmethod
    def is_resolved(self) -> bool:
        """Whether this mapping carries attribute-resolution capability."""
        ...

    def lineage(self) -> Iterator[MarkerMapping]:
        """Yield this mapping followed by its sources up to the root."""
        current: MarkerMapping | None = self
        while current is not None:
            yield current
            current = current.source

    def attribute_names(self) -> list[str]:
        return list(self._marker.attributes())

    def has_attribute(self, name: str) -> bool:
        return name in self._marker.attributes()

    def get_attribute(self, name: str) -> Any:
        """Get a marker attribute value.

        Raises:
            AttributeError: If the marker has no such attribute.
        """
        attributes = self._marker.attributes()
        if name not in attributes:
            raise AttributeError(
                f"{self.marker_type.__name__} has no attribute '{name}'"
            )
        return attributes[name]

    def _key(self) -> tuple:
        # Sources compare by identity
        return (self._marker, id(self._source))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))

    def __repr__(self) -> str:
        source = self._source.marker if self._source is not None else None
        return f"{type(self).__name__}(marker={self._marker!r}, source={source!r})"


class GenericMarkerMapping(MarkerMapping):
    """Mapping exposing its marker unchanged."""

    __slots__ = ()

    @property
    def is_resolved(self) -> bool:
        return False


class ResolvedMarkerMapping(MarkerMapping):
    """Mapping carrying the attribute-resolution capability flag.

    Args:
        source: The mapping that discovered this one, or None for roots.
        marker: The wrapped marker.
        resolve_attributes: Whether attribute resolution is enabled.
    """

    __slots__ = ("_resolve_attributes",)

    def __init__(
        self,
        source: MarkerMapping | None,
        marker: Marker,
        resolve_attributes: bool = True,
    ):
        super().__init__(marker, source)
        self._resolve_attributes = resolve_attributes

    @property
    def is_resolved(self) -> bool:
        return self._resolve_attributes

    def _key(self) -> tuple:
        return super()._key() + (self._resolve_attributes,)


# =============================================================================
# Named factories
# =============================================================================


def generic_mapping(
    source: GenericMarkerMapping | None, marker: Marker
) -> GenericMarkerMapping:
    """Mapping factory producing ``GenericMarkerMapping`` nodes."""
    return GenericMarkerMapping(marker, source)


def resolved_mapping(
    source: ResolvedMarkerMapping | None, marker: Marker
) -> ResolvedMarkerMapping:
    """Mapping factory producing ``ResolvedMarkerMapping`` nodes."""
    return ResolvedMarkerMapping(source, marker, True)


MAPPING_FACTORIES: dict[str, MappingFactory] = {
    "generic": generic_mapping,
    "resolved": resolved_mapping,
}


def get_mapping_factory(name: str) -> MappingFactory:
    """Look up a named mapping factory.

    Raises:
        UnknownStrategyError: If no factory has that name.
    """
    factory = MAPPING_FACTORIES.get(name.lower())
    if factory is None:
        raise UnknownStrategyError("mapping", name, sorted(MAPPING_FACTORIES))
    return factory
