"""Marker source protocol.

A marker source answers which markers are directly present on a root
element and on a marker type's own declaration. The resolver depends
only on this protocol, so callers with their own introspection can plug
in a pre-extracted table instead of decorator-attached markers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..model.markers import Marker


@runtime_checkable
class MarkerSource(Protocol):
    """Protocol for enumerating directly present markers."""

    def declared_markers(self, element: Any) -> Sequence["Marker"]:
        """Markers directly present on ``element``, in declaration order."""
        ...

    def meta_markers(self, marker_type: type["Marker"]) -> Sequence["Marker"]:
        """Markers directly present on a marker type's declaration."""
        ...
