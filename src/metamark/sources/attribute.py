"""Marker source reading decorator-attached markers."""

from __future__ import annotations

from typing import Any, Sequence

from ..model.markers import Marker, declared_markers


class AttributeMarkerSource:
    """Reads markers attached with marker decorators.

    System markers (``Repeatable``, ``RepeatableGroup``) describe marker
    types rather than elements, so they are skipped unless
    ``include_system`` is set. Collectors use a system-inclusive source
    to read repeatability declarations.

    Example:
        source = AttributeMarkerSource()
        source.declared_markers(Handler)   # markers on Handler
        source.meta_markers(Tag)           # markers on the Tag type
    """

    def __init__(self, *, include_system: bool = False) -> None:
        self.include_system = include_system

    def declared_markers(self, element: Any) -> Sequence[Marker]:
        return self._filter(declared_markers(element))

    def meta_markers(self, marker_type: type[Marker]) -> Sequence[Marker]:
        return self._filter(declared_markers(marker_type))

    def _filter(self, markers: tuple[Marker, ...]) -> Sequence[Marker]:
        if self.include_system:
            return markers
        return tuple(m for m in markers if not m.system)

    def __repr__(self) -> str:
        return f"AttributeMarkerSource(include_system={self.include_system})"


_default_source: AttributeMarkerSource | None = None


def get_default_source() -> AttributeMarkerSource:
    """Get the shared source used when none is given to the resolver."""
    global _default_source
    if _default_source is None:
        _default_source = AttributeMarkerSource()
    return _default_source
