"""Marker source backed by a pre-extracted table."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..model.markers import Marker


class TableMarkerSource:
    """Answers marker lookups from a static table.

    Keys are elements or marker types; values are their directly present
    markers in declaration order. Keys missing from the table have no
    markers.

    Example:
        source = TableMarkerSource({
            "handler": [Tag("service")],
            Tag: [Documented()],
        })
    """

    def __init__(self, table: Mapping[Any, Sequence[Marker]]) -> None:
        self._table: dict[Any, tuple[Marker, ...]] = {
            key: tuple(markers) for key, markers in table.items()
        }

    def declared_markers(self, element: Any) -> Sequence[Marker]:
        return self._table.get(element, ())

    def meta_markers(self, marker_type: type[Marker]) -> Sequence[Marker]:
        return self._table.get(marker_type, ())

    def __len__(self) -> int:
        return len(self._table)
