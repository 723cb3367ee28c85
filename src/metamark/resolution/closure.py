"""Metadata closure resolution.

Builds the closure of marker mappings reachable from a root element by
breadth-first traversal:

1. Every marker directly present on the root is a declared mapping
   (``source=None``).
2. Each mapping is expanded in FIFO order. Container markers first yield
   their contained instances, then the marker type's meta-markers are
   added, all with the expanded mapping as their source.
3. Mappings are grouped by marker type in discovery order.

Example:
    # Root carries A; A holds two B; each B holds two C;
    # A, B and C are each meta-marked with D.
    closure = resolve_closure(Root, collectors.standard(), generic_mapping)
    [len(closure.by_type[t]) for t in (A, B, C, D)]
    # [1, 2, 4, 7]
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

from loguru import logger

from ..collectors.base import RepeatableMarkerCollector
from ..core.exceptions import InvalidElementError
from ..model.mapping import MappingFactory, MarkerMapping
from ..model.markers import Marker
from ..sources.attribute import get_default_source
from ..sources.base import MarkerSource

M = TypeVar("M", bound=MarkerMapping)


@dataclass(frozen=True, eq=False)
class Closure(Generic[M]):
    """Resolved, indexed marker mappings of a root element.

    Attributes:
        root: The element the closure was resolved from.
        mappings: Every mapping in discovery order.
        declared: Mappings of markers directly present on the root.
        by_type: Marker type -> mappings of that type, in discovery order.
        declared_by_type: Same grouping restricted to ``declared``.
    """

    root: Any
    mappings: tuple[M, ...]
    declared: tuple[M, ...]
    by_type: Mapping[type[Marker], tuple[M, ...]]
    declared_by_type: Mapping[type[Marker], tuple[M, ...]]

    def __len__(self) -> int:
        return len(self.mappings)


def _group_by_type(
    mappings: list[M], types: list[type[Marker]]
) -> Mapping[type[Marker], tuple[M, ...]]:
    grouped: dict[type[Marker], list[M]] = {}
    for mapping, marker_type in zip(mappings, types):
        grouped.setdefault(marker_type, []).append(mapping)
    return MappingProxyType({t: tuple(group) for t, group in grouped.items()})


def resolve_closure(
    element: Any,
    collector: RepeatableMarkerCollector,
    mapping_factory: MappingFactory,
    source: Optional[MarkerSource] = None,
) -> Closure:
    """Resolve the marker closure of ``element``.

    A meta-marker is skipped when the node being expanded already
    produced a mapping of the same type, or when an equal marker already
    appears on the node's own discovery path. Sibling branches still
    discover the same type independently.

    Args:
        element: The root element.
        collector: Strategy for expanding container markers. It reads
            repeatability declarations from its own source, not from
            ``source``; pair a table source with
            ``StandardCollector(source)`` when the table holds them.
        mapping_factory: Called as ``factory(source, marker)`` once per
            discovered marker.
        source: Marker source; defaults to decorator-attached markers.

    Returns:
        The immutable closure.

    Raises:
        InvalidElementError: If ``element`` is None.
    """
    if element is None:
        raise InvalidElementError("Cannot resolve markers of None")
    if source is None:
        source = get_default_source()

    # Arena of nodes; parents[i] is the index of node i's source
    nodes: list[MarkerMapping] = []
    markers: list[Marker] = []
    types: list[type[Marker]] = []
    parents: list[int | None] = []
    frontier: deque[int] = deque()

    def discover(parent: int | None, marker: Marker) -> None:
        source_mapping = nodes[parent] if parent is not None else None
        nodes.append(mapping_factory(source_mapping, marker))
        markers.append(marker)
        types.append(type(marker))
        parents.append(parent)
        frontier.append(len(nodes) - 1)

    def path_markers(index: int) -> list[Marker]:
        # Markers may hold lists, so compare by equality rather than hash
        seen: list[Marker] = []
        current: int | None = index
        while current is not None:
            seen.append(markers[current])
            current = parents[current]
        return seen

    for marker in source.declared_markers(element):
        discover(None, marker)
    declared_count = len(nodes)

    while frontier:
        index = frontier.popleft()
        marker_type = types[index]

        produced: set[type[Marker]] = set()
        for contained in collector.extract(markers[index]):
            discover(index, contained)
            produced.add(type(contained))

        on_path = path_markers(index)
        for meta in source.meta_markers(marker_type):
            meta_type = type(meta)
            if meta_type in produced or meta in on_path:
                continue
            produced.add(meta_type)
            discover(index, meta)

    declared = nodes[:declared_count]
    logger.debug(
        f"Resolved {len(nodes)} marker mappings "
        f"({declared_count} declared) for {element!r}"
    )
    return Closure(
        root=element,
        mappings=tuple(nodes),
        declared=tuple(declared),
        by_type=_group_by_type(nodes, types),
        declared_by_type=_group_by_type(declared, types[:declared_count]),
    )
