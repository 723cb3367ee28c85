"""Predicate-driven and no-op collectors."""

from __future__ import annotations

from typing import Callable

from ..model.markers import Marker
from .base import ContainerInfo, RepeatableMarkerCollector, sequence_fields

# Takes (container type, field name, element type), returns True to accept
ContainerPredicate = Callable[[type[Marker], str, type[Marker]], bool]


class ConditionCollector(RepeatableMarkerCollector):
    """Treats a marker type as a container when one of its fields qualifies.

    The first field, in declaration order, typed as a sequence of a
    marker type and accepted by ``predicate`` is the container attribute.
    No ``Repeatable`` declaration is required.

    Example:
        # Containers are types whose name ends in "List"
        collector = ConditionCollector(
            lambda container, name, element: container.__name__.endswith("List")
        )
    """

    def __init__(self, predicate: ContainerPredicate) -> None:
        super().__init__()
        self._predicate = predicate

    def _find_container(self, marker_type: type[Marker]) -> ContainerInfo | None:
        for name, element_type in sequence_fields(marker_type).items():
            if element_type is not None and self._predicate(marker_type, name, element_type):
                return ContainerInfo(marker_type, element_type, name)
        return None


class NoneCollector(RepeatableMarkerCollector):
    """Collector that never reports a container."""

    def _find_container(self, marker_type: type[Marker]) -> ContainerInfo | None:
        return None
