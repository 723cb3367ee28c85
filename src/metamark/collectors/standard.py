"""Standard repeatability rule.

A marker type ``R`` is repeatable via container ``C`` when ``R`` carries
``Repeatable(container=C)`` and ``C`` declares a ``value`` field typed as
a tuple (or list) of ``R``. A container may also name its element type
directly with ``RepeatableGroup(element=R)``; the group's ``attribute``
then names the field to read.
"""

from __future__ import annotations

from loguru import logger

from ..model.markers import Marker, Repeatable, RepeatableGroup
from ..sources.attribute import AttributeMarkerSource
from ..sources.base import MarkerSource
from .base import (
    ContainerInfo,
    RepeatableMarkerCollector,
    field_names,
    sequence_fields,
)

VALUE_ATTRIBUTE = "value"


class StandardCollector(RepeatableMarkerCollector):
    """Collector implementing the standard repeatability rule.

    Args:
        source: Source of marker-type declarations, which must include
            system markers. Defaults to decorator-attached markers.
    """

    def __init__(self, source: MarkerSource | None = None) -> None:
        super().__init__()
        if source is None:
            source = AttributeMarkerSource(include_system=True)
        self._source = source

    def _find_container(self, marker_type: type[Marker]) -> ContainerInfo | None:
        for meta in self._source.meta_markers(marker_type):
            if isinstance(meta, RepeatableGroup):
                # Element type is explicit, so field hints are not needed
                if meta.attribute in field_names(marker_type):
                    return ContainerInfo(marker_type, meta.element, meta.attribute)
                logger.debug(
                    f"RepeatableGroup on {marker_type.__name__} names missing "
                    f"attribute '{meta.attribute}'"
                )

        element_type = sequence_fields(marker_type).get(VALUE_ATTRIBUTE)
        if element_type is None:
            return None

        for meta in self._source.meta_markers(element_type):
            if isinstance(meta, Repeatable) and meta.container is marker_type:
                return ContainerInfo(marker_type, element_type, VALUE_ATTRIBUTE)
        return None
