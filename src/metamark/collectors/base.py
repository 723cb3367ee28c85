"""Base class for repeatable-container collectors.

A collector decides whether a marker type is a *container* for some
repeated marker type, and extracts the contained instances from a
container marker. Subclasses only implement ``_find_container``; lookups
are cached per marker type.
"""

from __future__ import annotations

import collections.abc
import typing
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, fields, is_dataclass

from loguru import logger

from ..model.markers import Marker, is_marker_type


@dataclass(frozen=True)
class ContainerInfo:
    """How a container marker type holds its repeated instances.

    Attributes:
        container_type: The container marker type.
        element_type: The repeated marker type it groups.
        attribute: Name of the field holding the contained instances.
    """

    container_type: type[Marker]
    element_type: type[Marker]
    attribute: str


_SEQUENCE_ORIGINS = (list, collections.abc.Sequence)


def _sequence_element_type(hint: object) -> type[Marker] | None:
    """Return ``R`` for hints like ``tuple[R, ...]`` or ``list[R]``."""
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
        element = args[0]
    elif origin in _SEQUENCE_ORIGINS and len(args) == 1:
        element = args[0]
    else:
        return None

    return element if is_marker_type(element) else None


def field_names(marker_type: type) -> tuple[str, ...]:
    """Return the dataclass field names of a type, or () for other types."""
    if not is_dataclass(marker_type):
        return ()
    return tuple(f.name for f in fields(marker_type))


def _type_hints(marker_type: type) -> dict[str, object] | None:
    try:
        return typing.get_type_hints(marker_type)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug(f"Cannot resolve type hints of {marker_type.__name__}: {e}")
        return None


def has_unresolved_hints(marker_type: type) -> bool:
    """True if a dataclass type's field hints cannot be resolved (yet)."""
    return is_dataclass(marker_type) and _type_hints(marker_type) is None


def sequence_fields(marker_type: type[Marker]) -> dict[str, type[Marker] | None]:
    """Map each field of a marker type to its repeated element type.

    Fields not typed as a sequence of markers map to None. Unresolvable
    type hints (e.g. forward references to locals) yield an empty dict.

    Returns:
        Field name -> marker element type, in field declaration order.
    """
    if not is_dataclass(marker_type):
        return {}
    hints = _type_hints(marker_type)
    if hints is None:
        return {}
    return {
        f.name: _sequence_element_type(hints.get(f.name))
        for f in fields(marker_type)
    }


class RepeatableMarkerCollector(ABC):
    """Strategy for expanding container markers into repeated markers."""

    def __init__(self) -> None:
        self._cache: dict[type, ContainerInfo | None] = {}

    @abstractmethod
    def _find_container(self, marker_type: type[Marker]) -> ContainerInfo | None:
        """Determine the container relationship of ``marker_type``, if any."""
        ...

    def container_info(self, marker_type: type[Marker]) -> ContainerInfo | None:
        """Get (and cache) the container relationship of a marker type.

        A negative answer is not cached while the type's field hints are
        unresolvable, so a forward reference defined later is picked up.
        """
        if marker_type in self._cache:
            return self._cache[marker_type]

        info = self._find_container(marker_type) if is_marker_type(marker_type) else None
        if info is not None:
            logger.debug(
                f"{marker_type.__name__} contains {info.element_type.__name__} "
                f"via '{info.attribute}'"
            )
        elif is_marker_type(marker_type) and has_unresolved_hints(marker_type):
            return None
        self._cache[marker_type] = info
        return info

    def repeated_type(self, marker_type: type[Marker]) -> type[Marker] | None:
        """Return the repeated type a container type groups, or None."""
        info = self.container_info(marker_type)
        return info.element_type if info else None

    def is_container(self, marker_type: type[Marker]) -> bool:
        return self.container_info(marker_type) is not None

    def extract(self, container: Marker) -> list[Marker]:
        """Extract contained markers from a container, in declaration order.

        Returns an empty list when the marker is not a container or its
        attribute cannot be read as a sequence.
        """
        info = self.container_info(type(container))
        if info is None:
            return []

        values = getattr(container, info.attribute, None)
        if not isinstance(values, (tuple, list)):
            logger.debug(
                f"Attribute '{info.attribute}' of {type(container).__name__} "
                f"is not a sequence, nothing extracted"
            )
            return []
        return [v for v in values if isinstance(v, info.element_type)]

    def get_final_repeatable_markers(self, marker: Marker) -> list[Marker]:
        """Expand nested containers down to non-container markers.

        Example:
            # A holds two B, each B holds two C
            collector.get_final_repeatable_markers(a)
            # [c1, c2, c3, c4]
        """
        result: list[Marker] = []
        pending: deque[Marker] = deque([marker])
        while pending:
            current = pending.popleft()
            if self.is_container(type(current)):
                pending.extendleft(reversed(self.extract(current)))
            else:
                result.append(current)
        return result

    def get_all_repeatable_markers(self, marker: Marker) -> list[Marker]:
        """Return the marker and every nested contained marker, breadth-first."""
        result: list[Marker] = [marker]
        pending: deque[Marker] = deque([marker])
        while pending:
            contained = self.extract(pending.popleft())
            result.extend(contained)
            pending.extend(contained)
        return result

    def get_repeatable_markers(
        self, marker: Marker, marker_type: type[Marker]
    ) -> list[Marker]:
        """Return the markers of ``marker_type`` found in ``marker``'s nesting."""
        return [
            m for m in self.get_all_repeatable_markers(marker)
            if type(m) is marker_type
        ]

    def clear_cache(self) -> None:
        self._cache.clear()
