"""Marker types and decorator-based attachment.

A marker type is a ``Marker`` subclass decorated with ``@marker``, which
turns it into a frozen dataclass. Marker instances compare and hash by
(type, field values), and double as decorators that attach themselves to
the decorated object:

    @marker
    class Tag(Marker):
        name: str = ""

    @Tag("service")
    class Handler:
        ...

    declared_markers(Handler)
    # (Tag(name='service'),)

Marker types can be decorated with markers too; those are the type's
meta-markers. Multi-valued attributes are declared as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, TypeVar

from ..core.exceptions import MarkerDefinitionError

# Attribute holding the markers attached directly to an object
MARKERS_ATTR = "__metamark_markers__"

T = TypeVar("T")
M = TypeVar("M", bound="Marker")


@dataclass(frozen=True)
class Marker:
    """Base class for all marker types.

    Attributes:
        system: Class-level flag for built-in markers that describe
            marker types themselves (e.g. ``Repeatable``). System markers
            are read by collectors but left out of resolved closures.
    """

    system: ClassVar[bool] = False

    @property
    def marker_type(self) -> type[Marker]:
        """The marker's type, used as its grouping key."""
        return type(self)

    def attributes(self) -> dict[str, Any]:
        """Return field values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __call__(self, target: T) -> T:
        attach(target, self)
        return target


def is_marker_type(obj: Any) -> bool:
    """Check whether ``obj`` is a marker type (a ``Marker`` subclass)."""
    return isinstance(obj, type) and issubclass(obj, Marker)


def marker(cls: type[M]) -> type[M]:
    """Class decorator declaring a marker type.

    Args:
        cls: A subclass of ``Marker``.

    Returns:
        The same class, converted into a frozen dataclass.

    Raises:
        MarkerDefinitionError: If ``cls`` is not a ``Marker`` subclass.
    """
    if not is_marker_type(cls):
        raise MarkerDefinitionError(
            f"@marker can only decorate Marker subclasses, got {cls!r}"
        )
    return dataclass(frozen=True)(cls)


def attach(target: Any, instance: Marker) -> None:
    """Attach a marker instance directly to ``target``.

    Decorators apply bottom-up, so the new marker is prepended to keep
    the markers in top-to-bottom source order.

    Raises:
        MarkerDefinitionError: If ``instance`` is not a marker or
            ``target`` cannot carry attributes.
    """
    if not isinstance(instance, Marker):
        raise MarkerDefinitionError(f"Not a marker instance: {instance!r}")
    try:
        existing = vars(target).get(MARKERS_ATTR, ())
        setattr(target, MARKERS_ATTR, (instance,) + tuple(existing))
    except (TypeError, AttributeError) as e:
        raise MarkerDefinitionError(
            f"Cannot attach {instance!r} to {target!r}: {e}"
        ) from e


def declared_markers(obj: Any) -> tuple[Marker, ...]:
    """Return the markers attached directly to ``obj``.

    Markers on base classes are not inherited; only the object's own
    namespace is read.
    """
    try:
        namespace = vars(obj)
    except TypeError:
        return ()
    return tuple(namespace.get(MARKERS_ATTR, ()))


# =============================================================================
# Built-in system markers
# =============================================================================


@marker
class Repeatable(Marker):
    """Declares the container type grouping repeated instances of the
    decorated marker type.

    The container is expected to hold the instances in a ``value``
    field typed as a tuple of the repeated type.
    """

    system: ClassVar[bool] = True

    container: type[Marker]

    def __post_init__(self) -> None:
        if not is_marker_type(self.container):
            raise MarkerDefinitionError(
                f"Repeatable container must be a marker type, got {self.container!r}"
            )


@marker
class RepeatableGroup(Marker):
    """Declares the decorated marker type as a container of ``element``.

    ``attribute`` names the field holding the contained instances.
    """

    system: ClassVar[bool] = True

    element: type[Marker]
    attribute: str = "value"

    def __post_init__(self) -> None:
        if not is_marker_type(self.element):
            raise MarkerDefinitionError(
                f"RepeatableGroup element must be a marker type, got {self.element!r}"
            )
