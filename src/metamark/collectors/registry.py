"""Collector singletons and the name-based collector registry."""

from __future__ import annotations

from typing import Callable

from ..core.exceptions import UnknownStrategyError
from .base import RepeatableMarkerCollector
from .condition import ConditionCollector, ContainerPredicate, NoneCollector
from .standard import StandardCollector

CollectorFactory = Callable[[], RepeatableMarkerCollector]


# =============================================================================
# Shared instances
# =============================================================================

_none: NoneCollector | None = None
_standard: StandardCollector | None = None
_full: ConditionCollector | None = None


def none() -> NoneCollector:
    """Collector that never expands containers."""
    global _none
    if _none is None:
        _none = NoneCollector()
    return _none


def standard() -> StandardCollector:
    """Collector following the ``Repeatable``/``RepeatableGroup`` rule."""
    global _standard
    if _standard is None:
        _standard = StandardCollector()
    return _standard


def _accept_all(container: type, name: str, element: type) -> bool:
    return True


def full() -> ConditionCollector:
    """Collector treating any marker-sequence field as a container."""
    global _full
    if _full is None:
        _full = ConditionCollector(_accept_all)
    return _full


def condition(predicate: ContainerPredicate) -> ConditionCollector:
    """Create a collector accepting container fields matching ``predicate``."""
    return ConditionCollector(predicate)


def clear_caches() -> None:
    """Clear the per-type caches of the shared collectors."""
    for collector in (_none, _standard, _full):
        if collector is not None:
            collector.clear_cache()


# =============================================================================
# Registry
# =============================================================================


class CollectorRegistry:
    """Registry mapping names to collector factories.

    Example:
        registry = CollectorRegistry()
        registry.register("standard", standard)
        collector = registry.get("standard")
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, CollectorFactory] = {}

    def register(
        self,
        name: str,
        factory: CollectorFactory,
        *,
        override: bool = False,
    ) -> None:
        """Register a collector factory.

        Raises:
            ValueError: If the name is taken and override=False.
        """
        key = name.lower()
        if key in self._factories and not override:
            raise ValueError(
                f"Collector '{name}' is already registered. "
                f"Use override=True to replace."
            )
        self._factories[key] = factory

    def unregister(self, name: str) -> bool:
        """Remove a registered collector."""
        key = name.lower()
        if key in self._factories:
            del self._factories[key]
            return True
        return False

    def get(self, name: str) -> RepeatableMarkerCollector:
        """Create the collector registered under ``name``.

        Raises:
            UnknownStrategyError: If the name is not registered.
        """
        factory = self._factories.get(name.lower())
        if factory is None:
            raise UnknownStrategyError("collector", name, self.list_collectors())
        return factory()

    def is_registered(self, name: str) -> bool:
        return name.lower() in self._factories

    def list_collectors(self) -> list[str]:
        """Get sorted list of registered collector names."""
        return sorted(self._factories.keys())


_default_registry: CollectorRegistry | None = None


def get_default_collector_registry() -> CollectorRegistry:
    """Get the default registry holding the built-in collectors."""
    global _default_registry
    if _default_registry is None:
        _default_registry = CollectorRegistry()
        _default_registry.register("none", none)
        _default_registry.register("standard", standard)
        _default_registry.register("full", full)
    return _default_registry
