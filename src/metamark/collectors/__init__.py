"""Repeatable-container collectors.

Example:
    from metamark import collectors

    collector = collectors.standard()
    collector.repeated_type(Roles)        # Role
    collector.extract(Roles((Role("a"), Role("b"))))
    # [Role(name='a'), Role(name='b')]
"""

from .base import (
    ContainerInfo,
    RepeatableMarkerCollector,
    field_names,
    sequence_fields,
)
from .condition import ConditionCollector, ContainerPredicate, NoneCollector
from .registry import (
    CollectorRegistry,
    clear_caches,
    condition,
    full,
    get_default_collector_registry,
    none,
    standard,
)
from .standard import StandardCollector

__all__ = [
    "ContainerInfo",
    "RepeatableMarkerCollector",
    "field_names",
    "sequence_fields",
    "StandardCollector",
    "ConditionCollector",
    "ContainerPredicate",
    "NoneCollector",
    "CollectorRegistry",
    "get_default_collector_registry",
    "none",
    "standard",
    "full",
    "condition",
    "clear_caches",
]
