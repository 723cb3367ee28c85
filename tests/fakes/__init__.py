"""Shared marker fixtures for testing.

Example:
    from tests.fakes import Nested, Outer, Middle, Inner, Documented

    element = RepeatableMetaMarkedElement.create(Nested, generic_mapping)
"""

from .markers import (
    Bare,
    Branch,
    Documented,
    Guarded,
    Inner,
    Leaf,
    Middle,
    Mirror,
    Nested,
    Outer,
    Permission,
    Permissions,
    Ping,
    Pong,
    Rally,
    SelfMarked,
    Step,
    StepList,
    pipeline,
)

__all__ = [
    "Bare",
    "Branch",
    "Documented",
    "Guarded",
    "Inner",
    "Leaf",
    "Middle",
    "Mirror",
    "Nested",
    "Outer",
    "Permission",
    "Permissions",
    "Ping",
    "Pong",
    "Rally",
    "SelfMarked",
    "Step",
    "StepList",
    "pipeline",
]
