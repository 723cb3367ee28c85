"""Closure resolution and the query surface over it."""

from .closure import Closure, resolve_closure
from .element import RepeatableMetaMarkedElement

__all__ = [
    "Closure",
    "resolve_closure",
    "RepeatableMetaMarkedElement",
]
