"""Marker sources: where directly present markers come from."""

from .attribute import AttributeMarkerSource, get_default_source
from .base import MarkerSource
from .table import TableMarkerSource

__all__ = [
    "MarkerSource",
    "AttributeMarkerSource",
    "TableMarkerSource",
    "get_default_source",
]
