"""Command implementations for metamark CLI."""

from .inspect import add_inspect_arguments, handle_inspect, handle_types

__all__ = [
    "add_inspect_arguments",
    "handle_inspect",
    "handle_types",
]
