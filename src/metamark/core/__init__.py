"""Configuration and error types for metamark."""

from .config import Config
from .exceptions import (
    InvalidElementError,
    MarkerDefinitionError,
    MetamarkError,
    TargetImportError,
    UnknownStrategyError,
)

__all__ = [
    "Config",
    "MetamarkError",
    "InvalidElementError",
    "MarkerDefinitionError",
    "UnknownStrategyError",
    "TargetImportError",
]
