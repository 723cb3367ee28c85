"""Configuration management for metamark."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Main application configuration."""

    collector: str = "standard"  # Repeatable collector strategy name
    mapping: str = "generic"  # Mapping factory name ("generic" or "resolved")
    log_level: str = "WARNING"
    output_format: str = "tree"  # CLI output ("tree" or "json")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        if collector := os.environ.get("METAMARK_COLLECTOR"):
            config.collector = collector

        if mapping := os.environ.get("METAMARK_MAPPING"):
            config.mapping = mapping

        if level := os.environ.get("METAMARK_LOG_LEVEL"):
            config.log_level = level.upper()

        if output_format := os.environ.get("METAMARK_FORMAT"):
            config.output_format = output_format

        return config
