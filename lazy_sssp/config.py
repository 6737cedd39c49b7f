"""Configuration defaults for lazy_sssp components."""

import logging
import os
from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Defaults for the package logger."""

    # Level used when the environment does not override it
    level: int = logging.INFO

    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Environment variable holding a level name such as "DEBUG"
    env_var: str = "LAZY_SSSP_LOG_LEVEL"

    def resolve_level(self) -> int:
        """Return the level from the environment, falling back to ``level``."""
        name = os.environ.get(self.env_var, "").strip().upper()
        if not name:
            return self.level
        resolved = logging.getLevelName(name)
        if isinstance(resolved, int):
            return resolved
        return self.level


@dataclass
class GraphAdapterConfig:
    """Defaults for reading edge weights out of networkx graphs."""

    weight_key: str = "weight"

    # Weight assumed for edges without a ``weight_key`` attribute
    default_weight: float = 1.0


# Global configuration instances
LOGGING_CONFIG = LoggingConfig()
GRAPH_CONFIG = GraphAdapterConfig()
