"""Centralized configuration using Pydantic Settings.

Defaults can be overridden via environment variables:
- ADJGRAPH_TRAVERSAL_STRATEGY=recursive
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Strategy = Literal["recursive", "iterative"]


class TraversalConfig(BaseSettings):
    """Traversal configuration.

    Environment variables prefixed with ADJGRAPH_TRAVERSAL_.

    ``strategy`` picks the default implementation for DFS, topological sort
    and cycle detection when the caller does not name one. The iterative
    variants keep stack depth independent of graph depth.
    """

    model_config = SettingsConfigDict(env_prefix="ADJGRAPH_TRAVERSAL_")

    strategy: Strategy = "iterative"


class AppConfig(BaseSettings):
    """Library configuration aggregating all sub-configs.

        config = get_config()
        print(config.traversal.strategy)

    Environment variables prefixed with ADJGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="ADJGRAPH_")

    traversal: TraversalConfig = Field(default_factory=TraversalConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
