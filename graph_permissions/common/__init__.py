"""Common utilities for graph-permissions."""

from .logger import setup_logger, get_logger
from .config import load_config, load_typed_config, GraphPermissionsConfig

__all__ = [
    "GraphPermissionsConfig",
    "get_logger",
    "load_config",
    "load_typed_config",
    "setup_logger",
]
