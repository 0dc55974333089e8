"""Async Python client for the RezKit Tour Manager API."""

from .client import TourManager
from .core.config import BASE_URL, Settings
from .core.exceptions import (
    MalformedResponseError,
    NotFoundError,
    OrphanedNodeError,
    TourManagerError,
    ValidationError,
)
from .helpers import reconstruct_tree, walk_tree

__version__ = "1.0.0"

__all__ = [
    "BASE_URL",
    "MalformedResponseError",
    "NotFoundError",
    "OrphanedNodeError",
    "Settings",
    "TourManager",
    "TourManagerError",
    "ValidationError",
    "reconstruct_tree",
    "walk_tree",
]
