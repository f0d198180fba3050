"""Hosted backend access."""

from .backend import BackendClient, BackendError, BackendNotFoundError
from .changes import ChangeEvent, ChangeFeed, Subscription, diff_snapshots

__all__ = [
    "BackendClient",
    "BackendError",
    "BackendNotFoundError",
    "ChangeEvent",
    "ChangeFeed",
    "Subscription",
    "diff_snapshots",
]
