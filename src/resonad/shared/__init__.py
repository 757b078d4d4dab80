"""Shared module.

Cross-cutting concerns: configuration, logging.
"""
from resonad.shared.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
