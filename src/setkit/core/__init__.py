"""Core definitions: the absence sentinel, callable aliases and settings."""

from setkit.core.enums import Missing, NOT_FOUND
from setkit.core.types import Procedure, Predicate, Transform, Reducer
from setkit.core.config import Settings, settings

__all__ = [
    "Missing",
    "NOT_FOUND",
    "Procedure",
    "Predicate",
    "Transform",
    "Reducer",
    "Settings",
    "settings",
]
