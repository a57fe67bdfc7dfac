"""Enumerations shared across setkit."""

from enum import Enum


class Missing(Enum):
    """Absence marker returned when a search finds nothing.

    A dedicated enum member rather than ``None`` so that a set holding ``None``
    can still report a successful match of that element.
    """

    NOT_FOUND = "not_found"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


NOT_FOUND = Missing.NOT_FOUND
