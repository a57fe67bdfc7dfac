"""Set containers built on the functional primitives."""

from setkit.data.blockset import BlockSet

__all__ = ["BlockSet"]
