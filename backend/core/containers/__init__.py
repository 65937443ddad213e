"""Room and House containers."""

from core.containers.house import House
from core.containers.room import Room

__all__ = ["House", "Room"]
