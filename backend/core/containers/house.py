"""House - top-level container of rooms."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from core.containers.room import Room
from core.devices import Device
from core.errors import IndexOutOfBoundsError, RoomNotFoundError
from core.report import join_reports

logger = logging.getLogger(__name__)


class House:
    """Rooms keyed by a unique name, kept in insertion order.

    Every device operation resolves the room first and then delegates to it,
    so a missing room is always reported as ``RoomNotFoundError`` and a
    missing device inside an existing room as ``DeviceNotFoundError``.
    """

    def __init__(self, name: str, rooms: Mapping[str, Room] | Iterable[Room] | None = None) -> None:
        self.name = name
        self._rooms: dict[str, Room] = {}
        if isinstance(rooms, Mapping):
            for key, room in rooms.items():
                self.add_room(room, name=key)
        elif rooms is not None:
            for room in rooms:
                self.add_room(room)

    @classmethod
    def empty(cls, name: str) -> "House":
        return cls(name)

    def __repr__(self) -> str:
        return f"House(name={self.name!r}, rooms={list(self._rooms)!r})"

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, name: object) -> bool:
        return name in self._rooms

    def __iter__(self) -> Iterator[str]:
        return iter(self._rooms)

    def all_rooms(self) -> Mapping[str, Room]:
        """Read-only view of every room, keyed by name."""
        return MappingProxyType(self._rooms)

    # --- Lookup ---

    def get_room(self, name: str) -> Room | None:
        return self._rooms.get(name)

    def room(self, name: str) -> Room:
        try:
            return self._rooms[name]
        except KeyError:
            raise RoomNotFoundError(name) from None

    def room_at(self, index: int) -> Room:
        """Room at ``index`` in insertion order."""
        total = len(self._rooms)
        if not 0 <= index < total:
            raise IndexOutOfBoundsError("Room", index, total)
        return list(self._rooms.values())[index]

    def device(self, room_name: str, device_name: str) -> Device:
        return self.room(room_name).device(device_name)

    # --- Mutation ---

    def add_room(self, room: Room, name: str | None = None) -> Room | None:
        """Insert ``room`` under ``name`` (its own name by default).

        Returns the room previously stored under that name, if any.
        """
        key = room.name if name is None else name
        previous = self._rooms.get(key)
        self._rooms[key] = room
        if previous is None:
            logger.debug("House %r: added room %r", self.name, key)
        else:
            logger.debug("House %r: replaced room %r", self.name, key)
        return previous

    def remove_room(self, name: str) -> Room:
        """Remove a room, with all of its devices, and hand it back to the caller."""
        try:
            room = self._rooms.pop(name)
        except KeyError:
            raise RoomNotFoundError(name) from None
        logger.debug("House %r: removed room %r", self.name, name)
        return room

    # --- Capability operations ---

    def turn_on_device(self, room_name: str, device_name: str) -> bool:
        return self.room(room_name).turn_on_device(device_name)

    def turn_off_device(self, room_name: str, device_name: str) -> bool:
        return self.room(room_name).turn_off_device(device_name)

    def get_temperature(self, room_name: str, device_name: str) -> float | None:
        return self.room(room_name).get_temperature(device_name)

    def get_power_consumption(self, room_name: str, device_name: str) -> float | None:
        return self.room(room_name).get_power_consumption(device_name)

    def total_power_consumption(self) -> float:
        return sum((room.total_power_consumption() for room in self._rooms.values()), 0.0)

    # --- Reporting ---

    def report(self) -> str:
        return join_reports(f"=== Smart House: {self.name} ===\n", self._rooms.values())
