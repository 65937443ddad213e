"""Core domain model: devices, containers and reporting."""

from core.config import DEFAULT, HomeConfig, PowerPolicy
from core.containers import House, Room
from core.devices import Device, DeviceKind, Socket, Thermometer
from core.errors import AccessError, DeviceNotFoundError, IndexOutOfBoundsError, RoomNotFoundError
from core.report import Reportable, render_report

__all__ = [
    "DEFAULT",
    "AccessError",
    "Device",
    "DeviceKind",
    "DeviceNotFoundError",
    "HomeConfig",
    "House",
    "IndexOutOfBoundsError",
    "PowerPolicy",
    "Reportable",
    "Room",
    "RoomNotFoundError",
    "Socket",
    "Thermometer",
    "render_report",
]
