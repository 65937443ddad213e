"""Room - a named container of devices."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from core.devices import Device, device_name, power_consumption, temperature, turn_off, turn_on
from core.errors import DeviceNotFoundError, IndexOutOfBoundsError
from core.report import join_reports

logger = logging.getLogger(__name__)


class Room:
    """Devices keyed by a unique name, kept in insertion order.

    Inserting under a name that is already taken replaces the earlier device
    and hands it back. Positions reported by ``device_at`` follow insertion
    order and shift down when a device is removed.
    """

    def __init__(self, name: str, devices: Mapping[str, Device] | Iterable[Device] | None = None) -> None:
        self.name = name
        self._devices: dict[str, Device] = {}
        if isinstance(devices, Mapping):
            for key, device in devices.items():
                self.add_device(device, name=key)
        elif devices is not None:
            for device in devices:
                self.add_device(device)

    @classmethod
    def of(cls, name: str, *devices: Device) -> "Room":
        """Build a room from devices keyed by their own names."""
        return cls(name, devices)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={list(self._devices)!r})"

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, name: object) -> bool:
        return name in self._devices

    def __iter__(self) -> Iterator[str]:
        return iter(self._devices)

    def all_devices(self) -> Mapping[str, Device]:
        """Read-only view of every device, keyed by name."""
        return MappingProxyType(self._devices)

    # --- Lookup ---

    def get_device(self, name: str) -> Device | None:
        return self._devices.get(name)

    def device(self, name: str) -> Device:
        try:
            return self._devices[name]
        except KeyError:
            raise DeviceNotFoundError(name, self.name) from None

    def device_at(self, index: int) -> Device:
        """Device at ``index`` in insertion order."""
        total = len(self._devices)
        if not 0 <= index < total:
            raise IndexOutOfBoundsError("Device", index, total)
        return list(self._devices.values())[index]

    # --- Mutation ---

    def add_device(self, device: Device, name: str | None = None) -> Device | None:
        """Insert ``device`` under ``name`` (its own name by default).

        Returns the device previously stored under that name, if any.
        """
        key = device_name(device) if name is None else name
        previous = self._devices.get(key)
        self._devices[key] = device
        if previous is None:
            logger.debug("Room %r: added device %r", self.name, key)
        else:
            logger.debug("Room %r: replaced device %r", self.name, key)
        return previous

    def remove_device(self, name: str) -> Device:
        """Remove a device and hand it back to the caller."""
        try:
            device = self._devices.pop(name)
        except KeyError:
            raise DeviceNotFoundError(name, self.name) from None
        logger.debug("Room %r: removed device %r", self.name, name)
        return device

    # --- Capability operations ---

    def turn_on_device(self, name: str) -> bool:
        """True when the device supports power control and is now on."""
        return turn_on(self.device(name))

    def turn_off_device(self, name: str) -> bool:
        return turn_off(self.device(name))

    def get_temperature(self, name: str) -> float | None:
        """Reading of the named device, or None if it cannot sense temperature."""
        return temperature(self.device(name))

    def get_power_consumption(self, name: str) -> float | None:
        return power_consumption(self.device(name))

    def total_power_consumption(self) -> float:
        readings = (power_consumption(d) for d in self._devices.values())
        return sum((w for w in readings if w is not None), 0.0)

    # --- Reporting ---

    def report(self) -> str:
        return join_reports(f"=== Room: {self.name} ===\n", self._devices.values())
