"""Device variants and capability dispatch.

The variant set is closed: ``Device`` is a union, and every capability query
below matches over all of its members. Adding a variant means adding a case
to each function in this module.
"""

from dataclasses import InitVar, dataclass
from enum import StrEnum

from core.capabilities import power_status_line, temperature_line
from core.config import DEFAULT, HomeConfig, normalise_rated_power


class DeviceKind(StrEnum):
    THERMOMETER = "thermometer"
    SOCKET = "socket"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass
class Thermometer:
    """Temperature sensor. Any reading is valid, including negative ones."""

    name: str
    temperature: float  # °C

    def report(self) -> str:
        return temperature_line(self)


@dataclass
class Socket:
    """Switchable power outlet.

    ``rated_power`` is the draw when switched on, not a live reading: an
    off socket always consumes 0 W.
    """

    name: str
    is_on: bool
    rated_power: float  # W
    config: InitVar[HomeConfig] = DEFAULT

    def __post_init__(self, config: HomeConfig) -> None:
        self.rated_power = normalise_rated_power(self.rated_power, config)

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False

    def power_consumption(self) -> float:
        return self.rated_power if self.is_on else 0.0

    def report(self) -> str:
        return power_status_line(self)


type Device = Thermometer | Socket


# ---------------------------------------------------------------------------
# Capability dispatch
# ---------------------------------------------------------------------------


def device_kind(device: Device) -> DeviceKind:
    """Stable string tag for display and layout descriptions."""
    match device:
        case Thermometer():
            return DeviceKind.THERMOMETER
        case Socket():
            return DeviceKind.SOCKET


def device_name(device: Device) -> str:
    match device:
        case Thermometer(name=name) | Socket(name=name):
            return name


def device_report(device: Device) -> str:
    match device:
        case Thermometer():
            return device.report()
        case Socket():
            return device.report()


def supports_power_control(device: Device) -> bool:
    match device:
        case Socket():
            return True
        case Thermometer():
            return False


def is_on(device: Device) -> bool | None:
    match device:
        case Socket(is_on=state):
            return state
        case Thermometer():
            return None


def turn_on(device: Device) -> bool:
    """Switch the device on. Returns False when it has no power control."""
    match device:
        case Socket():
            device.turn_on()
            return True
        case Thermometer():
            return False


def turn_off(device: Device) -> bool:
    """Switch the device off. Returns False when it has no power control."""
    match device:
        case Socket():
            device.turn_off()
            return True
        case Thermometer():
            return False


def temperature(device: Device) -> float | None:
    match device:
        case Thermometer(temperature=reading):
            return reading
        case Socket():
            return None


def power_consumption(device: Device) -> float | None:
    match device:
        case Socket():
            return device.power_consumption()
        case Thermometer():
            return None
