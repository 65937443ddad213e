"""Capability contracts a device variant may implement.

Variants satisfy these structurally; nothing inherits from them. The report
lines below are written against the contracts rather than the concrete
variants so any conforming object renders the same way.
"""

from typing import Protocol

from core.report import format_number


class SmartDevice(Protocol):
    @property
    def name(self) -> str: ...


class PowerControl(SmartDevice, Protocol):
    @property
    def is_on(self) -> bool: ...

    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...


class TemperatureSensor(SmartDevice, Protocol):
    @property
    def temperature(self) -> float: ...


class PowerConsumption(SmartDevice, Protocol):
    def power_consumption(self) -> float: ...


class MeteredOutlet(PowerControl, PowerConsumption, Protocol):
    """Switchable device that also reports its live draw."""


def power_status_line(device: MeteredOutlet) -> str:
    status = "ON" if device.is_on else "OFF"
    watts = format_number(device.power_consumption())
    return f"Device: {device.name}, Status: {status}, Power consumption: {watts}W"


def temperature_line(sensor: TemperatureSensor) -> str:
    return f"Device: {sensor.name}, Temperature: {format_number(sensor.temperature)}°C"
