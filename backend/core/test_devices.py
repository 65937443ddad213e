"""Device variants and capability dispatch."""

import pytest

from core.config import HomeConfig, PowerPolicy
from core.devices import (
    Device,
    DeviceKind,
    Socket,
    Thermometer,
    device_kind,
    device_name,
    device_report,
    is_on,
    power_consumption,
    supports_power_control,
    temperature,
    turn_off,
    turn_on,
)


def _thermometer() -> Thermometer:
    return Thermometer("Test Thermometer", 22.5)


def _socket(on: bool = True) -> Socket:
    return Socket("Test Socket", is_on=on, rated_power=100.0)


# -----------------------------------------------------------------------------
# Socket
# -----------------------------------------------------------------------------


def test_socket_power_consumption_follows_switch() -> None:
    socket = _socket(on=True)
    assert socket.power_consumption() == 100.0

    socket.turn_off()
    assert socket.power_consumption() == 0.0

    socket.turn_on()
    assert socket.power_consumption() == 100.0


@pytest.mark.parametrize("rated", [0.0, 0.5, 60.0, 2500.0])
def test_off_socket_never_consumes(rated: float) -> None:
    assert Socket("S", is_on=False, rated_power=rated).power_consumption() == 0.0
    assert Socket("S", is_on=True, rated_power=rated).power_consumption() == rated


def test_turn_on_is_idempotent() -> None:
    socket = _socket(on=True)
    assert turn_on(socket) is True
    assert turn_on(socket) is True
    assert socket.is_on is True


def test_negative_rated_power_rejected_by_default() -> None:
    with pytest.raises(ValueError, match="cannot be negative"):
        Socket("Broken", is_on=True, rated_power=-1.0)


def test_negative_rated_power_clamped_when_configured() -> None:
    cfg = HomeConfig(negative_power_policy=PowerPolicy.CLAMP)
    socket = Socket("Broken", is_on=True, rated_power=-1.0, config=cfg)
    assert socket.rated_power == 0.0
    assert socket.power_consumption() == 0.0


def test_integer_rated_power_is_stored_as_float() -> None:
    socket = Socket("Lamp", is_on=True, rated_power=60)
    assert isinstance(socket.rated_power, float)


# -----------------------------------------------------------------------------
# Dispatch
# -----------------------------------------------------------------------------


def test_supports_power_control() -> None:
    assert supports_power_control(_socket()) is True
    assert supports_power_control(_thermometer()) is False


def test_is_on() -> None:
    assert is_on(_socket(on=True)) is True
    assert is_on(_socket(on=False)) is False
    assert is_on(_thermometer()) is None


def test_temperature_only_for_thermometers() -> None:
    assert temperature(_thermometer()) == 22.5
    assert temperature(Thermometer("Freezer", -18.0)) == -18.0
    assert temperature(_socket()) is None


def test_power_consumption_only_for_sockets() -> None:
    assert power_consumption(_socket(on=True)) == 100.0
    assert power_consumption(_socket(on=False)) == 0.0
    assert power_consumption(_thermometer()) is None


def test_thermometer_ignores_power_control() -> None:
    thermo = _thermometer()
    before = Thermometer(thermo.name, thermo.temperature)

    assert turn_on(thermo) is False
    assert turn_off(thermo) is False
    assert thermo == before


def test_turn_off_socket() -> None:
    socket = _socket(on=True)
    assert turn_off(socket) is True
    assert socket.is_on is False
    assert power_consumption(socket) == 0.0


def test_device_name_and_kind() -> None:
    devices: list[Device] = [_thermometer(), _socket()]
    assert [device_name(d) for d in devices] == ["Test Thermometer", "Test Socket"]
    assert [device_kind(d) for d in devices] == [DeviceKind.THERMOMETER, DeviceKind.SOCKET]
    assert device_kind(_socket()) == "socket"


# -----------------------------------------------------------------------------
# Reports
# -----------------------------------------------------------------------------


def test_socket_report() -> None:
    assert device_report(_socket(on=True)) == "Device: Test Socket, Status: ON, Power consumption: 100W"
    assert device_report(_socket(on=False)) == "Device: Test Socket, Status: OFF, Power consumption: 0W"


def test_socket_report_keeps_fractional_watts() -> None:
    socket = Socket("Charger", is_on=True, rated_power=12.5)
    assert socket.report() == "Device: Charger, Status: ON, Power consumption: 12.5W"


def test_thermometer_report() -> None:
    assert device_report(_thermometer()) == "Device: Test Thermometer, Temperature: 22.5°C"
    assert Thermometer("Porch", 20.0).report() == "Device: Porch, Temperature: 20°C"
    assert Thermometer("Freezer", -18.5).report() == "Device: Freezer, Temperature: -18.5°C"
