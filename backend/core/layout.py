"""Validated descriptions of a house and how to build one.

A layout is plain data: it can be written by hand, as in ``data.sample_house``,
and turned into the owning ``House`` -> ``Room`` -> ``Device`` tree with
``build_house``.
"""

import logging
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from core.containers import House, Room
from core.devices import Device, Socket, Thermometer

logger = logging.getLogger(__name__)


class ThermometerLayout(BaseModel):
    kind: Literal["thermometer"] = "thermometer"
    name: str
    temperature: float


class SocketLayout(BaseModel):
    kind: Literal["socket"] = "socket"
    name: str
    is_on: bool = False
    rated_power: float = Field(ge=0.0)


DeviceLayout = Annotated[ThermometerLayout | SocketLayout, Field(discriminator="kind")]


class RoomLayout(BaseModel):
    name: str
    devices: list[DeviceLayout] = Field(default_factory=list)


class HouseLayout(BaseModel):
    name: str
    rooms: list[RoomLayout] = Field(default_factory=list)


def build_device(layout: ThermometerLayout | SocketLayout) -> Device:
    match layout:
        case ThermometerLayout():
            return Thermometer(name=layout.name, temperature=layout.temperature)
        case SocketLayout():
            return Socket(name=layout.name, is_on=layout.is_on, rated_power=layout.rated_power)


def build_room(layout: RoomLayout) -> Room:
    room = Room(layout.name)
    for device_layout in layout.devices:
        if room.add_device(build_device(device_layout)) is not None:
            logger.warning("Room %r: duplicate device %r replaced", layout.name, device_layout.name)
    return room


def build_house(layout: HouseLayout) -> House:
    house = House.empty(layout.name)
    for room_layout in layout.rooms:
        if house.add_room(build_room(room_layout)) is not None:
            logger.warning("House %r: duplicate room %r replaced", layout.name, room_layout.name)
    logger.info(
        "Built house %r: %d rooms, %d devices",
        house.name,
        len(house),
        sum(len(room) for room in house.all_rooms().values()),
    )
    return house
