"""Sample house layout for demos and tests."""

from core.layout import HouseLayout, RoomLayout, SocketLayout, ThermometerLayout


def create_sample_house() -> HouseLayout:
    """Create a hardcoded two-room house."""
    return HouseLayout(
        name="Dynamic Smart Home",
        rooms=[
            _living_room(),
            _bedroom(),
        ],
    )


def _living_room() -> RoomLayout:
    """Living room: TV socket and a wall thermometer."""
    return RoomLayout(
        name="Living Room",
        devices=[
            SocketLayout(name="TV Socket", is_on=True, rated_power=50.0),
            ThermometerLayout(name="Living Room Thermo", temperature=22.5),
        ],
    )


def _bedroom() -> RoomLayout:
    return RoomLayout(
        name="Bedroom",
        devices=[
            SocketLayout(name="Desk Lamp", is_on=False, rated_power=10.0),
        ],
    )


SAMPLE_HOUSE = create_sample_house()
