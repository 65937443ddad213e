"""Error taxonomy for positional and named access."""


class AccessError(LookupError):
    """A requested room or device does not exist."""


class IndexOutOfBoundsError(AccessError):
    """Positional access past the end of a container."""

    def __init__(self, resource_type: str, requested_index: int, total_count: int) -> None:
        self.resource_type = resource_type
        self.requested_index = requested_index
        self.total_count = total_count
        super().__init__(
            f"{resource_type} index {requested_index} is out of bounds. "
            f"Total {resource_type.lower()}: {total_count}"
        )


class RoomNotFoundError(AccessError):
    """No room with the requested name exists in the house."""

    def __init__(self, room_name: str) -> None:
        self.room_name = room_name
        super().__init__(f"Room '{room_name}' not found")


class DeviceNotFoundError(AccessError):
    """The room exists, but holds no device with the requested name."""

    def __init__(self, device_name: str, room_name: str) -> None:
        self.device_name = device_name
        self.room_name = room_name
        super().__init__(f"Device '{device_name}' not found in room '{room_name}'")
