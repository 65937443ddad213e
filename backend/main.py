"""Demo entry point - thin layer over the domain."""

import logging

from core import DEFAULT as DEFAULT_HOME_CONFIG
from core import AccessError, House, Reportable, Socket, Thermometer, render_report
from core.layout import build_house
from core.report import format_number
from data import SAMPLE_HOUSE

logging.basicConfig(level=DEFAULT_HOME_CONFIG.log_level, format=DEFAULT_HOME_CONFIG.log_format)
logging.getLogger("core.layout").setLevel(logging.INFO)


def demonstrate_dynamic_rooms_and_devices() -> House:
    """Build the sample house, then move things around."""
    print("\n=== Dynamic rooms and devices ===")
    house = build_house(SAMPLE_HOUSE)

    print("Initial house state:")
    print(house.report())

    removed_room = house.remove_room("Bedroom")
    print(f"Removed room: {removed_room.name}")

    living_room = house.room("Living Room")
    living_room.add_device(Socket("Ceiling Light", is_on=True, rated_power=20.0))
    removed_device = living_room.remove_device("TV Socket")
    print(f"Removed device: {removed_device.name}")

    print("\nFinal house state:")
    print(house.report())
    print(f"Total power consumption: {format_number(house.total_power_consumption())}W")
    return house


def demonstrate_error_handling() -> None:
    print("\n=== Error handling ===")
    house = House.empty("Error Handling Demo")
    try:
        house.device("Non-existent Room", "Some Device")
    except AccessError as e:
        print(f"Expected error: {e}")


def print_report(reportable: Reportable) -> None:
    print("\n=== Report ===")
    print(render_report(reportable))


def main() -> None:
    demonstrate_dynamic_rooms_and_devices()
    demonstrate_error_handling()

    print_report(Thermometer("Main Thermometer", 23.5))
    print_report(Socket("Main Socket", is_on=True, rated_power=100.0))


if __name__ == "__main__":
    main()
