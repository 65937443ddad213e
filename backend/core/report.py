"""Reporting capability shared by devices, rooms and houses."""

from collections.abc import Iterable
from typing import Protocol


class Reportable(Protocol):
    """Anything that can render a textual snapshot of its own state."""

    def report(self) -> str: ...


def format_number(value: float) -> str:
    """Natural decimal rendering: ``100.0`` -> ``"100"``, ``21.5`` -> ``"21.5"``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def render_report(item: Reportable) -> str:
    """Render a device, room or house interchangeably."""
    return item.report()


def join_reports(header: str, children: Iterable[Reportable]) -> str:
    """Header line followed by one newline-terminated block per child, in order."""
    return header + "".join(child.report() + "\n" for child in children)
