"""Centralised model policies.

Every tunable that changes how the inventory behaves lives here.
Create a custom ``HomeConfig`` to tweak values for testing::

    cfg = HomeConfig(negative_power_policy=PowerPolicy.CLAMP)
    socket = Socket("Heater", is_on=True, rated_power=-5.0, config=cfg)
"""

from dataclasses import dataclass
from enum import StrEnum


class PowerPolicy(StrEnum):
    """What to do with a negative rated power at construction."""

    REJECT = "reject"
    CLAMP = "clamp"


@dataclass(frozen=True)
class HomeConfig:
    """All model tunables, grouped by category."""

    # --- Devices ---
    negative_power_policy: PowerPolicy = PowerPolicy.REJECT

    # --- Logging (main.py) ---
    log_level: str = "WARNING"
    log_format: str = "%(name)s | %(message)s"


DEFAULT = HomeConfig()


def normalise_rated_power(value: float, config: HomeConfig = DEFAULT) -> float:
    """Apply the configured negative-power policy to a rated power in watts."""
    if value >= 0:
        return float(value)
    match config.negative_power_policy:
        case PowerPolicy.REJECT:
            raise ValueError(f"Rated power cannot be negative: {value}W")
        case PowerPolicy.CLAMP:
            return 0.0
