"""Sample data and fixtures."""

from data.sample_house import SAMPLE_HOUSE

__all__ = ["SAMPLE_HOUSE"]
