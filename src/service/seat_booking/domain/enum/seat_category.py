"""Seat Category Enum"""

from enum import StrEnum


class SeatCategory(StrEnum):
    STANDARD = 'standard'
    EXIT = 'exit'
