"""
Seat Position Value Object

A seat's place in the coach, addressed as ``row-col`` (both 1-based).
"""

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define(frozen=True, order=True)
class SeatPosition:
    """Seat Position (Value Object), ordered row-major"""

    row: int
    col: int

    @property
    def seat_id(self) -> str:
        return f'{self.row}-{self.col}'

    @classmethod
    def from_seat_id(cls, seat_id: str) -> 'SeatPosition':
        try:
            row_str, col_str = seat_id.split('-')
            row, col = int(row_str), int(col_str)
        except (ValueError, AttributeError):
            raise DomainError(f'Invalid seat ID format: {seat_id}. Expected: row-col (e.g. 1-1)')
        if row < 1 or col < 1:
            raise DomainError(f'Invalid seat ID: {seat_id}. Row and column must be positive')
        return cls(row=row, col=col)

    def is_followed_by(self, other: 'SeatPosition') -> bool:
        """
        Row-major adjacency: ``other`` is the next seat in the same row, or the
        first seat of the next row.
        """
        same_row_next = other.row == self.row and other.col == self.col + 1
        wraps_to_next_row = other.row == self.row + 1 and other.col == 1
        return same_row_next or wraps_to_next_row

    def manhattan_distance(self, other: 'SeatPosition') -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)
