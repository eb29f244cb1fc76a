"""Room geometry: seat addressing, traversal order and neighbour lookup."""

from typing import List

from models.room import Room
from models.seating import Seat
from engine.errors import InvalidDimensions


class Grid:
    """A rows x columns matrix of seats addressed by (row, column)."""

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise InvalidDimensions(rows, columns)
        self.rows = rows
        self.columns = columns

    @classmethod
    def for_room(cls, room: Room) -> "Grid":
        return cls(room.rows, room.columns)

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    def contains(self, seat: Seat) -> bool:
        return 0 <= seat.row < self.rows and 0 <= seat.column < self.columns

    def traversal_order(self) -> List[Seat]:
        """Row-major, left-to-right, top-to-bottom."""
        return [Seat(r, c) for r in range(self.rows) for c in range(self.columns)]

    def neighbors(self, seat: Seat) -> List[Seat]:
        """Left and top neighbours, i.e. those already visited in traversal order."""
        result = []
        if seat.column > 0:
            result.append(Seat(seat.row, seat.column - 1))
        if seat.row > 0:
            result.append(Seat(seat.row - 1, seat.column))
        return result

    def all_neighbors(self, seat: Seat) -> List[Seat]:
        """Full 4-neighbour set (up, down, left, right) clipped to the grid."""
        candidates = [
            Seat(seat.row - 1, seat.column),
            Seat(seat.row + 1, seat.column),
            Seat(seat.row, seat.column - 1),
            Seat(seat.row, seat.column + 1),
        ]
        return [s for s in candidates if self.contains(s)]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"


def new_grid(rows: int, columns: int) -> Grid:
    return Grid(rows, columns)
