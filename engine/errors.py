"""Error taxonomy for seat allocation. Conflicts are results, not errors."""


class SeatAllocationError(ValueError):
    """Base class for failures that abort an allocation before any placement."""


class InvalidDimensions(SeatAllocationError):
    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        super().__init__(
            f"Room dimensions must be positive, got {rows} rows x {columns} columns"
        )


class NoStudents(SeatAllocationError):
    def __init__(self):
        super().__init__("Student pool is empty; nothing to allocate")


class InsufficientCapacity(SeatAllocationError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Room holds {available} seats but {required} students need seating"
        )
