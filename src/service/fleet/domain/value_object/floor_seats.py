import attrs


@attrs.frozen
class FloorSeats:
    """Declared geometry of one floor: rows plus seats on each side of the aisle"""

    floor_number: int
    num_rows: int
    seats_left: int
    seats_right: int

    @property
    def max_column(self) -> int:
        """Highest valid column index; the range admits one extra column for the aisle"""
        return self.seats_left + self.seats_right

    @property
    def aisle_column(self) -> int:
        return self.seats_left

    @property
    def row_width(self) -> int:
        return self.seats_left + 1 + self.seats_right

    @property
    def seat_count(self) -> int:
        return self.num_rows * (self.seats_left + self.seats_right)


DEFAULT_FLOOR_ROWS = 10
DEFAULT_FLOOR_SEATS_LEFT = 2
DEFAULT_FLOOR_SEATS_RIGHT = 2


def default_floor_seats(floor_number: int) -> FloorSeats:
    return FloorSeats(
        floor_number=floor_number,
        num_rows=DEFAULT_FLOOR_ROWS,
        seats_left=DEFAULT_FLOOR_SEATS_LEFT,
        seats_right=DEFAULT_FLOOR_SEATS_RIGHT,
    )
