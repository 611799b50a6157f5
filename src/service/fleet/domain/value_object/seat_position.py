import attrs


@attrs.frozen
class SeatPosition:
    x: int  # column, 0-based
    y: int  # row, 1-based
