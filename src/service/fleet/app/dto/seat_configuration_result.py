import attrs


@attrs.frozen
class SeatConfigurationResult:
    seats_created: int
    seats_updated: int
    seats_deactivated: int
    total_active_seats: int


@attrs.frozen
class SeatsCreatedResult:
    seats_created: int
