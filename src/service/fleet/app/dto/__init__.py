"""Fleet application DTOs"""

from src.service.fleet.app.dto.seat_configuration_result import (
    SeatConfigurationResult,
    SeatsCreatedResult,
)

__all__ = ['SeatConfigurationResult', 'SeatsCreatedResult']
