import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.fleet_metrics import FleetMetrics
from src.service.fleet.app.dto.seat_configuration_result import SeatConfigurationResult
from src.service.fleet.domain.seat_configuration_validator import (
    validate_seat_geometry,
    validate_seat_payload,
)
from src.service.fleet.domain.seat_reconciler import reconcile_seats
from src.service.fleet.domain.value_object.seat_input import SeatInput


class UpdateSeatConfigurationUseCase:
    """
    Replace the seat layout of a diagram with the desired list of spaces.

    Existing rows are matched by (floor, x, y): matches are updated in place,
    unmatched inputs are created and untouched active rows are deactivated.
    Every write happens in one transaction; any failure leaves the diagram
    and its seats exactly as they were.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, fleet_metrics: FleetMetrics) -> None:
        self.uow = uow
        self.fleet_metrics = fleet_metrics

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        fleet_metrics: FleetMetrics = Depends(Provide[Container.fleet_metrics]),
    ) -> Self:
        return cls(uow=uow, fleet_metrics=fleet_metrics)

    @Logger.io
    async def execute(
        self, *, seat_diagram_id: int, seats: List[SeatInput]
    ) -> SeatConfigurationResult:
        """
        Steps:
        1. Field rules and duplicate detection (no database access)
        2. Lock and load the diagram
        3. Geometry validation against the diagram floors
        4. Reconcile against every persisted row of the diagram
        5. Apply creates, updates and deactivations
        6. Refresh the diagram aggregate and commit

        Raises:
            FieldValidationError: Payload or geometry violations, nothing written
            NotFoundError: Diagram missing or soft-deleted
        """
        start_time = time.perf_counter()

        try:
            validate_seat_payload(seats)

            async with self.uow:
                diagram = await self.uow.seat_diagrams.get_by_id(
                    seat_diagram_id=seat_diagram_id, for_update=True
                )
                if not diagram:
                    raise NotFoundError(f'Seat diagram {seat_diagram_id} not found')

                validate_seat_geometry(diagram, seats)

                existing = await self.uow.bus_seats.list_by_diagram(
                    seat_diagram_id=seat_diagram_id
                )
                plan = reconcile_seats(diagram=diagram, existing=existing, desired=seats)

                await self.uow.bus_seats.bulk_create(seats=plan.to_create)
                await self.uow.bus_seats.bulk_update(
                    seats=[*plan.to_update, *plan.to_deactivate]
                )

                total_active_seats = await self.uow.bus_seats.count_active(
                    seat_diagram_id=seat_diagram_id
                )
                await self.uow.seat_diagrams.update(
                    seat_diagram=diagram.record_seat_reconciliation(
                        total_active_seats=total_active_seats
                    )
                )
                await self.uow.commit()
        except Exception:
            self.fleet_metrics.record_seat_reconciliation_error()
            raise

        self.fleet_metrics.record_seat_reconciliation(
            created=plan.seats_created,
            updated=plan.seats_updated,
            deactivated=plan.seats_deactivated,
            duration=time.perf_counter() - start_time,
        )
        Logger.base.info(
            f'✅ [SEAT_CONFIG] diagram={seat_diagram_id} active={total_active_seats}'
        )

        return SeatConfigurationResult(
            seats_created=plan.seats_created,
            seats_updated=plan.seats_updated,
            seats_deactivated=plan.seats_deactivated,
            total_active_seats=total_active_seats,
        )
