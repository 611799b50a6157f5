from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.fleet.app.interface.i_bus_seat_query_repo import IBusSeatQueryRepo
from src.service.fleet.app.interface.i_seat_diagram_query_repo import ISeatDiagramQueryRepo
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat


class ListDiagramSeatsUseCase:
    def __init__(
        self,
        *,
        seat_diagram_query_repo: ISeatDiagramQueryRepo,
        bus_seat_query_repo: IBusSeatQueryRepo,
    ):
        self.seat_diagram_query_repo = seat_diagram_query_repo
        self.bus_seat_query_repo = bus_seat_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        seat_diagram_query_repo: ISeatDiagramQueryRepo = Depends(
            Provide[Container.seat_diagram_query_repo]
        ),
        bus_seat_query_repo: IBusSeatQueryRepo = Depends(Provide[Container.bus_seat_query_repo]),
    ) -> Self:
        return cls(
            seat_diagram_query_repo=seat_diagram_query_repo,
            bus_seat_query_repo=bus_seat_query_repo,
        )

    @Logger.io
    async def execute(self, *, seat_diagram_id: int) -> List[BusSeat]:
        diagram = await self.seat_diagram_query_repo.get_by_id(seat_diagram_id=seat_diagram_id)
        if not diagram:
            raise NotFoundError(f'Seat diagram {seat_diagram_id} not found')

        return await self.bus_seat_query_repo.list_active_by_diagram(
            seat_diagram_id=seat_diagram_id
        )
