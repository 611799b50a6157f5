"""
Unit of Work Pattern - one database session and transaction per use case

Architecture:
- UoW owns the session lifecycle
- UoW owns commit/rollback; leaving the block without commit rolls back
- Command repositories share the UoW session
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.fleet.app.interface.i_bus_seat_command_repo import IBusSeatCommandRepo
    from src.service.fleet.app.interface.i_seat_diagram_command_repo import (
        ISeatDiagramCommandRepo,
    )
    from src.service.routing.app.interface.i_node_command_repo import INodeCommandRepo
    from src.service.routing.app.interface.i_pathway_command_repo import IPathwayCommandRepo
    from src.service.routing.app.interface.i_pathway_option_command_repo import (
        IPathwayOptionCommandRepo,
    )
    from src.service.routing.app.interface.i_pathway_option_toll_command_repo import (
        IPathwayOptionTollCommandRepo,
    )


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work

    Usage:
        async with uow:
            diagram = await uow.seat_diagrams.get_by_id(seat_diagram_id=1, for_update=True)
            ...
            await uow.commit()
    """

    # Fleet repositories
    seat_diagrams: ISeatDiagramCommandRepo
    bus_seats: IBusSeatCommandRepo

    # Routing repositories
    nodes: INodeCommandRepo
    pathways: IPathwayCommandRepo
    pathway_options: IPathwayOptionCommandRepo
    pathway_option_tolls: IPathwayOptionTollCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy implementation of Unit of Work"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        from src.service.fleet.driven_adapter.repo.bus_seat_command_repo_impl import (
            BusSeatCommandRepoImpl,
        )
        from src.service.fleet.driven_adapter.repo.seat_diagram_command_repo_impl import (
            SeatDiagramCommandRepoImpl,
        )
        from src.service.routing.driven_adapter.repo.node_command_repo_impl import (
            NodeCommandRepoImpl,
        )
        from src.service.routing.driven_adapter.repo.pathway_command_repo_impl import (
            PathwayCommandRepoImpl,
        )
        from src.service.routing.driven_adapter.repo.pathway_option_command_repo_impl import (
            PathwayOptionCommandRepoImpl,
        )
        from src.service.routing.driven_adapter.repo.pathway_option_toll_command_repo_impl import (
            PathwayOptionTollCommandRepoImpl,
        )

        # Repositories share the request session
        self.seat_diagrams = SeatDiagramCommandRepoImpl(self.session)
        self.bus_seats = BusSeatCommandRepoImpl(self.session)
        self.nodes = NodeCommandRepoImpl(self.session)
        self.pathways = PathwayCommandRepoImpl(self.session)
        self.pathway_options = PathwayOptionCommandRepoImpl(self.session)
        self.pathway_option_tolls = PathwayOptionTollCommandRepoImpl(self.session)

        return await super().__aenter__()

    async def _commit(self):
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    """
    FastAPI dependency for Unit of Work

    Usage:
        async def update_seats(uow: AbstractUnitOfWork = Depends(get_unit_of_work)):
            async with uow:
                ...
                await uow.commit()
    """
    return SqlAlchemyUnitOfWork(session)
