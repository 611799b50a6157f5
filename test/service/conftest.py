"""
In-memory Unit of Work for use case tests.

Every repository keeps its rows in a dict. The Unit of Work snapshots all
stores on enter, moves the snapshot forward on commit and restores it on
rollback, so a failed use case leaves the stores exactly as they were.
"""

import copy
from typing import Any, Dict, List, Optional, Set
from unittest.mock import MagicMock

import attrs
import pytest

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.metrics.fleet_metrics import FleetMetrics
from src.service.fleet.app.interface.i_bus_seat_command_repo import IBusSeatCommandRepo
from src.service.fleet.app.interface.i_seat_diagram_command_repo import ISeatDiagramCommandRepo
from src.service.fleet.domain.entity.bus_seat_entity import BusSeat
from src.service.fleet.domain.entity.seat_diagram_entity import SeatDiagram
from src.service.routing.app.interface.i_node_command_repo import INodeCommandRepo
from src.service.routing.app.interface.i_pathway_command_repo import IPathwayCommandRepo
from src.service.routing.app.interface.i_pathway_option_command_repo import (
    IPathwayOptionCommandRepo,
)
from src.service.routing.app.interface.i_pathway_option_toll_command_repo import (
    IPathwayOptionTollCommandRepo,
)
from src.service.routing.domain.entity.node_entity import Node
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption
from src.service.routing.domain.entity.pathway_option_toll_entity import PathwayOptionToll


class _InMemoryStore:
    def __init__(self) -> None:
        self.rows: Dict[int, Any] = {}
        self.next_id = 1

    def _insert(self, entity: Any) -> Any:
        stored = attrs.evolve(entity, id=self.next_id)
        self.rows[self.next_id] = stored
        self.next_id += 1
        return stored

    def seed(self, entity: Any) -> Any:
        return self._insert(entity)

    def snapshot(self) -> tuple:
        return copy.deepcopy(self.rows), self.next_id

    def restore(self, state: tuple) -> None:
        rows, next_id = state
        self.rows = copy.deepcopy(rows)
        self.next_id = next_id


# ============================ Fleet ============================


class InMemorySeatDiagramRepo(_InMemoryStore, ISeatDiagramCommandRepo):
    async def get_by_id(
        self, *, seat_diagram_id: int, for_update: bool = False
    ) -> Optional[SeatDiagram]:
        diagram = self.rows.get(seat_diagram_id)
        return diagram if diagram and diagram.deleted_at is None else None

    async def create(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        return self._insert(seat_diagram)

    async def update(self, *, seat_diagram: SeatDiagram) -> SeatDiagram:
        if seat_diagram.id not in self.rows:
            raise NotFoundError(f'Seat diagram {seat_diagram.id} not found')
        self.rows[seat_diagram.id] = seat_diagram
        return seat_diagram


class InMemoryBusSeatRepo(_InMemoryStore, IBusSeatCommandRepo):
    def __init__(self) -> None:
        super().__init__()
        self.fail_on_update: Optional[Exception] = None

    def for_diagram(self, seat_diagram_id: int) -> List[BusSeat]:
        return [s for _, s in sorted(self.rows.items()) if s.seat_diagram_id == seat_diagram_id]

    async def list_by_diagram(self, *, seat_diagram_id: int) -> List[BusSeat]:
        return self.for_diagram(seat_diagram_id)

    async def exists_for_diagram(self, *, seat_diagram_id: int) -> bool:
        return bool(self.for_diagram(seat_diagram_id))

    async def bulk_create(self, *, seats: List[BusSeat]) -> List[BusSeat]:
        return [self._insert(seat) for seat in seats]

    async def bulk_update(self, *, seats: List[BusSeat]) -> None:
        if self.fail_on_update is not None:
            raise self.fail_on_update
        for seat in seats:
            self.rows[seat.id] = seat

    async def deactivate_all(self, *, seat_diagram_id: int) -> int:
        active = [s for s in self.for_diagram(seat_diagram_id) if s.active]
        for seat in active:
            self.rows[seat.id] = attrs.evolve(seat, active=False)
        return len(active)

    async def count_active(self, *, seat_diagram_id: int) -> int:
        return sum(1 for s in self.for_diagram(seat_diagram_id) if s.active)


# ============================ Routing ============================


class InMemoryNodeRepo(_InMemoryStore, INodeCommandRepo):
    async def get_by_id(self, *, node_id: int) -> Optional[Node]:
        return self.rows.get(node_id)

    async def find_existing_ids(self, *, node_ids: List[int]) -> Set[int]:
        return {node_id for node_id in node_ids if node_id in self.rows}


class InMemoryPathwayRepo(_InMemoryStore, IPathwayCommandRepo):
    async def get_by_id(self, *, pathway_id: int, for_update: bool = False) -> Optional[Pathway]:
        pathway = self.rows.get(pathway_id)
        return pathway if pathway and pathway.deleted_at is None else None

    async def create(self, *, pathway: Pathway) -> Pathway:
        return self._insert(pathway)

    async def update(self, *, pathway: Pathway) -> Pathway:
        if pathway.id not in self.rows:
            raise NotFoundError(f'Pathway {pathway.id} not found')
        self.rows[pathway.id] = pathway
        return pathway


class InMemoryPathwayOptionRepo(_InMemoryStore, IPathwayOptionCommandRepo):
    def live(self, pathway_id: int) -> List[PathwayOption]:
        options = [
            o for o in self.rows.values() if o.pathway_id == pathway_id and o.deleted_at is None
        ]
        return sorted(options, key=lambda o: (o.sequence is None, o.sequence or 0, o.id))

    async def get_by_id(self, *, option_id: int) -> Optional[PathwayOption]:
        option = self.rows.get(option_id)
        return option if option and option.deleted_at is None else None

    async def list_by_ids(self, *, option_ids: List[int]) -> List[PathwayOption]:
        return [
            self.rows[i] for i in option_ids if i in self.rows and self.rows[i].deleted_at is None
        ]

    async def list_by_pathway(self, *, pathway_id: int) -> List[PathwayOption]:
        return self.live(pathway_id)

    async def create(self, *, option: PathwayOption) -> PathwayOption:
        return self._insert(option)

    async def update(self, *, option: PathwayOption) -> PathwayOption:
        if option.id not in self.rows:
            raise NotFoundError(f'Pathway option {option.id} not found')
        self.rows[option.id] = option
        return option

    async def soft_delete(self, *, option_id: int) -> None:
        self.rows[option_id] = self.rows[option_id].soft_delete()

    async def set_default(self, *, pathway_id: int, option_id: int) -> None:
        for option in self.live(pathway_id):
            self.rows[option.id] = attrs.evolve(option, is_default=option.id == option_id)


class InMemoryPathwayOptionTollRepo(_InMemoryStore, IPathwayOptionTollCommandRepo):
    def for_option(self, pathway_option_id: int) -> List[PathwayOptionToll]:
        tolls = [t for t in self.rows.values() if t.pathway_option_id == pathway_option_id]
        return sorted(tolls, key=lambda t: t.sequence)

    async def list_by_option(self, *, pathway_option_id: int) -> List[PathwayOptionToll]:
        return self.for_option(pathway_option_id)

    async def replace_for_option(
        self, *, pathway_option_id: int, tolls: List[PathwayOptionToll]
    ) -> List[PathwayOptionToll]:
        for toll in self.for_option(pathway_option_id):
            del self.rows[toll.id]
        return [self._insert(toll) for toll in tolls]

    async def update_pass_times(self, *, tolls: List[PathwayOptionToll]) -> None:
        for toll in tolls:
            self.rows[toll.id] = toll


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self) -> None:
        self.seat_diagrams = InMemorySeatDiagramRepo()
        self.bus_seats = InMemoryBusSeatRepo()
        self.nodes = InMemoryNodeRepo()
        self.pathways = InMemoryPathwayRepo()
        self.pathway_options = InMemoryPathwayOptionRepo()
        self.pathway_option_tolls = InMemoryPathwayOptionTollRepo()
        self.commits = 0
        self._snapshot: Dict[str, tuple] = {}

    def _stores(self) -> Dict[str, _InMemoryStore]:
        return {
            'seat_diagrams': self.seat_diagrams,
            'bus_seats': self.bus_seats,
            'nodes': self.nodes,
            'pathways': self.pathways,
            'pathway_options': self.pathway_options,
            'pathway_option_tolls': self.pathway_option_tolls,
        }

    def _take_snapshot(self) -> None:
        self._snapshot = {name: store.snapshot() for name, store in self._stores().items()}

    async def __aenter__(self) -> 'InMemoryUnitOfWork':
        self._take_snapshot()
        return self

    async def _commit(self) -> None:
        self.commits += 1
        self._take_snapshot()

    async def rollback(self) -> None:
        for name, store in self._stores().items():
            store.restore(self._snapshot[name])


@pytest.fixture
def uow() -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork()


@pytest.fixture
def fleet_metrics() -> MagicMock:
    return MagicMock(spec=FleetMetrics)
