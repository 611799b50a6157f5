from typing import List, Optional, Set

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.routing.app.interface.i_node_command_repo import INodeCommandRepo
from src.service.routing.domain.entity.node_entity import Node
from src.service.routing.driven_adapter.model.node_model import NodeModel
from src.service.routing.driven_adapter.repo.routing_model_mapper import node_model_to_entity


class NodeCommandRepoImpl(INodeCommandRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, node_id: int) -> Optional[Node]:
        model = await self.session.get(NodeModel, node_id)
        return node_model_to_entity(model) if model else None

    @Logger.io
    async def find_existing_ids(self, *, node_ids: List[int]) -> Set[int]:
        if not node_ids:
            return set()

        result = await self.session.execute(
            select(NodeModel.id).where(NodeModel.id.in_(set(node_ids)))
        )
        return set(result.scalars().all())
