"""Routing application layer interfaces (Ports)"""

from src.service.routing.app.interface.i_node_command_repo import INodeCommandRepo
from src.service.routing.app.interface.i_pathway_command_repo import IPathwayCommandRepo
from src.service.routing.app.interface.i_pathway_option_command_repo import (
    IPathwayOptionCommandRepo,
)
from src.service.routing.app.interface.i_pathway_option_toll_command_repo import (
    IPathwayOptionTollCommandRepo,
)
from src.service.routing.app.interface.i_pathway_query_repo import IPathwayQueryRepo

__all__ = [
    'INodeCommandRepo',
    'IPathwayCommandRepo',
    'IPathwayOptionCommandRepo',
    'IPathwayOptionTollCommandRepo',
    'IPathwayQueryRepo',
]
