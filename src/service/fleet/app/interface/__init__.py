"""Fleet application layer interfaces (Ports)"""

from src.service.fleet.app.interface.i_bus_seat_command_repo import IBusSeatCommandRepo
from src.service.fleet.app.interface.i_bus_seat_query_repo import IBusSeatQueryRepo
from src.service.fleet.app.interface.i_seat_diagram_command_repo import ISeatDiagramCommandRepo
from src.service.fleet.app.interface.i_seat_diagram_query_repo import ISeatDiagramQueryRepo

__all__ = [
    'IBusSeatCommandRepo',
    'IBusSeatQueryRepo',
    'ISeatDiagramCommandRepo',
    'ISeatDiagramQueryRepo',
]
