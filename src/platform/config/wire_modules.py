"""
Wire Modules Configuration

Modules whose `depends` classmethods resolve `Provide[Container.x]` markers.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.fleet.app.command import update_seat_configuration_use_case
from src.service.fleet.app.query import (
    get_seat_configuration_use_case,
    get_seat_diagram_use_case,
    list_diagram_seats_use_case,
    list_seat_diagrams_use_case,
)
from src.service.routing.app.command import bulk_sync_pathway_options_use_case
from src.service.routing.app.query import (
    get_pathway_use_case,
    list_pathway_option_tolls_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    update_seat_configuration_use_case,
    get_seat_diagram_use_case,
    list_seat_diagrams_use_case,
    list_diagram_seats_use_case,
    get_seat_configuration_use_case,
    bulk_sync_pathway_options_use_case,
    get_pathway_use_case,
    list_pathway_option_tolls_use_case,
]
