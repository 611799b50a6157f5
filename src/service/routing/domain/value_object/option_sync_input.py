from typing import List, Optional

import attrs

from src.service.routing.domain.value_object.toll_input import TollInput


@attrs.define
class OptionSyncInput:
    """
    One entry of a bulk option sync.

    id present -> update of an existing option, absent -> create.
    tolls None keeps the option's current tolls; [] removes them all.
    """

    name: str
    distance_km: Optional[float] = None
    typical_time_min: Optional[int] = None
    avg_speed_kmh: Optional[float] = None
    description: Optional[str] = None
    is_default: Optional[bool] = None
    is_pass_through: bool = False
    pass_through_time_min: Optional[int] = None
    sequence: Optional[int] = None
    active: bool = True
    tolls: Optional[List[TollInput]] = None
    id: Optional[int] = None
