from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class PathwayOptionToll:
    pathway_option_id: int
    node_id: int
    sequence: int
    pass_time_min: int
    distance_km: Optional[float] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
