from typing import Optional

import attrs


@attrs.define
class TollInput:
    """Desired toll stop; the list order defines the sequence"""

    node_id: int
    pass_time_min: Optional[int] = None
    distance_km: Optional[float] = None
