from typing import Optional

import attrs


@attrs.frozen
class Node:
    """Terminal or stop referenced by pathways and tolls; read-only here"""

    id: int
    name: str
    code: Optional[str] = None
