from typing import List

import attrs

from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption


@attrs.frozen
class PathwayDetail:
    pathway: Pathway
    options: List[PathwayOption]
