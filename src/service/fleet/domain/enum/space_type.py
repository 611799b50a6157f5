"""
Space Type Enum - kind of cell occupying a seat diagram grid position
"""

from enum import StrEnum


class SpaceType(StrEnum):
    SEAT = 'seat'
    HALLWAY = 'hallway'
    BATHROOM = 'bathroom'
    EMPTY = 'empty'
    STAIRS = 'stairs'
