"""
Seat Type Enum - passenger seat category
"""

from enum import StrEnum


class SeatType(StrEnum):
    REGULAR = 'regular'
    PREMIUM = 'premium'
    VIP = 'vip'
    BUSINESS = 'business'
    EXECUTIVE = 'executive'
