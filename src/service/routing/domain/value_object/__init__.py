"""Routing domain value objects"""

from src.service.routing.domain.value_object.option_sync_input import OptionSyncInput
from src.service.routing.domain.value_object.toll_input import TollInput

__all__ = ['OptionSyncInput', 'TollInput']
