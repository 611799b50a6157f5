"""Routing application DTOs"""

from src.service.routing.app.dto.pathway_detail import PathwayDetail

__all__ = ['PathwayDetail']
