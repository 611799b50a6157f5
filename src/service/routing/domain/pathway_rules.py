"""
Usage-locking rules between a pathway and its options
"""

from typing import Optional, Set

from src.platform.exception.exceptions import NotFoundError
from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector
from src.service.routing.domain.entity.pathway_entity import Pathway
from src.service.routing.domain.entity.pathway_option_entity import PathwayOption


OPTION_NOT_FOUND = 'Pathway option not found'
OPTION_BELONGS_TO_DIFFERENT_PATHWAY = 'Option belongs to a different pathway'
CANNOT_REMOVE_DEFAULT_OPTION = 'Cannot remove the default option. Set another option as default first.'
CANNOT_REMOVE_LAST_OPTION = 'Cannot remove the last option from an active pathway'


def ensure_option_belongs(
    *, pathway_id: int, option_id: int, option: Optional[PathwayOption]
) -> PathwayOption:
    """
    Raises:
        NotFoundError: Option missing or soft-deleted
        FieldValidationError: Option attached to another pathway
    """
    if option is None:
        raise NotFoundError(OPTION_NOT_FOUND)

    if option.pathway_id != pathway_id:
        collector = FieldErrorCollector()
        collector.add_error(
            'optionId',
            FieldErrorCode.INVALID_REFERENCE,
            OPTION_BELONGS_TO_DIFFERENT_PATHWAY,
            {
                'optionId': option_id,
                'expectedPathwayId': pathway_id,
                'actualPathwayId': option.pathway_id,
            },
        )
        collector.throw_if_errors()

    return option


def ensure_option_removable(*, pathway: Pathway, option: PathwayOption, option_count: int) -> None:
    """
    The default option is never removed directly, and an active pathway keeps
    at least one option.
    """
    collector = FieldErrorCollector()
    if option.is_default:
        collector.add_error(
            'optionId',
            FieldErrorCode.BUSINESS_RULE_VIOLATION,
            CANNOT_REMOVE_DEFAULT_OPTION,
            option.id,
        )
        collector.throw_if_errors()

    if option_count <= 1 and pathway.active:
        collector.add_error(
            'active', FieldErrorCode.BUSINESS_RULE_VIOLATION, CANNOT_REMOVE_LAST_OPTION, True
        )
        collector.throw_if_errors()


def resolve_new_option_default(*, requested: Optional[bool], existing_count: int) -> bool:
    """The first option of a pathway becomes its default unless told otherwise"""
    if requested is not None:
        return requested
    return existing_count == 0


ORIGIN_NODE_NOT_FOUND = 'Origin node not found'
DESTINATION_NODE_NOT_FOUND = 'Destination node not found'


def ensure_nodes_exist(
    *,
    origin_node_id: Optional[int],
    destination_node_id: Optional[int],
    existing_node_ids: Set[int],
) -> None:
    """None skips the check for that end of the pathway"""
    collector = FieldErrorCollector()
    if origin_node_id is not None and origin_node_id not in existing_node_ids:
        collector.add_error(
            'originNodeId', FieldErrorCode.NOT_FOUND, ORIGIN_NODE_NOT_FOUND, origin_node_id
        )
    if destination_node_id is not None and destination_node_id not in existing_node_ids:
        collector.add_error(
            'destinationNodeId',
            FieldErrorCode.NOT_FOUND,
            DESTINATION_NODE_NOT_FOUND,
            destination_node_id,
        )
    collector.throw_if_errors()
