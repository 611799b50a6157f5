from typing import Any, List

from src.platform.exception.exceptions import FieldError, FieldValidationError


class FieldErrorCode:
    REQUIRED = 'REQUIRED'
    INVALID_VALUE = 'INVALID_VALUE'
    OUT_OF_RANGE = 'OUT_OF_RANGE'
    DUPLICATE = 'DUPLICATE'
    NOT_FOUND = 'NOT_FOUND'
    INVALID_REFERENCE = 'INVALID_REFERENCE'
    BUSINESS_RULE_VIOLATION = 'BUSINESS_RULE_VIOLATION'


class FieldErrorCollector:
    """
    Accumulates field errors so validators can report every violation at once.

    Usage:
        collector = FieldErrorCollector()
        collector.add_error('seats[0].floorNumber', FieldErrorCode.OUT_OF_RANGE, msg, 3)
        collector.throw_if_errors()
    """

    def __init__(self) -> None:
        self._errors: List[FieldError] = []

    def add_error(self, field: str, code: str, message: str, value: Any = None) -> None:
        self._errors.append(FieldError(field=field, code=code, message=message, value=value))

    @property
    def errors(self) -> List[FieldError]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def throw_if_errors(self) -> None:
        if self._errors:
            raise FieldValidationError(self._errors)
