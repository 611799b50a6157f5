from typing import Any, List

import attrs


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


@attrs.frozen
class FieldError:
    field: str
    code: str
    message: str
    value: Any = None


class FieldValidationError(CustomBaseError):
    """One or more field-level violations, reported together"""

    def __init__(self, errors: List[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__('; '.join(error.message for error in self.errors), 400)

    def to_dict_list(self) -> List[dict]:
        return [
            {'field': e.field, 'code': e.code, 'message': e.message, 'value': e.value}
            for e in self.errors
        ]
