"""
Unit tests for FieldErrorCollector
"""

import pytest

from src.platform.exception.exceptions import FieldValidationError
from src.platform.exception.field_error_collector import FieldErrorCode, FieldErrorCollector


@pytest.mark.unit
class TestFieldErrorCollector:
    def test_no_errors_does_not_raise(self):
        collector = FieldErrorCollector()

        collector.throw_if_errors()

        assert collector.has_errors() is False

    def test_errors_raised_together_in_order(self):
        # Given
        collector = FieldErrorCollector()
        collector.add_error('seats[0].position.x', FieldErrorCode.OUT_OF_RANGE, 'Invalid column', 9)
        collector.add_error('seats[1].seatNumber', FieldErrorCode.REQUIRED, 'Seat number required')

        # When
        with pytest.raises(FieldValidationError) as exc_info:
            collector.throw_if_errors()

        # Then
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == 'Invalid column; Seat number required'
        assert exc_info.value.to_dict_list() == [
            {
                'field': 'seats[0].position.x',
                'code': 'OUT_OF_RANGE',
                'message': 'Invalid column',
                'value': 9,
            },
            {
                'field': 'seats[1].seatNumber',
                'code': 'REQUIRED',
                'message': 'Seat number required',
                'value': None,
            },
        ]
