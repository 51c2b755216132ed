"""Unit tests for mapping domain errors onto HTTP errors."""

import pytest
from fastapi import HTTPException

from threadline.domain.error import (
    DomainError,
    InvariantViolationError,
    NotFoundError,
    ValidationError,
)
from threadline.domain.result import Err, Ok
from threadline.interface.error import to_http_exception, unwrap_or_raise


class TestErrorMapping:
    """Tests for to_http_exception() and unwrap_or_raise()."""

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (NotFoundError("Comment", "c1"), 404),
            (ValidationError("Comment text must not be empty"), 400),
            (InvariantViolationError("broken"), 500),
            (DomainError("unknown"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        # Act
        exc = to_http_exception(error)

        # Assert
        assert exc.status_code == status_code
        assert exc.detail == str(error)

    def test_unwrap_ok(self):
        assert unwrap_or_raise(Ok(3)) == 3

    def test_unwrap_err(self):
        with pytest.raises(HTTPException) as exc_info:
            unwrap_or_raise(Err(NotFoundError("Thread", "v1")))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Thread not found: v1"
