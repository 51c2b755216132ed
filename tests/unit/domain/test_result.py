"""Unit tests for command results."""

import pytest

from threadline.domain.error import NotFoundError
from threadline.domain.result import Err, Ok


class TestResult:
    """Tests for Ok and Err."""

    def test_ok_unwraps_to_value(self):
        assert Ok(3).unwrap() == 3
        assert Ok(3).is_ok

    def test_err_unwrap_raises_carried_error(self):
        # Arrange
        error = NotFoundError("Comment", "ghost")
        result = Err(error)

        # Act / Assert
        assert not result.is_ok
        with pytest.raises(NotFoundError) as raised:
            result.unwrap()
        assert raised.value is error
