# tests/test_errors.py
"""Tests for errors.py module."""

from errors import (
    INTERNAL_ERROR_MESSAGE,
    UPSTREAM_ERROR_MESSAGE,
    BlogApiError,
    InternalError,
    UpstreamError,
    ValidationError,
    error_body,
)


class TestErrorTaxonomy:
    """Tests for exception status codes and client-safe messages."""

    def test_base_defaults_to_500(self) -> None:
        """Test base error default status."""
        error = BlogApiError("Something")
        assert error.status_code == 500
        assert str(error) == "Something"

    def test_validation_error(self) -> None:
        """Test validation errors are 400 with the query message."""
        error = ValidationError()
        assert error.status_code == 400
        assert error.message == "Couldn't find query string"

    def test_upstream_error_hides_detail(self) -> None:
        """Test upstream detail is kept apart from the client message."""
        error = UpstreamError("HTTP 503 from upstream")
        assert error.status_code == 502
        assert error.message == UPSTREAM_ERROR_MESSAGE
        assert error.detail == "HTTP 503 from upstream"

    def test_internal_error(self) -> None:
        """Test internal errors are a generic 500."""
        error = InternalError()
        assert error.status_code == 500
        assert error.message == INTERNAL_ERROR_MESSAGE

    def test_all_are_blog_api_errors(self) -> None:
        """Test every kind shares the base handler."""
        for error in (ValidationError(), UpstreamError(), InternalError()):
            assert isinstance(error, BlogApiError)

    def test_error_body_shape(self) -> None:
        """Test error responses carry success=false and a message."""
        assert error_body("nope") == {"success": False, "message": "nope"}
