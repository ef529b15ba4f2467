"""Unit tests for exception handlers."""

import unittest
from unittest.mock import Mock, patch

from django.core.exceptions import PermissionDenied
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.views import APIView

from core.exceptions import (
    RestaurantNotFoundError,
    ReviewAnalyticsError,
    UnsupportedDatabaseError,
)
from core.exceptions.handlers import custom_exception_handler


class TestCustomExceptionHandler(unittest.TestCase):
    """Test cases for custom exception handler."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_request = Mock()
        self.mock_request.path = "/api/v1/restaurant-reviews/restaurants/1"
        self.mock_request.method = "GET"
        self.mock_request.META = {"REMOTE_ADDR": "127.0.0.1"}

        self.mock_view = Mock(spec=APIView)
        self.mock_view.request = self.mock_request

        self.context = {"view": self.mock_view, "request": self.mock_request}

    @patch("core.exceptions.handlers.get_request_id")
    def test_restaurant_not_found(self, mock_get_request_id):
        mock_get_request_id.return_value = "req-1"

        response = custom_exception_handler(RestaurantNotFoundError(42), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Restaurant with ID 42 not found")
        self.assertEqual(response.data["request_id"], "req-1")
        self.assertEqual(response["X-Request-ID"], "req-1")
        self.assertIn("timestamp", response.data)

    @patch("core.exceptions.handlers.get_request_id")
    def test_domain_error_uses_its_status_code(self, mock_get_request_id):
        mock_get_request_id.return_value = None

        response = custom_exception_handler(
            ReviewAnalyticsError("conflict", status_code=409), self.context
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["status"], 409)

    def test_unsupported_database_is_server_error(self):
        response = custom_exception_handler(
            UnsupportedDatabaseError("mysql"), self.context
        )
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertIn("mysql", response.data["message"])

    def test_drf_exceptions_pass_through(self):
        cases = [
            (NotFound("gone"), status.HTTP_404_NOT_FOUND),
            (ValidationError("bad"), status.HTTP_400_BAD_REQUEST),
        ]
        for exc, expected in cases:
            with self.subTest(exc=type(exc).__name__):
                response = custom_exception_handler(exc, self.context)
                self.assertEqual(response.status_code, expected)

    def test_django_http404_uses_service_body(self):
        response = custom_exception_handler(Http404("missing"), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["status"], 404)
        self.assertEqual(
            response.data["message"], "The requested resource was not found."
        )
        self.assertNotIn("detail", response.data)

    def test_django_permission_denied_uses_service_body(self):
        response = custom_exception_handler(PermissionDenied("no"), self.context)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["status"], 403)
        self.assertIn("timestamp", response.data)

    def test_unhandled_exception_hides_details(self):
        response = custom_exception_handler(RuntimeError("secret"), self.context)

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data["message"], "An internal server error occurred.")

    @patch("core.exceptions.handlers.logger")
    def test_client_errors_logged_as_warnings(self, mock_logger):
        custom_exception_handler(RestaurantNotFoundError(1), self.context)

        mock_logger.warning.assert_called_once()
        mock_logger.error.assert_not_called()
        self.assertEqual(mock_logger.warning.call_args.kwargs["status_code"], 404)
        self.assertNotIn("exc_info", mock_logger.warning.call_args.kwargs)

    @patch("core.exceptions.handlers.logger")
    def test_server_errors_logged_with_traceback(self, mock_logger):
        exc = RuntimeError("boom")

        custom_exception_handler(exc, self.context)

        mock_logger.error.assert_called_once()
        self.assertIs(mock_logger.error.call_args.kwargs["exc_info"], exc)

    def test_missing_view_falls_back_to_request(self):
        response = custom_exception_handler(
            RestaurantNotFoundError(1), {"request": self.mock_request}
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
