"""Unit tests for the request ID and process time middleware."""

import unittest
from unittest.mock import Mock, patch

from django.http import HttpResponse
from django.test import RequestFactory

from core.logging.context import get_request_id
from core.middleware import ProcessTimeMiddleware, RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Tests for RequestIDMiddleware."""

    def setUp(self):
        self.factory = RequestFactory()
        self.seen_request_ids = []

        def get_response(request):
            self.seen_request_ids.append(get_request_id())
            return HttpResponse("ok")

        self.middleware = RequestIDMiddleware(get_response)

    def test_generates_request_id(self):
        request = self.factory.get("/api/v1/restaurant-reviews/restaurants")

        response = self.middleware(request)

        request_id = response["X-Request-ID"]
        self.assertEqual(len(request_id), 36)
        self.assertEqual(request.request_id, request_id)
        self.assertEqual(self.seen_request_ids, [request_id])

    def test_reuses_incoming_request_id(self):
        request = self.factory.get("/", HTTP_X_REQUEST_ID="upstream-123")

        response = self.middleware(request)

        self.assertEqual(response["X-Request-ID"], "upstream-123")

    def test_clears_request_id_afterwards(self):
        self.middleware(self.factory.get("/"))
        self.assertIsNone(get_request_id())

    def test_clears_request_id_when_view_raises(self):
        middleware = RequestIDMiddleware(Mock(side_effect=RuntimeError("boom")))

        with self.assertRaises(RuntimeError):
            middleware(self.factory.get("/"))

        self.assertIsNone(get_request_id())


class TestProcessTimeMiddleware(unittest.TestCase):
    """Tests for ProcessTimeMiddleware."""

    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = ProcessTimeMiddleware(lambda _request: HttpResponse("ok"))

    def test_adds_process_time_header(self):
        response = self.middleware(self.factory.get("/"))
        self.assertGreaterEqual(float(response["X-Process-Time"]), 0.0)

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter")
    def test_logs_slow_requests(self, mock_perf_counter, mock_logger):
        mock_perf_counter.side_effect = [0.0, 2.5]

        response = self.middleware(self.factory.get("/api/v1/restaurant-reviews/analytics/tiers"))

        self.assertEqual(response["X-Process-Time"], "2.500000")
        mock_logger.warning.assert_called_once()
        self.assertEqual(mock_logger.warning.call_args[0][0], "slow_request")

    @patch("core.middleware.process_time.logger")
    def test_fast_requests_not_logged(self, mock_logger):
        self.middleware(self.factory.get("/"))
        mock_logger.warning.assert_not_called()
