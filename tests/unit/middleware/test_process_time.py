"""Unit tests for ProcessTimeMiddleware."""

import unittest
from unittest.mock import patch

from django.http import HttpResponse
from django.test import RequestFactory

from core.constants import PROCESS_TIME_HEADER
from core.middleware.process_time import ProcessTimeMiddleware


class TestProcessTimeMiddleware(unittest.TestCase):
    """Test cases for ProcessTimeMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.request = RequestFactory().get("/api/v1/system/messages")
        self.middleware = ProcessTimeMiddleware(lambda _request: HttpResponse("OK"))

    def test_adds_process_time_header(self):
        """Test the header holds a non-negative duration in seconds."""
        response = self.middleware(self.request)

        self.assertGreaterEqual(float(response[PROCESS_TIME_HEADER]), 0)

    @patch("core.middleware.process_time.time.perf_counter")
    def test_header_uses_measured_duration(self, mock_perf_counter):
        """Test the header carries the measured duration with six decimals."""
        mock_perf_counter.side_effect = [10.0, 10.25]

        response = self.middleware(self.request)

        self.assertEqual(response[PROCESS_TIME_HEADER], "0.250000")

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter")
    def test_slow_request_logged(self, mock_perf_counter, mock_logger):
        """Test requests above the threshold are logged as warnings."""
        mock_perf_counter.side_effect = [0.0, 2.5]

        self.middleware(self.request)

        mock_logger.warning.assert_called_once()
        self.assertIn("/api/v1/system/messages", mock_logger.warning.call_args[0])

    @patch("core.middleware.process_time.logger")
    def test_fast_request_not_logged(self, mock_logger):
        """Test fast requests produce no warning."""
        self.middleware(self.request)

        mock_logger.warning.assert_not_called()
