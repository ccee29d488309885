"""Unit tests for start_server module."""

import os
import unittest
from unittest.mock import patch

import start_server


class TestStartServer(unittest.TestCase):
    """Tests for start_server script."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_gunicorn_args(self):
        """Test the command line built without overrides."""
        args = start_server.build_gunicorn_args()

        self.assertEqual(args[:2], ["gunicorn", "admin_service.wsgi:application"])
        self.assertEqual(args[args.index("--bind") + 1], "0.0.0.0:8000")
        self.assertEqual(args[args.index("--workers") + 1], "4")
        self.assertEqual(args[args.index("--threads") + 1], "2")

    @patch.dict(os.environ, {"SERVER_BIND": "127.0.0.1:9000", "SERVER_WORKERS": "1"})
    def test_environment_overrides(self):
        """Test bind address and worker count come from the environment."""
        args = start_server.build_gunicorn_args()

        self.assertEqual(args[args.index("--bind") + 1], "127.0.0.1:9000")
        self.assertEqual(args[args.index("--workers") + 1], "1")

    @patch("start_server.run")
    def test_main_configures_and_runs_gunicorn(self, mock_run):
        """Test that main() sets argv and starts Gunicorn."""
        with patch("start_server.sys") as mock_sys:
            start_server.main()

        mock_run.assert_called_once_with()
        self.assertEqual(mock_sys.argv[0], "gunicorn")
