"""Unit tests for the start_server and run_local entry points."""

import os
import unittest
from unittest.mock import call, patch

import run_local
import start_server


class TestStartServer(unittest.TestCase):
    """Tests for start_server script."""

    def test_defaults(self):
        env = {
            k: v
            for k, v in os.environ.items()
            if k not in ("PORT", "WEB_CONCURRENCY", "GUNICORN_THREADS", "GUNICORN_TIMEOUT")
        }
        with patch.dict(os.environ, env, clear=True):
            argv = start_server.gunicorn_argv()

        self.assertEqual(argv[1], "review_analytics.wsgi:application")
        self.assertEqual(argv[argv.index("--bind") + 1], "0.0.0.0:8000")
        self.assertEqual(argv[argv.index("--workers") + 1], "4")
        self.assertEqual(argv[argv.index("--timeout") + 1], "120")

    def test_environment_overrides(self):
        with patch.dict(
            os.environ, {"PORT": "9100", "WEB_CONCURRENCY": "8", "GUNICORN_TIMEOUT": "30"}
        ):
            argv = start_server.gunicorn_argv()

        self.assertIn("0.0.0.0:9100", argv)
        self.assertEqual(argv[argv.index("--workers") + 1], "8")
        self.assertEqual(argv[argv.index("--timeout") + 1], "30")

    @patch("start_server.run")
    def test_main_hands_argv_to_gunicorn(self, mock_run):
        with patch("sys.argv", []):
            start_server.main()
            self.assertEqual(start_server.sys.argv[0], "gunicorn")

        mock_run.assert_called_once_with()


class TestRunLocal(unittest.TestCase):
    """Tests for run_local script."""

    @patch("run_local.execute_from_command_line")
    def test_migrates_then_runs_server(self, mock_execute):
        with patch("sys.argv", ["run_local.py"]):
            run_local.main()

        mock_execute.assert_has_calls(
            [
                call(["run_local.py", "migrate", "--noinput"]),
                call(["run_local.py", "runserver"]),
            ]
        )
