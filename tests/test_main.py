#!/usr/bin/env python3
"""
Tests for the build action CLI
"""

import os
import sys
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from main import app, main
from errors import ContextError, UnsupportedEventError

runner = CliRunner()


class TestCli(unittest.TestCase):
    """Test the 'build' command and the global --dir option"""

    def setUp(self):
        self.handler_patcher = patch("main.gh_build_handler")
        self.mock_handler = self.handler_patcher.start()

    def tearDown(self):
        self.handler_patcher.stop()

    def test_build_default_dir(self):
        result = runner.invoke(app, ["build"], env={"INPUT_DIR": None})

        self.assertEqual(result.exit_code, 0, result.output)
        self.mock_handler.assert_called_once_with(dir="./")
        self.assertIn("Build action complete", result.output)

    def test_build_with_dir(self):
        result = runner.invoke(app, ["--dir", "packages/geth", "build"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.mock_handler.assert_called_once_with(dir="packages/geth")

    def test_build_dir_from_env(self):
        result = runner.invoke(app, ["build"], env={"INPUT_DIR": "packages/nethermind"})

        self.assertEqual(result.exit_code, 0, result.output)
        self.mock_handler.assert_called_once_with(dir="packages/nethermind")

    def test_build_context_error(self):
        self.mock_handler.side_effect = ContextError()

        result = runner.invoke(app, ["build"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIsInstance(result.exception, ContextError)

    def test_unknown_command(self):
        result = runner.invoke(app, ["publish"])

        self.assertNotEqual(result.exit_code, 0)
        self.mock_handler.assert_not_called()


class TestMain(unittest.TestCase):
    """Test the entry point exit behavior"""

    @patch("main.gh_build_handler")
    def test_main_success(self, mock_handler):
        with patch.object(sys, "argv", ["dappnode-build-action", "build"]):
            main()

        mock_handler.assert_called_once()

    @patch("main.gh_build_handler")
    def test_main_unsupported_event_exits_1(self, mock_handler):
        mock_handler.side_effect = UnsupportedEventError("deployment")

        with patch.object(sys, "argv", ["dappnode-build-action", "build"]):
            with self.assertRaises(SystemExit) as cm:
                main()

        self.assertEqual(cm.exception.code, 1)

    @patch("main.gh_build_handler")
    def test_main_context_error_exits_1(self, mock_handler):
        mock_handler.side_effect = ContextError()

        with patch.object(sys, "argv", ["dappnode-build-action", "build"]):
            with self.assertRaises(SystemExit) as cm:
                main()

        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
