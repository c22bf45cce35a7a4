"""
Unit tests for the ``python -m docmaker`` entry point.

uvicorn is mocked; the tests only check how options reach the app.
"""

import os
from unittest.mock import patch

import pytest

from docmaker.__main__ import main, parse_args


@pytest.fixture
def clean_env(monkeypatch):
    """Register the settings with monkeypatch so main()'s writes are undone."""
    for name in ("PORT", "STORAGE_ROOT", "BASE_URL"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)


class TestParseArgs:
    """Tests for command line parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.host == "0.0.0.0"
        assert args.port is None
        assert args.storage_root is None
        assert args.base_url is None

    def test_all_options(self):
        args = parse_args(
            ["--port", "8080", "--storage-root", "/srv/docs", "--base-url", "http://x/"]
        )

        assert args.port == 8080
        assert args.storage_root == "/srv/docs"
        assert args.base_url == "http://x/"


class TestMain:
    """Tests for main()."""

    def test_runs_uvicorn_on_default_port(self, clean_env):
        with patch("docmaker.__main__.uvicorn.run") as mock_run:
            main([])

        mock_run.assert_called_once_with("docmaker.main:app", host="0.0.0.0", port=3000)

    def test_options_override_environment(self, clean_env):
        with patch("docmaker.__main__.uvicorn.run") as mock_run:
            main(["--port", "9000", "--storage-root", "/srv/docs", "--base-url", "http://d/"])

            assert os.environ["STORAGE_ROOT"] == "/srv/docs"
            assert os.environ["BASE_URL"] == "http://d/"

        mock_run.assert_called_once_with("docmaker.main:app", host="0.0.0.0", port=9000)
