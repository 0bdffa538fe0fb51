"""Tests for the ccr-config entry point."""

from unittest.mock import patch

import pytest

from ccr_config.cli import main


class TestMain:
    def test_exits_with_setup_status(self) -> None:
        with (
            patch("sys.argv", ["ccr-config"]),
            patch("ccr_config.cli.setup.run_setup", return_value=0) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 0
        mock_run.assert_called_once_with()

    def test_failure_status(self) -> None:
        with (
            patch("sys.argv", ["ccr-config"]),
            patch("ccr_config.cli.setup.run_setup", return_value=1),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 1

    def test_rejects_unknown_flags(self) -> None:
        with (
            patch("sys.argv", ["ccr-config", "--region", "intl"]),
            patch("ccr_config.cli.setup.run_setup") as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main()
        assert exc_info.value.code == 2
        mock_run.assert_not_called()

    def test_help(self, capsys: object) -> None:
        with patch("sys.argv", ["ccr-config", "--help"]), pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0
        captured = capsys.readouterr()  # type: ignore[union-attr]
        assert "DashScope" in captured.out
