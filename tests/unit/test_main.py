"""
Tests for the asmbot CLI — one-shot commands, --archs, console launch.
"""
import pytest
from unittest.mock import MagicMock, patch

from asmbot.main import _build_parser, run
from asmbot.utils.config import ConfigManager


@pytest.fixture
def isolated(tmp_path):
    """Keep config and logs out of the real home directory."""
    with patch("asmbot.main.ConfigManager", lambda: ConfigManager(config_dir=tmp_path)):
        with patch("asmbot.main.setup_logging"):
            yield


class TestArgParser:

    def test_command_argument(self):
        args = _build_parser().parse_args(["-c", "asm x86 nop"])
        assert args.command == "asm x86 nop"

    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.command is None
        assert not args.archs


class TestRunCommand:

    def test_one_shot_prints_reply(self, isolated, capsys):
        with patch("sys.argv", ["asmbot", "-c", "asm x86 nop"]):
            with pytest.raises(SystemExit) as exc_info:
                run()
        assert exc_info.value.code == 0
        assert "nop  ; +0 = 90" in capsys.readouterr().out

    def test_one_shot_error_reply_still_exits_zero(self, isolated, capsys):
        with patch("sys.argv", ["asmbot", "-c", "asm z80 nop"]):
            with pytest.raises(SystemExit) as exc_info:
                run()
        assert exc_info.value.code == 0
        assert "Architecture not supported!" in capsys.readouterr().out

    def test_empty_command_rejected(self, isolated):
        with patch("sys.argv", ["asmbot", "-c", "   "]):
            with pytest.raises(SystemExit) as exc_info:
                run()
        assert exc_info.value.code == 1


class TestRunConsole:

    def test_no_arguments_starts_console(self, isolated):
        mock_run_tui = MagicMock()
        with patch("sys.argv", ["asmbot"]):
            with patch("asmbot.main.run_tui", mock_run_tui):
                run()
        mock_run_tui.assert_called_once()

    def test_console_crash_exits_one(self, isolated):
        with patch("sys.argv", ["asmbot"]):
            with patch("asmbot.main.run_tui", side_effect=RuntimeError("no tty")):
                with pytest.raises(SystemExit) as exc_info:
                    run()
        assert exc_info.value.code == 1


class TestRunArchs:

    def test_archs_exits_zero(self):
        with patch("sys.argv", ["asmbot", "--archs"]):
            with patch("asmbot.main.display_arch_help"):
                with pytest.raises(SystemExit) as exc_info:
                    run()
        assert exc_info.value.code == 0
