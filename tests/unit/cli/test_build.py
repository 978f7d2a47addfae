"""Tests for CLI command dispatch."""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from prefbuild import __version__
from prefbuild.build.builder import BuildOutcome
from prefbuild.build.orchestrator import RunSummary
from prefbuild.cli import (
    CMD_ALL,
    CMD_CLEAN,
    CMD_CURRENT,
    CMD_HELP,
    CMD_INVALID,
    CMD_LIST,
    CMD_PLATFORM,
    CMD_VERSION,
    main,
    parse_command,
)
from prefbuild.platforms import PLATFORM_CATALOG


def summary_of(*results):
    summary = RunSummary()
    for platform, success in results:
        summary.add(
            BuildOutcome(
                platform=platform,
                success=success,
                output_path=Path("build") / "pref-doctor",
                size_bytes=1024 if success else None,
                message="" if success else "Compiler exited with status 1",
            )
        )
    return summary


class TestParseCommand:
    """Tests for leading-token parsing."""

    @pytest.mark.parametrize(
        "argv, command",
        [
            ([], CMD_CURRENT),
            (["-c"], CMD_CURRENT),
            (["--current"], CMD_CURRENT),
            (["-a"], CMD_ALL),
            (["--all"], CMD_ALL),
            (["-p", "linux-x64"], CMD_PLATFORM),
            (["--platform", "linux-x64"], CMD_PLATFORM),
            (["--clean"], CMD_CLEAN),
            (["--list"], CMD_LIST),
            (["-h"], CMD_HELP),
            (["--help", "--all"], CMD_HELP),
            (["--version"], CMD_VERSION),
            (["build"], CMD_INVALID),
            (["--ALL"], CMD_INVALID),
        ],
    )
    def test_tokens(self, argv, command):
        assert parse_command(argv).command == command

    def test_platform_argument(self):
        args = parse_command(["-p", "darwin-arm64", "extra"])
        assert args.platform == "darwin-arm64"

    def test_platform_missing_argument(self):
        assert parse_command(["--platform"]).platform is None

    @pytest.mark.parametrize(
        "argv, command",
        [
            (["-v"], CMD_CURRENT),
            (["--all", "--verbose"], CMD_ALL),
            (["--verbose", "--list"], CMD_LIST),
        ],
    )
    def test_verbose_anywhere(self, argv, command):
        args = parse_command(argv)
        assert args.command == command
        assert args.verbose is True

    def test_verbose_before_platform_spec(self):
        args = parse_command(["-p", "-v", "linux-x64"])
        assert args.platform == "linux-x64"
        assert args.verbose is True

    def test_verbose_default_off(self):
        assert parse_command(["--all"]).verbose is False


class TestCLIMain:
    """Tests for the prefbuild entry point."""

    @pytest.fixture
    def mock_orchestrator(self):
        """Replace BuildOrchestrator inside the CLI."""
        with patch("prefbuild.cli.BuildOrchestrator") as mock_orch_class:
            mock_instance = MagicMock()
            mock_orch_class.return_value = mock_instance
            yield mock_instance

    def run_main(self, argv):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        return exc_info.value.code

    def test_default_builds_current(self, mock_orchestrator, capsys):
        mock_orchestrator.build_current.return_value = summary_of((PLATFORM_CATALOG[0], True))

        assert self.run_main([]) == 0
        mock_orchestrator.build_current.assert_called_once()
        out = capsys.readouterr().out
        assert "Build successful" in out
        assert "1.0 KB" in out

    def test_current_failure(self, mock_orchestrator, capsys):
        mock_orchestrator.build_current.return_value = summary_of((None, False))

        assert self.run_main(["--current"]) == 1
        assert "Build failed" in capsys.readouterr().out

    def test_all_success(self, mock_orchestrator):
        mock_orchestrator.build_all.return_value = summary_of(
            *[(p, True) for p in PLATFORM_CATALOG]
        )
        assert self.run_main(["-a"]) == 0

    def test_all_partial_failure(self, mock_orchestrator, capsys):
        results = [(p, p.name != "linux-arm64") for p in PLATFORM_CATALOG]
        mock_orchestrator.build_all.return_value = summary_of(*results)

        assert self.run_main(["--all"]) == 1
        out = capsys.readouterr().out
        assert "5/6" in out
        assert "linux-arm64" in out

    def test_platform(self, mock_orchestrator):
        mock_orchestrator.build_platform.return_value = summary_of((PLATFORM_CATALOG[4], True))

        assert self.run_main(["-p", "windows-x64"]) == 0
        mock_orchestrator.build_platform.assert_called_once_with("windows-x64")

    def test_platform_without_argument(self, mock_orchestrator, capsys):
        assert self.run_main(["--platform"]) == 1
        mock_orchestrator.build_platform.assert_not_called()
        assert "Missing platform" in capsys.readouterr().out

    def test_unknown_platform(self, mock_orchestrator):
        mock_orchestrator.build_platform.return_value = RunSummary()
        assert self.run_main(["-p", "plan9-x64"]) == 1

    def test_clean_always_succeeds(self, mock_orchestrator, capsys):
        mock_orchestrator.clean.return_value = False

        assert self.run_main(["--clean"]) == 0
        assert "warnings" in capsys.readouterr().out

    def test_list(self, mock_orchestrator):
        assert self.run_main(["--list"]) == 0
        mock_orchestrator.list_platforms.assert_called_once()
        mock_orchestrator.build_all.assert_not_called()

    def test_help(self, mock_orchestrator, capsys):
        assert self.run_main(["--help", "--all"]) == 0
        assert "Usage: prefbuild" in capsys.readouterr().out
        mock_orchestrator.build_all.assert_not_called()

    def test_version(self, capsys):
        assert self.run_main(["-V"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_unknown_option(self, mock_orchestrator, capsys):
        assert self.run_main(["--bogus"]) == 1
        out = capsys.readouterr().out
        assert "Unknown option: --bogus" in out
        assert "Usage: prefbuild" in out

    def test_reads_sys_argv(self, mock_orchestrator, monkeypatch):
        mock_orchestrator.list_platforms.return_value = PLATFORM_CATALOG
        monkeypatch.setattr(sys, "argv", ["prefbuild", "--list"])

        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0

    def test_keyboard_interrupt(self, mock_orchestrator, capsys):
        mock_orchestrator.build_all.side_effect = KeyboardInterrupt()

        assert self.run_main(["--all"]) == 130
        assert "interrupted" in capsys.readouterr().out

    def test_unexpected_error(self, mock_orchestrator, capsys):
        mock_orchestrator.build_current.side_effect = RuntimeError("kaboom")

        assert self.run_main([]) == 1
        out = capsys.readouterr().out
        assert "Unexpected error" in out
        assert "RuntimeError: kaboom" in out
        assert "Traceback" not in out

    def test_unexpected_error_verbose_traceback(self, mock_orchestrator, capsys):
        mock_orchestrator.build_current.side_effect = RuntimeError("kaboom")

        assert self.run_main(["--verbose"]) == 1
        assert "Traceback" in capsys.readouterr().out

    def test_verbose_reaches_settings(self):
        with patch("prefbuild.cli.BuildOrchestrator") as mock_orch_class:
            mock_orch_class.return_value.build_all.return_value = summary_of(
                *[(p, True) for p in PLATFORM_CATALOG]
            )
            with pytest.raises(SystemExit):
                main(["--all", "-v"])

        settings = mock_orch_class.call_args.args[0]
        assert settings.verbose is True


class TestCLIWithStubCompiler:
    """Runs the CLI through the real orchestrator with bun stubbed out."""

    @pytest.fixture
    def cli_settings(self, settings, make_compiler):
        compiler = make_compiler()
        with patch("prefbuild.cli.BuildSettings", return_value=settings):
            with patch("prefbuild.build.builder.BunCompiler", return_value=compiler):
                yield settings, compiler

    def test_all_builds_matrix(self, cli_settings):
        settings, compiler = cli_settings
        with pytest.raises(SystemExit) as exc_info:
            main(["--all"])

        assert exc_info.value.code == 0
        assert len(compiler.calls) == len(PLATFORM_CATALOG)

    def test_unknown_platform_builds_nothing(self, cli_settings, capsys):
        settings, compiler = cli_settings
        with pytest.raises(SystemExit) as exc_info:
            main(["--platform", "linux-mips"])

        assert exc_info.value.code == 1
        assert compiler.calls == []
        assert "Valid platforms" in capsys.readouterr().out

    def test_clean_twice(self, cli_settings):
        settings, _ = cli_settings
        settings.output_root.mkdir()
        for _ in range(2):
            with pytest.raises(SystemExit) as exc_info:
                main(["--clean"])
            assert exc_info.value.code == 0
        assert not settings.output_root.exists()
