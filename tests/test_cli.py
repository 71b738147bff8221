# tests/test_cli.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

from buildforge.cli import run_cli
from buildforge.process.types import CommandError, ExecutionResult
from buildforge.tasks.commands import quote


class RecordingRunner:
    def __init__(self, fail_on: str | None = None):
        self.commands: list[str] = []
        self.fail_on = fail_on

    def run(self, command, *, quiet=False, timed=False, survive=False):
        self.commands.append(command)
        returncode = 1 if self.fail_on and self.fail_on in command else 0
        result = ExecutionResult(command, returncode, 0.0)
        if not result.success and not survive:
            raise CommandError(result)
        return result

    def capture(self, command):
        self.commands.append(command)
        return "UUID: 9EF74434-5B52-377F-BE1F-10D2C4F66BD1 (arm64) PDFXKit\n"


def _write_json_config(path: Path) -> Path:
    path.write_text(
        json.dumps(
            {
                "framework": {"name": "PDFXKit"},
                "variants": {
                    "simulator": {
                        "destination": "generic/platform=iOS Simulator",
                        "slice": "ios-arm64_x86_64-simulator",
                    },
                    "device": {
                        "destination": "generic/platform=iOS",
                        "slice": "ios-arm64",
                        "symbol_maps": ["arm64"],
                    },
                },
            }
        ),
        encoding="utf-8",
    )
    return path


def test_list_prints_one_task_per_line(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")

    code = run_cli(["--config", str(cfg), "list"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        "clean",
        "compile",
        "compile:device",
        "compile:simulator",
        "help",
        "prepare",
    ]


def test_graph_prints_prerequisites_in_declared_order(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")

    code = run_cli(["--config", str(cfg), "graph"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out == [
        "clean:",
        "compile: clean compile:simulator compile:device",
        "compile:device: prepare",
        "compile:simulator: prepare",
        "help:",
        "prepare:",
    ]


def test_run_compile_invokes_tools_in_order(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()
    out_dir = tmp_path / "Out"

    code = run_cli(
        ["--config", str(cfg), "run", "compile", f"directory={out_dir}"],
        environ={},
        runner=runner,
    )
    out = capsys.readouterr().out

    assert code == 0
    assert [command.split()[0] for command in runner.commands] == [
        "rm",
        "mkdir",
        "xcrun",
        "xcrun",
        "dwarfdump",
        "xcodebuild",
    ]
    assert runner.commands[0] == f"rm -rf {quote(out_dir)}"
    assert runner.commands[-1].endswith(f"-output {quote(out_dir / 'PDFXKit.xcframework')}")
    assert "==> Creating the PDFXKit XCFramework" in out


def test_environment_selects_directory_and_label(tmp_path: Path) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()
    out_dir = tmp_path / "EnvOut"

    code = run_cli(
        ["--config", str(cfg), "run", "compile:simulator"],
        environ={"directory": str(out_dir), "name": "Nightly"},
        runner=runner,
    )

    assert code == 0
    assert runner.commands[0] == f"mkdir -p {quote(out_dir)}"
    assert "Nightly.framework-ios-arm64_x86_64-simulator.xcarchive" in runner.commands[1]


def test_run_without_task_shows_help(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()

    code = run_cli(["--config", str(cfg), "run"], environ={}, runner=runner)
    out = capsys.readouterr().out

    assert code == 0
    assert runner.commands == []
    assert "buildforge run compile " in out
    assert "Archive PDFXKit (device)" in out


def test_run_with_only_assignments_shows_help(tmp_path: Path) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()

    code = run_cli(
        ["--config", str(cfg), "run", f"directory={tmp_path}"],
        environ={},
        runner=runner,
    )

    assert code == 0
    assert runner.commands == []


def test_failed_command_returns_1_and_stops(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner(fail_on="mkdir")

    code = run_cli(
        ["--config", str(cfg), "run", "compile", f"directory={tmp_path / 'Out'}"],
        environ={},
        runner=runner,
    )
    captured = capsys.readouterr()

    assert code == 1
    assert [command.split()[0] for command in runner.commands] == ["rm", "mkdir"]
    assert "FAIL prepare" in captured.out
    assert "SKIP compile:simulator" in captured.out
    assert "SKIP compile" in captured.out
    assert "exit code 1" in captured.err


def test_unknown_task_lists_tasks_and_runs_nothing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()

    code = run_cli(["--config", str(cfg), "run", "nope"], environ={}, runner=runner)
    captured = capsys.readouterr()

    assert code == 2
    assert runner.commands == []
    assert "nope" in captured.err
    assert "compile:device" in captured.err
    assert "help" in captured.err


def test_unknown_option_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = _write_json_config(tmp_path / "buildforge.json")
    runner = RecordingRunner()

    code = run_cli(
        ["--config", str(cfg), "run", "compile", "jobs=4"], environ={}, runner=runner
    )

    assert code == 2
    assert runner.commands == []
    assert "jobs" in capsys.readouterr().err


def test_invalid_config_path_returns_2(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing.json"

    code = run_cli(["--config", str(missing), "list"])
    captured = capsys.readouterr()

    assert code == 2
    assert captured.err != ""


def test_real_runner_failure_exits_with_1(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    # A regular file where the build directory should be makes `mkdir -p` fail
    blocker = tmp_path / "Build"
    blocker.write_text("", encoding="utf-8")
    cfg = _write_json_config(tmp_path / "buildforge.json")

    code = run_cli(
        ["--config", str(cfg), "run", "compile:simulator"],
        environ={"directory": str(blocker)},
    )
    captured = capsys.readouterr()

    assert code == 1
    assert "FAIL prepare" in captured.out
    assert "SKIP compile:simulator" in captured.out
