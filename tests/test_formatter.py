"""Tests for best-effort formatting of generated sources."""

import logging
import subprocess
from pathlib import Path

import pytest

from terraform_generator.provider import formatter
from terraform_generator.provider.formatter import format_source


def _completed(returncode: int, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr=stderr)


class TestFormatSource:
    def test_no_command(self, tmp_path: Path) -> None:
        assert not format_source(tmp_path / "x.go", ())

    def test_success(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
            calls.append(cmd)
            return _completed(0)

        monkeypatch.setattr(formatter.subprocess, "run", fake_run)
        assert format_source(tmp_path / "x.go", ("goimports", "-w"))
        assert calls == [["goimports", "-w", str(tmp_path / "x.go")]]

    def test_nonzero_exit_is_logged(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setattr(formatter.subprocess, "run", lambda cmd, **kwargs: _completed(2, "x.go:1: syntax error"))
        with caplog.at_level(logging.WARNING, logger="terraform_generator.provider.formatter"):
            assert not format_source(tmp_path / "x.go", ("goimports", "-w"))
        assert "syntax error" in caplog.text

    def test_missing_binary(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def missing(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(formatter.subprocess, "run", missing)
        assert not format_source(tmp_path / "x.go", ("goimports", "-w"))

    def test_timeout(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def slow(cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
            raise subprocess.TimeoutExpired(cmd, 60)

        monkeypatch.setattr(formatter.subprocess, "run", slow)
        assert not format_source(tmp_path / "x.go", ("goimports", "-w"))
