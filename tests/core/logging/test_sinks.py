"""Tests for file, console and debug sinks."""

from __future__ import annotations

from pathlib import Path

import pytest

from nslog.core.exceptions import SinkSetupError
from nslog.core.logging import ConsoleSink, DebugChannel, FileSink, debug_enabled


class TestFileSink:
    def test_prepare_creates_empty_file(self, tmp_path: Path):
        sink = FileSink(tmp_path / "messages.log")
        sink.prepare()

        assert sink.path.read_text() == ""

    def test_prepare_keeps_existing_content(self, tmp_path: Path):
        path = tmp_path / "messages.log"
        path.write_text("kept\n")

        FileSink(path).prepare()

        assert path.read_text() == "kept\n"

    def test_prepare_failure(self, tmp_path: Path):
        with pytest.raises(SinkSetupError):
            FileSink(tmp_path / "missing" / "messages.log").prepare()

    def test_write_appends_lines(self, tmp_path: Path):
        sink = FileSink(tmp_path / "messages.log")
        sink.prepare()

        assert sink.write("one")
        assert sink.write("two")
        assert sink.path.read_text(encoding="utf-8") == "one\ntwo\n"

    def test_write_skips_missing_file(self, tmp_path: Path):
        sink = FileSink(tmp_path / "messages.log")

        assert sink.write("lost") is False
        assert not sink.path.exists()

    def test_prepare_rejects_directory(self, tmp_path: Path):
        path = tmp_path / "messages.log"
        path.mkdir()

        with pytest.raises(SinkSetupError) as excinfo:
            FileSink(path).prepare()

        assert excinfo.value.path == path

    def test_write_skips_directory(self, tmp_path: Path):
        sink = FileSink(tmp_path / "messages.log")
        sink.path.mkdir()

        assert sink.write("lost") is False
        assert sink.path.is_dir()


class TestConsoleSink:
    def test_streams(self, capsys: pytest.CaptureFixture[str]):
        ConsoleSink("stdout").write("out")
        ConsoleSink("stderr").write("err")

        captured = capsys.readouterr()
        assert captured.out == "out\n"
        assert captured.err == "err\n"

    def test_unknown_stream(self):
        with pytest.raises(ValueError):
            ConsoleSink("stdin")


@pytest.mark.parametrize(
    ("namespace", "patterns", "expected"),
    [
        ("svc", "svc", True),
        ("svc", "*", True),
        ("svc:db", "svc:*", True),
        ("api", "svc,api", True),
        ("api", "svc api", True),
        ("svc", "*,-svc", False),
        ("svc", "", False),
        ("other", "svc", False),
    ],
)
def test_debug_patterns(namespace: str, patterns: str, expected: bool):
    assert debug_enabled(namespace, patterns) is expected


def test_debug_channel_follows_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    channel = DebugChannel("worker")

    assert channel.write("nothing") is False

    monkeypatch.setenv("DEBUG", "worker")
    assert channel.enabled
    assert channel.write("something") is True
    assert capsys.readouterr().err == "worker something\n"
