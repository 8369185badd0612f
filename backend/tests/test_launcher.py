"""Tests for the desktop launcher helpers."""

import pytest

from land_converter import launcher


class _FakeServer:
    def __init__(self, started: bool):
        self.started = started


class TestResolvePort:
    def test_configured_port_kept(self):
        assert launcher.resolve_port("127.0.0.1", 8765) == 8765

    def test_zero_picks_free_port(self):
        port = launcher.resolve_port("127.0.0.1", 0)
        assert 0 < port < 65536


class TestOpenWhenStarted:
    def test_opens_started_server(self, monkeypatch):
        opened = []
        monkeypatch.setattr(launcher.webbrowser, "open", opened.append)
        assert launcher.open_when_started(_FakeServer(True), "http://127.0.0.1:1") is True
        assert opened == ["http://127.0.0.1:1"]

    def test_gives_up_after_timeout(self, monkeypatch):
        opened = []
        monkeypatch.setattr(launcher.webbrowser, "open", opened.append)
        assert launcher.open_when_started(_FakeServer(False), "http://x", timeout=0.1) is False
        assert opened == []


class TestCrashHandling:
    def test_write_crash_log(self, tmp_path):
        path = launcher.write_crash_log("Traceback: boom", tmp_path / "crash.log")
        assert path.read_text(encoding="utf-8") == "Traceback: boom"

    def test_crash_log_in_working_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert launcher.crash_log_path() == tmp_path / launcher.CRASH_LOG_NAME

    def test_main_logs_crash_and_exits(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        def fail():
            raise RuntimeError("port in use")

        monkeypatch.setattr(launcher, "serve", fail)
        with pytest.raises(SystemExit) as exc:
            launcher.main()
        assert exc.value.code == 1
        log = (tmp_path / launcher.CRASH_LOG_NAME).read_text(encoding="utf-8")
        assert "port in use" in log
