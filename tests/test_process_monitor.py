import psutil

from focus_guard.monitor import process_monitor
from focus_guard.monitor.process_monitor import is_process_running


class FakeProc:
    def __init__(self, name):
        self.info = {"name": name}


class VanishedProc:
    @property
    def info(self):
        raise psutil.NoSuchProcess(pid=42)


def _patch(monkeypatch, procs):
    monkeypatch.setattr(process_monitor.psutil, "process_iter", lambda attrs=None: iter(procs))


def test_match_is_case_insensitive(monkeypatch):
    _patch(monkeypatch, [FakeProc("SelfControl")])
    assert is_process_running("selfcontrol")
    assert is_process_running("SELFCONTROL")


def test_match_is_exact(monkeypatch):
    _patch(monkeypatch, [FakeProc("SelfControl Helper")])
    assert not is_process_running("SelfControl")


def test_vanished_and_nameless_processes_are_skipped(monkeypatch):
    _patch(monkeypatch, [VanishedProc(), FakeProc(None), FakeProc("Forest")])
    assert is_process_running("forest")
    assert not is_process_running("focus")
