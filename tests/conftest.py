import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop any sinks added by setup_logging so they do not outlive the test."""
    yield
    logger.remove()


@pytest.fixture
def battery_dir(tmp_path):
    """A fake power_supply directory for a discharging battery at 50%."""
    path = tmp_path / "BAT0"
    path.mkdir()
    (path / "status").write_text("Discharging\n")
    (path / "energy_now").write_text("25000000\n")
    (path / "energy_full").write_text("50000000\n")
    return path


class RecordingNotifier:
    """Collects every notification instead of showing it."""

    def __init__(self, fail: bool = False) -> None:
        self.sent = []
        self.fail = fail

    def notify(self, severity, level) -> None:
        if self.fail:
            raise RuntimeError("notification daemon unavailable")
        self.sent.append((severity, level))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return RecordingNotifier(fail=True)


class FakeGLibError(Exception):
    pass


class FakeNotification:
    """Stands in for Notify.Notification and records how it was configured."""

    shown = []
    show_result = True
    show_error = None

    def __init__(self, summary, body, icon) -> None:
        self.summary = summary
        self.body = body
        self.icon = icon
        self.urgency = None
        self.timeout = None

    @classmethod
    def new(cls, summary, body, icon):
        return cls(summary, body, icon)

    def set_urgency(self, urgency) -> None:
        self.urgency = urgency

    def set_timeout(self, timeout) -> None:
        self.timeout = timeout

    def show(self) -> bool:
        if FakeNotification.show_error is not None:
            raise FakeNotification.show_error
        FakeNotification.shown.append(self)
        return FakeNotification.show_result


@pytest.fixture
def fake_notify(monkeypatch):
    """
    Install a fake ``gi`` package exposing Notify and GLib, and import a
    fresh ``notifier`` module against it.
    """
    import importlib
    import sys
    import types

    calls = []

    notify = types.SimpleNamespace(
        EXPIRES_NEVER=0,
        Urgency=types.SimpleNamespace(LOW=0, NORMAL=1, CRITICAL=2),
        Notification=FakeNotification,
        init=lambda app_name: calls.append(("init", app_name)) or notify.init_result,
        uninit=lambda: calls.append(("uninit",)),
        init_result=True,
        calls=calls,
    )
    glib = types.SimpleNamespace(Error=FakeGLibError)

    gi = types.ModuleType("gi")
    gi.require_version = lambda namespace, version: None
    repository = types.ModuleType("gi.repository")
    repository.Notify = notify
    repository.GLib = glib
    gi.repository = repository

    monkeypatch.setitem(sys.modules, "gi", gi)
    monkeypatch.setitem(sys.modules, "gi.repository", repository)
    monkeypatch.setattr(FakeNotification, "shown", [])
    monkeypatch.setattr(FakeNotification, "show_result", True)
    monkeypatch.setattr(FakeNotification, "show_error", None)

    sys.modules.pop("notifier", None)
    module = importlib.import_module("notifier")
    yield notify, module
    sys.modules.pop("notifier", None)
