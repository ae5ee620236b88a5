import io
import time

import pytest

from application.ports import API_METHODS
from infrastructure.todoist import TodoistNotFoundError
from interface.progress_api import PROGRESS_MESSAGES, ProgressApi
from interface.spinner import LoadingSpinner, spinner_disabled, with_spinner

from conftest import FakeApi, project


class RecordingSpinner:
    events = []

    def start(self, text, enabled=True):
        RecordingSpinner.events.append(("start", text, enabled))
        return self

    def stop(self):
        RecordingSpinner.events.append(("stop",))

    def fail(self, text=None):
        RecordingSpinner.events.append(("fail",))


@pytest.fixture(autouse=True)
def _reset_events():
    RecordingSpinner.events = []


class TtyStream(io.StringIO):
    def isatty(self):
        return True


def test_every_port_method_has_message_and_wrapper():
    assert set(PROGRESS_MESSAGES) == set(API_METHODS)
    for name in API_METHODS:
        assert callable(getattr(ProgressApi, name))


def test_delegates_and_wraps_call():
    backend = FakeApi(projects=[project("p1", "Work")])
    api = ProgressApi(backend, spinner_factory=RecordingSpinner)

    page = api.get_projects(limit=10)

    assert [p.name for p in page.results] == ["Work"]
    assert backend.called("get_projects")[0][2]["limit"] == 10
    assert RecordingSpinner.events == [("start", "Loading projects...", True), ("stop",)]


def test_disabled_spinner_still_delegates():
    backend = FakeApi()
    api = ProgressApi(backend, enabled=False, spinner_factory=RecordingSpinner)
    api.close_task("t1")
    assert backend.called("close_task")
    assert RecordingSpinner.events[0] == ("start", "Completing task...", False)


def test_failure_propagates_and_fails_spinner():
    api = ProgressApi(FakeApi(), spinner_factory=RecordingSpinner)
    with pytest.raises(TodoistNotFoundError):
        api.get_task("missing")
    assert RecordingSpinner.events[-1] == ("fail",)


def test_with_spinner_returns_result():
    assert with_spinner("x", lambda: 42, spinner_factory=RecordingSpinner) == 42


def test_spinner_disabled_rules(monkeypatch):
    monkeypatch.delenv("TD_SPINNER", raising=False)
    monkeypatch.delenv("CI", raising=False)
    assert spinner_disabled(no_spinner=True, stdout=TtyStream())
    assert spinner_disabled(stdout=io.StringIO())
    assert not spinner_disabled(stdout=TtyStream())
    monkeypatch.setenv("CI", "1")
    assert spinner_disabled(stdout=TtyStream())
    monkeypatch.delenv("CI")
    monkeypatch.setenv("TD_SPINNER", "false")
    assert spinner_disabled(stdout=TtyStream())


def test_loading_spinner_writes_frames_and_clears_line():
    stream = io.StringIO()
    spinner = LoadingSpinner(stream=stream, interval=0.001).start("Loading tasks...")
    assert spinner.running
    time.sleep(0.05)
    spinner.stop()
    assert not spinner.running
    out = stream.getvalue()
    assert "Loading tasks..." in out
    assert out.endswith("\r\x1b[K")


def test_loading_spinner_disabled_writes_nothing():
    stream = io.StringIO()
    spinner = LoadingSpinner(stream=stream).start("Loading...", enabled=False)
    spinner.succeed("done")
    assert stream.getvalue() == ""
