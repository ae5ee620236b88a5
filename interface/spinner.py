"""Progress spinner shown on stderr while a backend call is in flight."""

import os
import sys
import threading
from typing import Callable, Optional, TextIO, TypeVar

from .cli_style import echo

FRAMES = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

T = TypeVar("T")


def spinner_disabled(no_spinner: bool = False, stdout: Optional[TextIO] = None) -> bool:
    """Spinners only run on an interactive terminal with machine output off."""
    if no_spinner:
        return True
    if os.getenv("TD_SPINNER", "").lower() == "false":
        return True
    if os.getenv("CI"):
        return True
    stream = stdout or sys.stdout
    return not stream.isatty()


class LoadingSpinner:
    def __init__(self, stream: Optional[TextIO] = None, interval: float = 0.08) -> None:
        self.stream = stream or sys.stderr
        self.interval = interval
        self.text = ""
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def start(self, text: str, enabled: bool = True) -> "LoadingSpinner":
        if not enabled or self.running:
            return self
        self.text = text
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, name="td-spinner", daemon=True)
        self._thread.start()
        return self

    def _spin(self) -> None:
        index = 0
        while not self._stop.is_set():
            self.stream.write(f"\r{FRAMES[index % len(FRAMES)]} {self.text}")
            self.stream.flush()
            index += 1
            self._stop.wait(self.interval)

    def _halt(self) -> bool:
        if self._thread is None:
            return False
        self._stop.set()
        self._thread.join()
        self._thread = None
        self.stream.write("\r\x1b[K")
        self.stream.flush()
        return True

    def stop(self) -> None:
        self._halt()

    def succeed(self, text: Optional[str] = None) -> None:
        if self._halt() and text:
            echo([("class:ok", f"✓ {text}")], file=self.stream)

    def fail(self, text: Optional[str] = None) -> None:
        if self._halt() and text:
            echo([("class:fail", f"✗ {text}")], file=self.stream)


def with_spinner(
    text: str,
    operation: Callable[[], T],
    enabled: bool = True,
    spinner_factory: Callable[[], LoadingSpinner] = LoadingSpinner,
) -> T:
    """Run ``operation`` under a spinner; the spinner never swallows errors."""
    spinner = spinner_factory().start(text, enabled=enabled)
    try:
        result = operation()
    except BaseException:
        spinner.fail()
        raise
    spinner.stop()
    return result


__all__ = ["FRAMES", "spinner_disabled", "LoadingSpinner", "with_spinner"]
