"""Terminal styling for command output."""

import sys
from typing import List, Optional, TextIO, Tuple, Union

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

STYLE = Style.from_dict(
    {
        "text": "",
        "text.dim": "#8a9097",
        "header": "bold",
        "favorite": "#e5c07b",
        "overdue": "#e06c75 bold",
        "label": "#61afef",
        "ok": "#9ad974",
        "fail": "#e06c75",
    }
)

Fragment = Tuple[str, str]
Line = Union[str, List[Fragment]]


def echo(line: Line = "", file: Optional[TextIO] = None) -> None:
    """Print a plain string or a list of ``(style, text)`` fragments.

    The stream is looked up at call time so redirected ``sys.stdout`` is honoured.
    """
    fragments = [("class:text", line)] if isinstance(line, str) else line
    print_formatted_text(FormattedText(fragments), style=STYLE, file=file or sys.stdout)


def dim(text: str) -> Fragment:
    return ("class:text.dim", text)


def bold(text: str) -> Fragment:
    return ("class:header", text)


def plain(text: str) -> Fragment:
    return ("class:text", text)


__all__ = ["STYLE", "Fragment", "Line", "echo", "dim", "bold", "plain"]
