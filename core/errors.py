"""Error taxonomy for reference resolution and command refusals.

Every error carries a ``kind`` (what went wrong, independent of entity type),
a ``code`` (the stable token printed to users, e.g. ``TASK_NOT_FOUND``),
a human ``message`` and an optional list of ``hints``.
"""

from typing import List, Optional, Sequence

KIND_INVALID_REFERENCE = "INVALID_REFERENCE"
KIND_NOT_FOUND = "NOT_FOUND"
KIND_AMBIGUOUS = "AMBIGUOUS"
KIND_NOT_IN_SCOPE = "NOT_IN_SCOPE"
KIND_USAGE = "USAGE"


def format_error(code: str, message: str, hints: Optional[Sequence[str]] = None) -> str:
    lines = [f"Error: {code}", message]
    for hint in hints or ():
        lines.append(f"  {hint}")
    return "\n".join(lines)


class TdError(ValueError):
    kind = KIND_USAGE

    def __init__(self, code: str, message: str, hints: Optional[Sequence[str]] = None) -> None:
        self.code = code
        self.message = message
        self.hints: List[str] = list(hints or [])
        super().__init__(format_error(code, message, self.hints))


class InvalidReferenceError(TdError):
    kind = KIND_INVALID_REFERENCE


class NotFoundError(TdError):
    kind = KIND_NOT_FOUND


class AmbiguousError(TdError):
    kind = KIND_AMBIGUOUS


class NotInScopeError(TdError):
    kind = KIND_NOT_IN_SCOPE


class CommandError(TdError):
    """Refusal raised by a command handler (missing --yes, bad flag value...)."""


__all__ = [
    "KIND_INVALID_REFERENCE",
    "KIND_NOT_FOUND",
    "KIND_AMBIGUOUS",
    "KIND_NOT_IN_SCOPE",
    "KIND_USAGE",
    "format_error",
    "TdError",
    "InvalidReferenceError",
    "NotFoundError",
    "AmbiguousError",
    "NotInScopeError",
    "CommandError",
]
