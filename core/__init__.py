from .errors import (
    TdError,
    InvalidReferenceError,
    NotFoundError,
    AmbiguousError,
    NotInScopeError,
    CommandError,
    format_error,
)
from .matcher import MAX_HINTS, Candidate, match_candidate
from .models import Page, Due, Task, Project, Section, Label, Comment, User
from .refs import is_explicit_ref, extract_id, require_explicit_ref

__all__ = [
    # Errors
    "TdError",
    "InvalidReferenceError",
    "NotFoundError",
    "AmbiguousError",
    "NotInScopeError",
    "CommandError",
    "format_error",
    # Matching
    "MAX_HINTS",
    "Candidate",
    "match_candidate",
    # Entities
    "Page",
    "Due",
    "Task",
    "Project",
    "Section",
    "Label",
    "Comment",
    "User",
    # References
    "is_explicit_ref",
    "extract_id",
    "require_explicit_ref",
]
