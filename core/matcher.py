"""Case-insensitive name matching over candidate entities.

Exact match beats any number of partial (substring) matches. A single partial
match is accepted; several are reported as ambiguous with up to
``MAX_HINTS`` suggestions in the order the candidates were supplied.
"""

from typing import List, Optional, Protocol, Sequence, TypeVar

from .errors import AmbiguousError, NotFoundError

MAX_HINTS = 5


class Candidate(Protocol):
    @property
    def id(self) -> str:
        ...

    @property
    def display_name(self) -> str:
        ...


C = TypeVar("C", bound=Candidate)


def candidate_hint(candidate: Candidate) -> str:
    return f'"{candidate.display_name}" (id:{candidate.id})'


def _plural(label: str) -> str:
    return f"{label}s"


def match_candidate(
    query: str,
    candidates: Sequence[C],
    entity_label: str,
    scope_label: Optional[str] = None,
) -> C:
    """Pick the single candidate matching ``query``.

    ``entity_label`` names the kind in messages and codes (``task`` gives
    ``TASK_NOT_FOUND`` / ``AMBIGUOUS_TASK``); ``scope_label`` is appended to
    the not-found message (``... not found in project.``).
    """
    needle = query.lower()
    for candidate in candidates:
        if candidate.display_name.lower() == needle:
            return candidate

    partial: List[C] = [c for c in candidates if needle in c.display_name.lower()]
    if len(partial) == 1:
        return partial[0]

    code_label = entity_label.upper().replace(" ", "_")
    if not partial:
        where = f" in {scope_label}" if scope_label else ""
        raise NotFoundError(
            f"{code_label}_NOT_FOUND",
            f'{entity_label.capitalize()} "{query}" not found{where}.',
        )
    raise AmbiguousError(
        f"AMBIGUOUS_{code_label}",
        f'Multiple {_plural(entity_label)} match "{query}":',
        [candidate_hint(c) for c in partial[:MAX_HINTS]],
    )


__all__ = ["MAX_HINTS", "Candidate", "candidate_hint", "match_candidate"]
