"""Turn user references into entities.

Every resolver follows the same shape: an explicit ``id:`` reference is fetched
by id with a single call, anything else is matched by name against a candidate
list pulled through the pagination engine. Resolvers differ only in where the
candidates come from (global list, project scope, section scope).
"""

from typing import Callable, List, Optional, TypeVar

from application.pagination import LIMITS, paginate
from application.ports import TodoistApi
from core import (
    Label,
    NotFoundError,
    NotInScopeError,
    Page,
    Project,
    Task,
    extract_id,
    is_explicit_ref,
    match_candidate,
    require_explicit_ref,
)

C = TypeVar("C")


def fetch_candidates(fetch_page: Callable[[Optional[str], int], Page[C]], kind: str) -> List[C]:
    """All candidates of one collection, capped at the default limit for ``kind``."""
    return paginate(fetch_page, LIMITS[kind]).results


def resolve_ref(
    ref: str,
    get_by_id: Callable[[str], C],
    list_candidates: Callable[[], List[C]],
    entity_label: str,
    scope_label: Optional[str] = None,
) -> C:
    if is_explicit_ref(ref):
        return get_by_id(extract_id(ref))
    return match_candidate(ref, list_candidates(), entity_label, scope_label)


def _all_tasks(api: TodoistApi, **scope) -> Callable[[], List[Task]]:
    return lambda: fetch_candidates(lambda cursor, limit: api.get_tasks(cursor=cursor, limit=limit, **scope), "tasks")


def resolve_task_ref(api: TodoistApi, ref: str) -> Task:
    return resolve_ref(ref, api.get_task, _all_tasks(api), "task")


def _all_projects(api: TodoistApi) -> Callable[[], List[Project]]:
    return lambda: fetch_candidates(lambda cursor, limit: api.get_projects(cursor=cursor, limit=limit), "projects")


def _all_labels(api: TodoistApi) -> Callable[[], List[Label]]:
    return lambda: fetch_candidates(lambda cursor, limit: api.get_labels(cursor=cursor, limit=limit), "labels")


def resolve_project_ref(api: TodoistApi, ref: str) -> Project:
    return resolve_ref(ref, api.get_project, _all_projects(api), "project")


def resolve_project_id(api: TodoistApi, ref: str) -> str:
    return resolve_project_ref(api, ref).id


def resolve_section_id(api: TodoistApi, ref: str, project_id: str) -> str:
    """Resolve a section within ``project_id``.

    Unlike other resolvers, an explicit id is checked against the project's
    section list so a section from another project is refused.
    """
    sections = fetch_candidates(
        lambda cursor, limit: api.get_sections(project_id=project_id, cursor=cursor, limit=limit), "sections"
    )
    if is_explicit_ref(ref):
        section_id = extract_id(ref)
        if any(section.id == section_id for section in sections):
            return section_id
        raise NotInScopeError(
            "SECTION_NOT_IN_PROJECT",
            f"Section id:{section_id} does not belong to this project.",
        )
    return match_candidate(ref, sections, "section", "project").id


def resolve_parent_task_id(
    api: TodoistApi,
    ref: str,
    project_id: str,
    section_id: Optional[str] = None,
) -> str:
    """Resolve a parent task for a new task in ``project_id`` (and ``section_id``).

    The section is searched first; the project only when the section has no
    match at all. Ambiguity inside the section fails without trying the project.
    """
    if is_explicit_ref(ref):
        return extract_id(ref)
    if section_id:
        try:
            return match_candidate(ref, _all_tasks(api, section_id=section_id)(), "task", "section").id
        except NotFoundError:
            pass
    return match_candidate(ref, _all_tasks(api, project_id=project_id)(), "task", "project").id


def resolve_label_ref(api: TodoistApi, ref: str) -> Label:
    name = ref if is_explicit_ref(ref) else ref.lstrip("@")
    return resolve_ref(name, api.get_label, _all_labels(api), "label")


def resolve_comment_id(ref: str) -> str:
    return require_explicit_ref(ref, "comment")


__all__ = [
    "fetch_candidates",
    "resolve_ref",
    "resolve_task_ref",
    "resolve_project_ref",
    "resolve_project_id",
    "resolve_section_id",
    "resolve_parent_task_id",
    "resolve_label_ref",
    "resolve_comment_id",
]
