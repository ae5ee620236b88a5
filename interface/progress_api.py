"""Spinner decorator around the backend port.

``ProgressApi`` implements ``TodoistApi`` by delegation: every method runs the
wrapped call under a spinner with a message describing the operation. Resolvers
and the pagination engine never see the spinner.
"""

from typing import Any, Callable, Dict, Optional

from application.ports import TodoistApi
from core import Comment, Label, Page, Project, Section, Task, User

from .spinner import LoadingSpinner, with_spinner

PROGRESS_MESSAGES: Dict[str, str] = {
    "get_user": "Checking authentication...",
    "get_task": "Loading task...",
    "get_tasks": "Loading tasks...",
    "filter_tasks": "Loading tasks...",
    "add_task": "Creating task...",
    "update_task": "Updating task...",
    "close_task": "Completing task...",
    "reopen_task": "Reopening task...",
    "delete_task": "Deleting task...",
    "get_project": "Loading project...",
    "get_projects": "Loading projects...",
    "add_project": "Creating project...",
    "update_project": "Updating project...",
    "delete_project": "Deleting project...",
    "get_section": "Loading section...",
    "get_sections": "Loading sections...",
    "add_section": "Creating section...",
    "update_section": "Updating section...",
    "delete_section": "Deleting section...",
    "get_label": "Loading label...",
    "get_labels": "Loading labels...",
    "add_label": "Creating label...",
    "update_label": "Updating label...",
    "delete_label": "Deleting label...",
    "get_comments": "Loading comments...",
    "add_comment": "Adding comment...",
    "delete_comment": "Deleting comment...",
}


class ProgressApi:
    def __init__(
        self,
        api: TodoistApi,
        enabled: bool = True,
        spinner_factory: Callable[[], LoadingSpinner] = LoadingSpinner,
    ) -> None:
        self.api = api
        self.enabled = enabled
        self.spinner_factory = spinner_factory

    def _run(self, name: str, call: Callable[[], Any]) -> Any:
        return with_spinner(PROGRESS_MESSAGES[name], call, enabled=self.enabled, spinner_factory=self.spinner_factory)

    # Tasks
    def get_task(self, task_id: str) -> Task:
        return self._run("get_task", lambda: self.api.get_task(task_id))

    def get_tasks(
        self,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        parent_id: Optional[str] = None,
        label: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Task]:
        return self._run(
            "get_tasks",
            lambda: self.api.get_tasks(
                project_id=project_id,
                section_id=section_id,
                parent_id=parent_id,
                label=label,
                cursor=cursor,
                limit=limit,
            ),
        )

    def filter_tasks(self, query: str, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Task]:
        return self._run("filter_tasks", lambda: self.api.filter_tasks(query, cursor=cursor, limit=limit))

    def add_task(self, content: str, **fields: Any) -> Task:
        return self._run("add_task", lambda: self.api.add_task(content, **fields))

    def update_task(self, task_id: str, **fields: Any) -> Task:
        return self._run("update_task", lambda: self.api.update_task(task_id, **fields))

    def close_task(self, task_id: str) -> None:
        return self._run("close_task", lambda: self.api.close_task(task_id))

    def reopen_task(self, task_id: str) -> None:
        return self._run("reopen_task", lambda: self.api.reopen_task(task_id))

    def delete_task(self, task_id: str) -> None:
        return self._run("delete_task", lambda: self.api.delete_task(task_id))

    # Projects
    def get_project(self, project_id: str) -> Project:
        return self._run("get_project", lambda: self.api.get_project(project_id))

    def get_projects(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Project]:
        return self._run("get_projects", lambda: self.api.get_projects(cursor=cursor, limit=limit))

    def add_project(self, name: str, **fields: Any) -> Project:
        return self._run("add_project", lambda: self.api.add_project(name, **fields))

    def update_project(self, project_id: str, **fields: Any) -> Project:
        return self._run("update_project", lambda: self.api.update_project(project_id, **fields))

    def delete_project(self, project_id: str) -> None:
        return self._run("delete_project", lambda: self.api.delete_project(project_id))

    # Sections
    def get_section(self, section_id: str) -> Section:
        return self._run("get_section", lambda: self.api.get_section(section_id))

    def get_sections(
        self, project_id: Optional[str] = None, cursor: Optional[str] = None, limit: Optional[int] = None
    ) -> Page[Section]:
        return self._run(
            "get_sections", lambda: self.api.get_sections(project_id=project_id, cursor=cursor, limit=limit)
        )

    def add_section(self, name: str, project_id: str) -> Section:
        return self._run("add_section", lambda: self.api.add_section(name, project_id))

    def update_section(self, section_id: str, name: str) -> Section:
        return self._run("update_section", lambda: self.api.update_section(section_id, name))

    def delete_section(self, section_id: str) -> None:
        return self._run("delete_section", lambda: self.api.delete_section(section_id))

    # Labels
    def get_label(self, label_id: str) -> Label:
        return self._run("get_label", lambda: self.api.get_label(label_id))

    def get_labels(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Label]:
        return self._run("get_labels", lambda: self.api.get_labels(cursor=cursor, limit=limit))

    def add_label(self, name: str, **fields: Any) -> Label:
        return self._run("add_label", lambda: self.api.add_label(name, **fields))

    def update_label(self, label_id: str, **fields: Any) -> Label:
        return self._run("update_label", lambda: self.api.update_label(label_id, **fields))

    def delete_label(self, label_id: str) -> None:
        return self._run("delete_label", lambda: self.api.delete_label(label_id))

    # Comments
    def get_comments(
        self,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Comment]:
        return self._run(
            "get_comments",
            lambda: self.api.get_comments(task_id=task_id, project_id=project_id, cursor=cursor, limit=limit),
        )

    def add_comment(self, content: str, task_id: Optional[str] = None, project_id: Optional[str] = None) -> Comment:
        return self._run("add_comment", lambda: self.api.add_comment(content, task_id=task_id, project_id=project_id))

    def delete_comment(self, comment_id: str) -> None:
        return self._run("delete_comment", lambda: self.api.delete_comment(comment_id))

    # User
    def get_user(self) -> User:
        return self._run("get_user", lambda: self.api.get_user())


__all__ = ["PROGRESS_MESSAGES", "ProgressApi"]
