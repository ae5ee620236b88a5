from typing import Any, List, Optional, Protocol

from core import Comment, Label, Page, Project, Section, Task, User


class TodoistApi(Protocol):
    """Backend surface consumed by resolvers and commands.

    List methods take an opaque ``cursor`` and a ``limit`` (page size) and return
    one ``Page``; walking the stream is the pagination engine's job.
    """

    # Tasks
    def get_task(self, task_id: str) -> Task:
        ...

    def get_tasks(
        self,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        parent_id: Optional[str] = None,
        label: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Task]:
        ...

    def filter_tasks(self, query: str, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Task]:
        ...

    def add_task(self, content: str, **fields: Any) -> Task:
        ...

    def update_task(self, task_id: str, **fields: Any) -> Task:
        ...

    def close_task(self, task_id: str) -> None:
        ...

    def reopen_task(self, task_id: str) -> None:
        ...

    def delete_task(self, task_id: str) -> None:
        ...

    # Projects
    def get_project(self, project_id: str) -> Project:
        ...

    def get_projects(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Project]:
        ...

    def add_project(self, name: str, **fields: Any) -> Project:
        ...

    def update_project(self, project_id: str, **fields: Any) -> Project:
        ...

    def delete_project(self, project_id: str) -> None:
        ...

    # Sections
    def get_section(self, section_id: str) -> Section:
        ...

    def get_sections(
        self, project_id: Optional[str] = None, cursor: Optional[str] = None, limit: Optional[int] = None
    ) -> Page[Section]:
        ...

    def add_section(self, name: str, project_id: str) -> Section:
        ...

    def update_section(self, section_id: str, name: str) -> Section:
        ...

    def delete_section(self, section_id: str) -> None:
        ...

    # Labels
    def get_label(self, label_id: str) -> Label:
        ...

    def get_labels(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Label]:
        ...

    def add_label(self, name: str, **fields: Any) -> Label:
        ...

    def update_label(self, label_id: str, **fields: Any) -> Label:
        ...

    def delete_label(self, label_id: str) -> None:
        ...

    # Comments
    def get_comments(
        self,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Comment]:
        ...

    def add_comment(self, content: str, task_id: Optional[str] = None, project_id: Optional[str] = None) -> Comment:
        ...

    def delete_comment(self, comment_id: str) -> None:
        ...

    # User
    def get_user(self) -> User:
        ...


# Names of every port method, in declaration order. Decorators use this list to
# check they cover the whole surface.
API_METHODS: List[str] = [
    "get_task",
    "get_tasks",
    "filter_tasks",
    "add_task",
    "update_task",
    "close_task",
    "reopen_task",
    "delete_task",
    "get_project",
    "get_projects",
    "add_project",
    "update_project",
    "delete_project",
    "get_section",
    "get_sections",
    "add_section",
    "update_section",
    "delete_section",
    "get_label",
    "get_labels",
    "add_label",
    "update_label",
    "delete_label",
    "get_comments",
    "add_comment",
    "delete_comment",
    "get_user",
]
