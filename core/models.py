"""Read-only snapshots of Todoist entities.

Snapshots are built from REST API v1 JSON via ``from_api`` and keep the raw
payload so ``--full`` output can echo every field the backend sent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

APP_URL = "https://app.todoist.com/app"

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One batch of a cursor-paginated stream; ``next_cursor`` is None at the end."""

    results: List[T]
    next_cursor: Optional[str] = None


@dataclass(frozen=True)
class Due:
    date: str
    string: str = ""
    is_recurring: bool = False

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> Optional["Due"]:
        if not data or not data.get("date"):
            return None
        return cls(
            date=str(data["date"])[:10],
            string=data.get("string") or "",
            is_recurring=bool(data.get("is_recurring", False)),
        )


@dataclass(frozen=True)
class Task:
    id: str
    content: str
    description: str = ""
    project_id: str = ""
    section_id: Optional[str] = None
    parent_id: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    priority: int = 1
    due: Optional[Due] = None
    checked: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        return self.content

    @property
    def url(self) -> str:
        return f"{APP_URL}/task/{self.id}"

    @property
    def priority_label(self) -> str:
        # API 4 is the most urgent (p1)
        return f"p{5 - self.priority}"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=str(data["id"]),
            content=data.get("content") or "",
            description=data.get("description") or "",
            project_id=str(data.get("project_id") or ""),
            section_id=data.get("section_id") or None,
            parent_id=data.get("parent_id") or None,
            labels=list(data.get("labels") or []),
            priority=int(data.get("priority") or 1),
            due=Due.from_api(data.get("due")),
            checked=bool(data.get("checked", False)),
            raw=dict(data),
        )


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    color: str = ""
    is_favorite: bool = False
    parent_id: Optional[str] = None
    workspace_id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def url(self) -> str:
        return f"{APP_URL}/project/{self.id}"

    @property
    def is_workspace(self) -> bool:
        return self.workspace_id is not None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            color=data.get("color") or "",
            is_favorite=bool(data.get("is_favorite", False)),
            parent_id=data.get("parent_id") or None,
            workspace_id=data.get("workspace_id") or None,
            raw=dict(data),
        )


@dataclass(frozen=True)
class Section:
    id: str
    name: str
    project_id: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        return self.name

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Section":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            project_id=str(data.get("project_id") or ""),
            raw=dict(data),
        )


@dataclass(frozen=True)
class Label:
    id: str
    name: str
    color: str = ""
    is_favorite: bool = False
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def display_name(self) -> str:
        return self.name

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Label":
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            color=data.get("color") or "",
            is_favorite=bool(data.get("is_favorite", False)),
            raw=dict(data),
        )


@dataclass(frozen=True)
class Comment:
    id: str
    content: str
    task_id: Optional[str] = None
    project_id: Optional[str] = None
    posted_at: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Comment":
        return cls(
            id=str(data["id"]),
            content=data.get("content") or "",
            task_id=data.get("task_id") or data.get("item_id") or None,
            project_id=data.get("project_id") or None,
            posted_at=data.get("posted_at") or "",
            raw=dict(data),
        )


@dataclass(frozen=True)
class User:
    id: str
    full_name: str = ""
    email: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "User":
        return cls(id=str(data["id"]), full_name=data.get("full_name") or "", email=data.get("email") or "")


__all__ = ["APP_URL", "Page", "Due", "Task", "Project", "Section", "Label", "Comment", "User"]
