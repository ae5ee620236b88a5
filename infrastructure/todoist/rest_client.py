import logging
import random
import time
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import requests

from core import Comment, Label, Page, Project, Section, Task, User

from .rate_limiter import RateLimiter

REST_BASE = "https://api.todoist.com/api/v1"

logger = logging.getLogger("td.api")

E = TypeVar("E")


class TodoistApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TodoistPermissionError(TodoistApiError):
    pass


class TodoistNotFoundError(TodoistApiError):
    pass


class TodoistRateLimitError(TodoistApiError):
    pass


def _clean(params: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}


def _rate_limit_body(resp: requests.Response) -> Optional[Dict[str, Any]]:
    if resp.status_code != 429:
        return None
    try:
        body = resp.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


class TodoistRestClient:
    """Blocking client for the Todoist REST API v1.

    Network failures and 5xx responses are retried with jittered exponential
    backoff; 429 responses wait for the server's ``Retry-After`` first.
    """

    def __init__(
        self,
        token_provider: Callable[[], Optional[str]],
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
        base_url: str = REST_BASE,
        timeout: int = 30,
        max_attempts: int = 3,
    ) -> None:
        self.token_provider = token_provider
        self.session = session or requests.Session()
        self.rate_limiter = rate_limiter or RateLimiter()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        token = self.token_provider()
        if not token:
            raise TodoistPermissionError("Todoist API token missing")
        headers = {"Authorization": f"Bearer {token}"}
        url = f"{self.base_url}{path}"
        attempt = 0
        delay = 1.0
        while True:
            attempt += 1
            try:
                self.rate_limiter.acquire()
                resp = self.session.request(
                    method,
                    url,
                    params=_clean(params or {}) or None,
                    json=payload,
                    headers=headers,
                    timeout=self.timeout,
                )
            except requests.RequestException as exc:
                if attempt >= self.max_attempts:
                    raise TodoistApiError(f"Todoist API network error: {exc}") from exc
                logger.warning("%s %s failed (%s), retry #%s", method, path, exc, attempt)
                self._sleep(delay)
                delay *= 2
                continue
            self.rate_limiter.update(resp.headers, resp.status_code, body=_rate_limit_body(resp))
            if resp.status_code == 429:
                if attempt < self.max_attempts:
                    continue
                raise TodoistRateLimitError("Todoist API rate limit exceeded", 429)
            if resp.status_code >= 500 and attempt < self.max_attempts:
                logger.warning("%s %s returned %s, retry #%s", method, path, resp.status_code, attempt)
                self._sleep(delay)
                delay *= 2
                continue
            return self._decode(resp)

    def _decode(self, resp: requests.Response) -> Any:
        status = resp.status_code
        if status in (401, 403):
            raise TodoistPermissionError(f"HTTP {status}", status)
        if status == 404:
            raise TodoistNotFoundError(f"Not found: {resp.text[:200]}", status)
        if status >= 400:
            raise TodoistApiError(f"Todoist API error: {status} {resp.text[:200]}", status)
        if status == 204 or not resp.content:
            return None
        return resp.json()

    def _sleep(self, base_delay: float) -> None:
        time.sleep(base_delay + random.uniform(0, base_delay))

    def _item_path(self, collection: str, item_id: str, suffix: str = "") -> str:
        if not item_id:
            # an empty id would address the collection itself
            raise TodoistNotFoundError(f"Empty {collection[:-1]} id", 404)
        return f"/{collection}/{quote(str(item_id), safe='')}{suffix}"

    def _page(self, path: str, model: Type[E], params: Dict[str, Any]) -> Page[E]:
        data = self.request("get", path, params=params) or {}
        results: List[E] = [model.from_api(item) for item in data.get("results") or []]  # type: ignore[attr-defined]
        logger.debug("GET %s -> %s items", path, len(results))
        return Page(results=results, next_cursor=data.get("next_cursor") or None)

    # Tasks
    def get_task(self, task_id: str) -> Task:
        return Task.from_api(self.request("get", self._item_path("tasks", task_id)))

    def get_tasks(
        self,
        project_id: Optional[str] = None,
        section_id: Optional[str] = None,
        parent_id: Optional[str] = None,
        label: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Task]:
        params = {
            "project_id": project_id,
            "section_id": section_id,
            "parent_id": parent_id,
            "label": label,
            "cursor": cursor,
            "limit": limit,
        }
        return self._page("/tasks", Task, params)

    def filter_tasks(self, query: str, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Task]:
        return self._page("/tasks/filter", Task, {"query": query, "cursor": cursor, "limit": limit})

    def add_task(self, content: str, **fields: Any) -> Task:
        return Task.from_api(self.request("post", "/tasks", payload=_clean({"content": content, **fields})))

    def update_task(self, task_id: str, **fields: Any) -> Task:
        return Task.from_api(self.request("post", self._item_path("tasks", task_id), payload=_clean(fields)))

    def close_task(self, task_id: str) -> None:
        self.request("post", self._item_path("tasks", task_id, "/close"))

    def reopen_task(self, task_id: str) -> None:
        self.request("post", self._item_path("tasks", task_id, "/reopen"))

    def delete_task(self, task_id: str) -> None:
        self.request("delete", self._item_path("tasks", task_id))

    # Projects
    def get_project(self, project_id: str) -> Project:
        return Project.from_api(self.request("get", self._item_path("projects", project_id)))

    def get_projects(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Project]:
        return self._page("/projects", Project, {"cursor": cursor, "limit": limit})

    def add_project(self, name: str, **fields: Any) -> Project:
        return Project.from_api(self.request("post", "/projects", payload=_clean({"name": name, **fields})))

    def update_project(self, project_id: str, **fields: Any) -> Project:
        return Project.from_api(self.request("post", self._item_path("projects", project_id), payload=_clean(fields)))

    def delete_project(self, project_id: str) -> None:
        self.request("delete", self._item_path("projects", project_id))

    # Sections
    def get_section(self, section_id: str) -> Section:
        return Section.from_api(self.request("get", self._item_path("sections", section_id)))

    def get_sections(
        self, project_id: Optional[str] = None, cursor: Optional[str] = None, limit: Optional[int] = None
    ) -> Page[Section]:
        return self._page("/sections", Section, {"project_id": project_id, "cursor": cursor, "limit": limit})

    def add_section(self, name: str, project_id: str) -> Section:
        return Section.from_api(self.request("post", "/sections", payload={"name": name, "project_id": project_id}))

    def update_section(self, section_id: str, name: str) -> Section:
        return Section.from_api(self.request("post", self._item_path("sections", section_id), payload={"name": name}))

    def delete_section(self, section_id: str) -> None:
        self.request("delete", self._item_path("sections", section_id))

    # Labels
    def get_label(self, label_id: str) -> Label:
        return Label.from_api(self.request("get", self._item_path("labels", label_id)))

    def get_labels(self, cursor: Optional[str] = None, limit: Optional[int] = None) -> Page[Label]:
        return self._page("/labels", Label, {"cursor": cursor, "limit": limit})

    def add_label(self, name: str, **fields: Any) -> Label:
        return Label.from_api(self.request("post", "/labels", payload=_clean({"name": name, **fields})))

    def update_label(self, label_id: str, **fields: Any) -> Label:
        return Label.from_api(self.request("post", self._item_path("labels", label_id), payload=_clean(fields)))

    def delete_label(self, label_id: str) -> None:
        self.request("delete", self._item_path("labels", label_id))

    # Comments
    def get_comments(
        self,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Page[Comment]:
        params = {"task_id": task_id, "project_id": project_id, "cursor": cursor, "limit": limit}
        return self._page("/comments", Comment, params)

    def add_comment(self, content: str, task_id: Optional[str] = None, project_id: Optional[str] = None) -> Comment:
        payload = _clean({"content": content, "task_id": task_id, "project_id": project_id})
        return Comment.from_api(self.request("post", "/comments", payload=payload))

    def delete_comment(self, comment_id: str) -> None:
        self.request("delete", self._item_path("comments", comment_id))

    # User
    def get_user(self) -> User:
        return User.from_api(self.request("get", "/user"))


_current_user_id: Optional[str] = None


def get_current_user_id(api) -> str:
    """Id of the authenticated user, fetched once per process."""
    global _current_user_id
    if _current_user_id is None:
        _current_user_id = api.get_user().id
    return _current_user_id


def clear_current_user_cache() -> None:
    global _current_user_id
    _current_user_id = None


__all__ = [
    "REST_BASE",
    "TodoistApiError",
    "TodoistPermissionError",
    "TodoistNotFoundError",
    "TodoistRateLimitError",
    "TodoistRestClient",
    "get_current_user_id",
    "clear_current_user_cache",
]
