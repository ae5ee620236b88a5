import pytest

from core import Comment, Label, Page, Project, Section, Task, User
from infrastructure.todoist import TodoistNotFoundError, clear_current_user_cache
from interface import cli_api


def task(id, content, **fields):
    raw = {"id": id, "content": content, **fields}
    return Task.from_api(raw)


def project(id, name, **fields):
    return Project.from_api({"id": id, "name": name, **fields})


def section(id, name, project_id, **fields):
    return Section.from_api({"id": id, "name": name, "project_id": project_id, **fields})


def label(id, name, **fields):
    return Label.from_api({"id": id, "name": name, **fields})


def comment(id, content, task_id, **fields):
    return Comment.from_api({"id": id, "content": content, "task_id": task_id, **fields})


def _page(items, cursor, limit):
    start = int(cursor or 0)
    size = limit or 50
    chunk = items[start:start + size]
    end = start + len(chunk)
    return Page(results=chunk, next_cursor=str(end) if end < len(items) else None)


class FakeApi:
    """In-memory backend; list endpoints page through integer-offset cursors."""

    def __init__(self, tasks=(), projects=(), sections=(), labels=(), comments=(), user=None):
        self.tasks = list(tasks)
        self.projects = list(projects)
        self.sections = list(sections)
        self.labels = list(labels)
        self.comments = list(comments)
        self.user = user or User(id="u1", full_name="Ada Lovelace", email="ada@example.com")
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def called(self, name):
        return [call for call in self.calls if call[0] == name]

    @staticmethod
    def _by_id(items, item_id, kind):
        for item in items:
            if item.id == item_id:
                return item
        raise TodoistNotFoundError(f"{kind} {item_id} not found", 404)

    # Tasks
    def get_task(self, task_id):
        self._record("get_task", task_id)
        return self._by_id(self.tasks, task_id, "task")

    def get_tasks(self, project_id=None, section_id=None, parent_id=None, label=None, cursor=None, limit=None):
        self._record("get_tasks", project_id=project_id, section_id=section_id, cursor=cursor, limit=limit)
        items = [
            t
            for t in self.tasks
            if (project_id is None or t.project_id == project_id)
            and (section_id is None or t.section_id == section_id)
            and (parent_id is None or t.parent_id == parent_id)
            and (label is None or label in t.labels)
        ]
        return _page(items, cursor, limit)

    def filter_tasks(self, query, cursor=None, limit=None):
        self._record("filter_tasks", query, cursor=cursor, limit=limit)
        items = [t for t in self.tasks if query.lower() in t.content.lower()]
        return _page(items, cursor, limit)

    def add_task(self, content, **fields):
        self._record("add_task", content, **fields)
        due = {"date": "2026-10-20", "string": fields["due_string"]} if fields.get("due_string") else None
        created = task(f"t{len(self.tasks) + 100}", content, due=due, **{k: v for k, v in fields.items() if k != "due_string"})
        self.tasks.append(created)
        return created

    def update_task(self, task_id, **fields):
        self._record("update_task", task_id, **fields)
        current = self._by_id(self.tasks, task_id, "task")
        return task(task_id, fields.get("content", current.content))

    def close_task(self, task_id):
        self._record("close_task", task_id)

    def reopen_task(self, task_id):
        self._record("reopen_task", task_id)

    def delete_task(self, task_id):
        self._record("delete_task", task_id)

    # Projects
    def get_project(self, project_id):
        self._record("get_project", project_id)
        return self._by_id(self.projects, project_id, "project")

    def get_projects(self, cursor=None, limit=None):
        self._record("get_projects", cursor=cursor, limit=limit)
        return _page(self.projects, cursor, limit)

    def add_project(self, name, **fields):
        self._record("add_project", name, **fields)
        return project("p-new", name, **fields)

    def update_project(self, project_id, **fields):
        self._record("update_project", project_id, **fields)
        return self._by_id(self.projects, project_id, "project")

    def delete_project(self, project_id):
        self._record("delete_project", project_id)

    # Sections
    def get_section(self, section_id):
        self._record("get_section", section_id)
        return self._by_id(self.sections, section_id, "section")

    def get_sections(self, project_id=None, cursor=None, limit=None):
        self._record("get_sections", project_id=project_id, cursor=cursor, limit=limit)
        items = [s for s in self.sections if project_id is None or s.project_id == project_id]
        return _page(items, cursor, limit)

    def add_section(self, name, project_id):
        self._record("add_section", name, project_id)
        return section("s-new", name, project_id)

    def update_section(self, section_id, name):
        self._record("update_section", section_id, name)
        current = self._by_id(self.sections, section_id, "section")
        return section(section_id, name, current.project_id)

    def delete_section(self, section_id):
        self._record("delete_section", section_id)

    # Labels
    def get_label(self, label_id):
        self._record("get_label", label_id)
        return self._by_id(self.labels, label_id, "label")

    def get_labels(self, cursor=None, limit=None):
        self._record("get_labels", cursor=cursor, limit=limit)
        return _page(self.labels, cursor, limit)

    def add_label(self, name, **fields):
        self._record("add_label", name, **fields)
        return label("l-new", name, **fields)

    def update_label(self, label_id, **fields):
        self._record("update_label", label_id, **fields)
        return self._by_id(self.labels, label_id, "label")

    def delete_label(self, label_id):
        self._record("delete_label", label_id)

    # Comments
    def get_comments(self, task_id=None, project_id=None, cursor=None, limit=None):
        self._record("get_comments", task_id=task_id, cursor=cursor, limit=limit)
        items = [c for c in self.comments if task_id is None or c.task_id == task_id]
        return _page(items, cursor, limit)

    def add_comment(self, content, task_id=None, project_id=None):
        self._record("add_comment", content, task_id=task_id)
        return comment("c-new", content, task_id)

    def delete_comment(self, comment_id):
        self._record("delete_comment", comment_id)

    def get_user(self):
        self._record("get_user")
        return self.user


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("TD_CONFIG", str(tmp_path / "td.yaml"))
    monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)
    monkeypatch.setenv("TD_SPINNER", "false")
    clear_current_user_cache()
    yield
    clear_current_user_cache()


@pytest.fixture
def install_api(monkeypatch):
    """Route every command handler to the given fake backend."""

    def _install(api):
        monkeypatch.setattr(cli_api, "get_api", lambda: api)
        return api

    return _install
