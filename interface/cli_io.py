import dataclasses
import json
from typing import Any, Callable, Dict, List, Optional, Sequence

from core import Due, Page, Task

from .cli_style import Fragment, dim, echo, plain

ESSENTIAL_FIELDS: Dict[str, Sequence[str]] = {
    "task": ("id", "content", "description", "project_id", "section_id", "parent_id", "labels", "priority", "due", "url"),
    "project": ("id", "name", "color", "is_favorite", "parent_id", "url"),
    "section": ("id", "name", "project_id"),
    "label": ("id", "name", "color", "is_favorite"),
    "comment": ("id", "content", "posted_at"),
}


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {k: v for k, v in dataclasses.asdict(value).items() if k != "raw"}
    return value


def entity_to_dict(entity: Any, kind: str, full: bool = False) -> Dict[str, Any]:
    """JSON view of an entity: every backend field with ``full``, essentials otherwise."""
    raw = getattr(entity, "raw", None)
    if full and raw:
        return dict(raw)
    return {name: _jsonable(getattr(entity, name, None)) for name in ESSENTIAL_FIELDS[kind]}


def format_paginated_json(page: Page, kind: str, full: bool = False) -> str:
    body = {
        "results": [entity_to_dict(item, kind, full) for item in page.results],
        "nextCursor": page.next_cursor,
    }
    return json.dumps(body, ensure_ascii=False, indent=2)


def format_paginated_ndjson(page: Page, kind: str, full: bool = False) -> str:
    lines = [json.dumps(entity_to_dict(item, kind, full), ensure_ascii=False) for item in page.results]
    if page.next_cursor:
        lines.append(json.dumps({"_meta": True, "nextCursor": page.next_cursor}))
    return "\n".join(lines)


def format_next_cursor_footer(next_cursor: Optional[str]) -> str:
    if not next_cursor:
        return ""
    return f"\n... more items exist. Use --cursor {next_cursor} to continue."


def format_due(due: Optional[Due]) -> str:
    if due is None:
        return ""
    return due.string or due.date


def task_row(task: Task, project_name: Optional[str] = None) -> List[Fragment]:
    fragments: List[Fragment] = [dim(task.id), plain("  "), dim(task.priority_label), plain("  "), plain(task.content)]
    if task.due:
        fragments.append(("class:text.dim", f"  due:{format_due(task.due)}"))
        if task.due.is_recurring:
            fragments.append(dim(" (recurring)"))
    if project_name:
        fragments.append(dim(f"  #{project_name}"))
    for label in task.labels:
        fragments.append(("class:label", f"  @{label}"))
    return fragments


def emit_page(args: Any, page: Page, kind: str, render_text: Callable[[List[Any]], None]) -> int:
    """Print a page as JSON, NDJSON or text (with a "more items" footer)."""
    full = bool(getattr(args, "full", False))
    if getattr(args, "json", False):
        print(format_paginated_json(page, kind, full))
        return 0
    if getattr(args, "ndjson", False):
        output = format_paginated_ndjson(page, kind, full)
        if output:
            print(output)
        return 0
    render_text(page.results)
    footer = format_next_cursor_footer(page.next_cursor)
    if footer:
        echo([dim(footer)])
    return 0


__all__ = [
    "ESSENTIAL_FIELDS",
    "entity_to_dict",
    "format_paginated_json",
    "format_paginated_ndjson",
    "format_next_cursor_footer",
    "format_due",
    "task_row",
    "emit_page",
]
