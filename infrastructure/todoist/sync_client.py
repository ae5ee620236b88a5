import json
import logging
import uuid
from typing import Any, Callable, Dict, List, Optional

import requests

from .rest_client import TodoistApiError, TodoistPermissionError

SYNC_ENDPOINT = "https://api.todoist.com/api/v1/sync"

logger = logging.getLogger("td.sync")


class SyncApiError(TodoistApiError):
    pass


def sync_command(command_type: str, args: Dict[str, Any], temp_id: Optional[str] = None) -> Dict[str, Any]:
    command: Dict[str, Any] = {"type": command_type, "uuid": str(uuid.uuid4()), "args": args}
    if temp_id:
        command["temp_id"] = temp_id
    return command


class SyncClient:
    """Batch command endpoint, used for operations the REST API lacks."""

    def __init__(
        self,
        token_provider: Callable[[], Optional[str]],
        session: Optional[requests.Session] = None,
        endpoint: str = SYNC_ENDPOINT,
        timeout: int = 30,
    ) -> None:
        self.token_provider = token_provider
        self.session = session or requests.Session()
        self.endpoint = endpoint
        self.timeout = timeout

    def execute(self, commands: List[Dict[str, Any]]) -> Dict[str, Any]:
        token = self.token_provider()
        if not token:
            raise TodoistPermissionError("Todoist API token missing")
        headers = {"Authorization": f"Bearer {token}"}
        try:
            resp = self.session.post(
                self.endpoint,
                data={"commands": json.dumps(commands)},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise SyncApiError(f"Sync API network error: {exc}") from exc
        if resp.status_code >= 400:
            raise SyncApiError(f"Sync API error: {resp.status_code}", resp.status_code)
        payload = resp.json()
        if payload.get("error"):
            raise SyncApiError(f"Sync API error: {payload['error']}")
        statuses = payload.get("sync_status") or {}
        for command in commands:
            status = statuses.get(command["uuid"])
            if isinstance(status, dict) and "error" in status:
                logger.warning("sync command %s failed: %s", command["type"], status)
                raise SyncApiError(status["error"])
        return payload

    def complete_forever(self, task_id: str) -> None:
        """Complete a task, recurring ones included, without scheduling the next occurrence."""
        self.execute([sync_command("item_complete", {"id": task_id})])


__all__ = ["SYNC_ENDPOINT", "SyncApiError", "SyncClient", "sync_command"]
