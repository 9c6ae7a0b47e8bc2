"""Tasks API endpoints."""

from __future__ import annotations

from typing import Optional

from todoist_bridge.api.base import ResourceAPI
from todoist_bridge.api.models import Task, TaskCreate, TaskFilters, TaskUpdate


class TasksAPI(ResourceAPI):
    """Tasks API client."""

    async def list_tasks(
        self,
        filters: Optional[TaskFilters] = None,
        *,
        priority: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[Task]:
        """List active tasks.

        ``priority`` and ``limit`` are applied locally after the fetch; the
        service has no parameter for either, so a small limit does not make
        the request any cheaper.
        """
        params = filters.to_params() if filters else {}
        data = await self.client.get("/tasks", params=params)
        tasks = self._parse_list(Task, data)

        if priority is not None:
            tasks = [t for t in tasks if t.priority == priority]
        if limit is not None and limit > 0:
            tasks = tasks[:limit]
        return tasks

    async def get_task(self, task_id: str) -> Task:
        """Get a specific task by ID."""
        self._require_id(task_id, "task_id")
        data = await self.client.get(f"/tasks/{task_id}")
        return self._parse(Task, data)

    async def create_task(self, task: TaskCreate) -> Task:
        """Create a new task."""
        data = await self.client.post("/tasks", json=task.to_payload())
        return self._parse(Task, data)

    async def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        """Update a task, sending only the fields set on ``updates``."""
        self._require_id(task_id, "task_id")
        data = await self.client.post(f"/tasks/{task_id}", json=updates.to_payload())
        return self._parse(Task, data)

    async def complete_task(self, task_id: str) -> bool:
        """Mark a task as completed."""
        self._require_id(task_id, "task_id")
        await self.client.post(f"/tasks/{task_id}/close")
        return True

    async def reopen_task(self, task_id: str) -> bool:
        """Reopen a completed task."""
        self._require_id(task_id, "task_id")
        await self.client.post(f"/tasks/{task_id}/reopen")
        return True

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task."""
        self._require_id(task_id, "task_id")
        await self.client.delete(f"/tasks/{task_id}")
        return True

    async def search_tasks(self, query: str, *, limit: Optional[int] = None) -> list[Task]:
        """Case-insensitive substring search over task content and description."""
        needle = query.lower()
        matches = [
            t
            for t in await self.list_tasks()
            if needle in t.content.lower() or needle in t.description.lower()
        ]
        if limit is not None and limit > 0:
            matches = matches[:limit]
        return matches

    async def find_tasks_by_name(self, name: str) -> list[Task]:
        """Find active tasks whose content contains ``name`` (case-insensitive)."""
        needle = name.lower()
        return [t for t in await self.list_tasks() if needle in t.content.lower()]
