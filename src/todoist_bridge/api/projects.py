"""Projects API endpoints."""

from __future__ import annotations

from todoist_bridge.api.base import ResourceAPI
from todoist_bridge.api.models import Project, ProjectCreate, ProjectUpdate


class ProjectsAPI(ResourceAPI):
    """Projects API client."""

    async def list_projects(self) -> list[Project]:
        """List all projects."""
        data = await self.client.get("/projects")
        return self._parse_list(Project, data)

    async def get_project(self, project_id: str) -> Project:
        """Get a specific project by ID."""
        self._require_id(project_id, "project_id")
        data = await self.client.get(f"/projects/{project_id}")
        return self._parse(Project, data)

    async def create_project(self, project: ProjectCreate) -> Project:
        """Create a new project."""
        data = await self.client.post("/projects", json=project.to_payload())
        return self._parse(Project, data)

    async def update_project(self, project_id: str, updates: ProjectUpdate) -> Project:
        """Update a project."""
        self._require_id(project_id, "project_id")
        data = await self.client.post(
            f"/projects/{project_id}", json=updates.to_payload()
        )
        return self._parse(Project, data)

    async def delete_project(self, project_id: str) -> bool:
        """Delete a project along with its sections and tasks."""
        self._require_id(project_id, "project_id")
        await self.client.delete(f"/projects/{project_id}")
        return True
