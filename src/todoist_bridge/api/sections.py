"""Sections API endpoints."""

from __future__ import annotations

from typing import Optional

from todoist_bridge.api.base import ResourceAPI
from todoist_bridge.api.models import Section, SectionCreate, SectionUpdate


class SectionsAPI(ResourceAPI):
    """Sections API client."""

    async def list_sections(self, project_id: Optional[str] = None) -> list[Section]:
        """List sections, optionally only those of one project."""
        params = {"project_id": project_id} if project_id else None
        data = await self.client.get("/sections", params=params)
        return self._parse_list(Section, data)

    async def get_section(self, section_id: str) -> Section:
        self._require_id(section_id, "section_id")
        data = await self.client.get(f"/sections/{section_id}")
        return self._parse(Section, data)

    async def create_section(self, section: SectionCreate) -> Section:
        data = await self.client.post("/sections", json=section.to_payload())
        return self._parse(Section, data)

    async def update_section(self, section_id: str, updates: SectionUpdate) -> Section:
        """Rename a section."""
        self._require_id(section_id, "section_id")
        data = await self.client.post(
            f"/sections/{section_id}", json=updates.to_payload()
        )
        return self._parse(Section, data)

    async def delete_section(self, section_id: str) -> bool:
        self._require_id(section_id, "section_id")
        await self.client.delete(f"/sections/{section_id}")
        return True
