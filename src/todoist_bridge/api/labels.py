"""Labels API endpoints."""

from __future__ import annotations

from todoist_bridge.api.base import ResourceAPI
from todoist_bridge.api.models import Label, LabelCreate, LabelUpdate


class LabelsAPI(ResourceAPI):
    """Personal labels API client."""

    async def list_labels(self) -> list[Label]:
        """List all labels."""
        data = await self.client.get("/labels")
        return self._parse_list(Label, data)

    async def get_label(self, label_id: str) -> Label:
        """Get a specific label by ID."""
        self._require_id(label_id, "label_id")
        data = await self.client.get(f"/labels/{label_id}")
        return self._parse(Label, data)

    async def create_label(self, label: LabelCreate) -> Label:
        """Create a new label."""
        data = await self.client.post("/labels", json=label.to_payload())
        return self._parse(Label, data)

    async def update_label(self, label_id: str, updates: LabelUpdate) -> Label:
        """Update a label."""
        self._require_id(label_id, "label_id")
        data = await self.client.post(f"/labels/{label_id}", json=updates.to_payload())
        return self._parse(Label, data)

    async def delete_label(self, label_id: str) -> bool:
        """Delete a label. Tasks referencing it by name lose the label."""
        self._require_id(label_id, "label_id")
        await self.client.delete(f"/labels/{label_id}")
        return True
