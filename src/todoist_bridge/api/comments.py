"""Comments API endpoints."""

from __future__ import annotations

from typing import Optional

from todoist_bridge.api.base import ResourceAPI
from todoist_bridge.api.models import Comment, CommentCreate, CommentUpdate


class CommentsAPI(ResourceAPI):
    """Comments API client.

    A comment belongs to exactly one task or one project. That rule is left
    to the service; whatever it answers for a bad combination is raised as a
    :class:`~todoist_bridge.api.errors.RemoteAPIError`.
    """

    async def list_comments(
        self,
        task_id: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> list[Comment]:
        """List comments of a task or a project."""
        params = {"task_id": task_id or None, "project_id": project_id or None}
        data = await self.client.get("/comments", params=params)
        return self._parse_list(Comment, data)

    async def get_comment(self, comment_id: str) -> Comment:
        self._require_id(comment_id, "comment_id")
        data = await self.client.get(f"/comments/{comment_id}")
        return self._parse(Comment, data)

    async def create_comment(self, comment: CommentCreate) -> Comment:
        data = await self.client.post("/comments", json=comment.to_payload())
        return self._parse(Comment, data)

    async def update_comment(self, comment_id: str, content: str) -> Comment:
        """Replace a comment's content."""
        self._require_id(comment_id, "comment_id")
        payload = CommentUpdate(content=content).to_payload()
        data = await self.client.post(f"/comments/{comment_id}", json=payload)
        return self._parse(Comment, data)

    async def delete_comment(self, comment_id: str) -> bool:
        self._require_id(comment_id, "comment_id")
        await self.client.delete(f"/comments/{comment_id}")
        return True
