"""Facade bundling every resource API over one shared client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import httpx

from todoist_bridge.api.client import DEFAULT_BASE_URL, APIClient
from todoist_bridge.api.comments import CommentsAPI
from todoist_bridge.api.labels import LabelsAPI
from todoist_bridge.api.projects import ProjectsAPI
from todoist_bridge.api.rate_limiter import TokenBucket
from todoist_bridge.api.sections import SectionsAPI
from todoist_bridge.api.tasks import TasksAPI

if TYPE_CHECKING:
    from todoist_bridge.config import Config


class TodoistAPI:
    """Entry point for callers: ``api.tasks``, ``api.projects`` and so on.

    All resource APIs share one :class:`APIClient`, and therefore one token
    bucket, unless a bucket shared with other clients is passed in.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        rate_limiter: Optional[TokenBucket] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.client = APIClient(
            token,
            base_url=base_url,
            timeout=timeout,
            rate_limiter=rate_limiter,
            transport=transport,
        )
        self.tasks = TasksAPI(self.client)
        self.projects = ProjectsAPI(self.client)
        self.sections = SectionsAPI(self.client)
        self.labels = LabelsAPI(self.client)
        self.comments = CommentsAPI(self.client)

    @classmethod
    def from_config(cls, token: str, config: Config, **kwargs: Any) -> TodoistAPI:
        """Build a client using the base URL, timeout and quota from ``config``."""
        return cls(
            token,
            base_url=config.api.base_url,
            timeout=config.api.timeout,
            rate_limiter=TokenBucket.from_config(config.rate_limit),
            **kwargs,
        )

    async def close(self) -> None:
        await self.client.close()

    async def __aenter__(self) -> TodoistAPI:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
