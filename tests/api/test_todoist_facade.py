"""Tests for the TodoistAPI facade."""

from __future__ import annotations

import httpx
import pytest

from todoist_bridge.api import TodoistAPI, TokenBucket
from todoist_bridge.api.comments import CommentsAPI
from todoist_bridge.api.errors import RateLimitExceeded
from todoist_bridge.api.labels import LabelsAPI
from todoist_bridge.api.models import TaskCreate
from todoist_bridge.api.projects import ProjectsAPI
from todoist_bridge.api.sections import SectionsAPI
from todoist_bridge.api.tasks import TasksAPI
from todoist_bridge.config import Config

from tests.conftest import respond


class TestTodoistAPI:
    def test_resource_apis_share_one_client(self):
        api = TodoistAPI("tok")

        assert isinstance(api.tasks, TasksAPI)
        assert isinstance(api.projects, ProjectsAPI)
        assert isinstance(api.sections, SectionsAPI)
        assert isinstance(api.labels, LabelsAPI)
        assert isinstance(api.comments, CommentsAPI)
        resources = (api.tasks, api.projects, api.sections, api.labels, api.comments)
        clients = {id(r.client) for r in resources}
        assert clients == {id(api.client)}

    def test_from_config(self):
        config = Config.model_validate(
            {
                "api": {"base_url": "https://example.test/rest/v2", "timeout": 5},
                "rate_limit": {"capacity": 10, "window_seconds": 60},
            }
        )
        api = TodoistAPI.from_config("tok", config)

        assert api.client.base_url == "https://example.test/rest/v2"
        assert api.client.timeout == 5
        assert api.client.rate_limiter.capacity == 10

    @pytest.mark.asyncio
    async def test_one_budget_across_resources(self, make_api, sent):
        api = make_api(respond(200, json_body=[]), rate_limiter=TokenBucket(2, 0))

        await api.tasks.list_tasks()
        await api.labels.list_labels()
        with pytest.raises(RateLimitExceeded):
            await api.projects.list_projects()

        assert len(sent) == 2

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self, make_api):
        async with make_api(respond(200, json_body=[])) as api:
            await api.tasks.list_tasks()
            assert api.client._client is not None

        assert api.client._client is None

    @pytest.mark.asyncio
    async def test_create_then_delete_scenario(self, make_api, sent):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(
                    200,
                    json={"id": "1", "content": "Buy milk", "priority": 2, "labels": []},
                )
            return httpx.Response(204)

        api = make_api(handler)
        task = await api.tasks.create_task(TaskCreate(content="Buy milk", priority=2))
        assert task.id == "1"
        assert await api.tasks.delete_task(task.id) is True
        assert [r.method for r in sent] == ["POST", "DELETE"]
