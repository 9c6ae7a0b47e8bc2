"""Tests for resource models and request payload structs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from todoist_bridge.api.models import (
    CommentCreate,
    Label,
    LabelCreate,
    Project,
    ProjectCreate,
    ProjectUpdate,
    SectionCreate,
    Task,
    TaskCreate,
    TaskFilters,
    TaskUpdate,
)


# ---------------------------------------------------------------------------
# Resource parsing
# ---------------------------------------------------------------------------


class TestResources:
    def test_task_minimal(self):
        task = Task.model_validate({"id": "1", "content": "x"})
        assert task.priority == 1
        assert task.labels == []
        assert task.due is None
        assert task.is_completed is False

    def test_task_ignores_unknown_fields(self):
        task = Task.model_validate({"id": "1", "content": "x", "duration": {"amount": 5}})
        assert not hasattr(task, "duration")

    def test_task_priority_out_of_range(self):
        with pytest.raises(ValidationError):
            Task.model_validate({"id": "1", "content": "x", "priority": 5})

    def test_project_defaults_to_list_view(self):
        assert Project.model_validate({"id": "p", "name": "P"}).view_style == "list"

    def test_label_order(self):
        assert Label.model_validate({"id": "l", "name": "n", "order": 3}).order == 3

    def test_due_without_date_still_parses(self):
        task = Task.model_validate({"id": "1", "content": "x", "due": {"string": "someday"}})
        assert task.due.date == ""
        assert task.due.string == "someday"


# ---------------------------------------------------------------------------
# Payload serialization
# ---------------------------------------------------------------------------


class TestPayloads:
    def test_only_set_fields_emitted(self):
        assert TaskUpdate(priority=3).to_payload() == {"priority": 3}

    def test_empty_update_emits_nothing(self):
        assert TaskUpdate().to_payload() == {}

    def test_explicit_none_is_present(self):
        assert TaskUpdate(description=None).to_payload() == {"description": None}

    def test_create_keeps_required_content(self):
        assert TaskCreate(content="a").to_payload() == {"content": "a"}

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            TaskUpdate(colour="red")

    def test_filters_join_ids(self):
        assert TaskFilters(ids=["1", "2"]).to_params() == {"ids": "1,2"}

    def test_filters_empty(self):
        assert TaskFilters().to_params() == {}


# ---------------------------------------------------------------------------
# Field bounds
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize("content", ["", "x" * 501])
    def test_task_content_bounds(self, content):
        with pytest.raises(ValidationError):
            TaskCreate(content=content)

    def test_task_content_max_length_ok(self):
        assert TaskCreate(content="x" * 500).content == "x" * 500

    @pytest.mark.parametrize("priority", [0, 5])
    def test_task_priority_bounds(self, priority):
        with pytest.raises(ValidationError):
            TaskCreate(content="x", priority=priority)

    def test_project_name_bounds(self):
        with pytest.raises(ValidationError):
            ProjectCreate(name="")
        with pytest.raises(ValidationError):
            ProjectCreate(name="x" * 121)

    def test_project_view_style_enum(self):
        assert ProjectUpdate(view_style="board").view_style == "board"
        with pytest.raises(ValidationError):
            ProjectUpdate(view_style="calendar")

    def test_section_requires_project(self):
        with pytest.raises(ValidationError):
            SectionCreate(name="s")

    def test_label_name_bounds(self):
        with pytest.raises(ValidationError):
            LabelCreate(name="x" * 51)

    def test_comment_requires_content(self):
        with pytest.raises(ValidationError):
            CommentCreate(task_id="t1", content="")
