"""Pydantic models for Todoist REST v2 resources and request payloads."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ViewStyle = Literal["list", "board"]


# ---------------------------------------------------------------------------
# Resources (decoded responses)
# ---------------------------------------------------------------------------


class _Resource(BaseModel):
    """Base for response models; unknown service fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class Due(_Resource):
    """Due date object from Todoist API."""

    date: str = ""
    string: str = ""
    is_recurring: bool = False
    datetime: str | None = None
    timezone: str | None = None
    lang: str | None = None


class Task(_Resource):
    """A Todoist task."""

    id: str
    content: str
    description: str = ""
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    order: int = 0
    priority: int = Field(default=1, ge=1, le=4)
    labels: list[str] = Field(default_factory=list)
    due: Due | None = None
    url: str | None = None
    comment_count: int = 0
    is_completed: bool = False
    creator_id: str | None = None
    created_at: str | None = None
    assignee_id: str | None = None
    assigner_id: str | None = None


class Project(_Resource):
    """A Todoist project."""

    id: str
    name: str
    color: str | None = None
    parent_id: str | None = None
    order: int = 0
    comment_count: int = 0
    is_shared: bool = False
    is_favorite: bool = False
    is_archived: bool = False
    is_inbox_project: bool = False
    is_team_inbox: bool = False
    view_style: ViewStyle = "list"
    url: str | None = None


class Section(_Resource):
    """A section within a project."""

    id: str
    project_id: str
    name: str
    order: int = 0


class Label(_Resource):
    """A personal label. Tasks reference labels by name."""

    id: str
    name: str
    color: str | None = None
    order: int = 0
    is_favorite: bool = False


class Attachment(_Resource):
    """File attached to a comment."""

    file_name: str | None = None
    file_type: str | None = None
    file_url: str | None = None
    resource_type: str | None = None


class Comment(_Resource):
    """A comment on either a task or a project."""

    id: str
    content: str
    task_id: str | None = None
    project_id: str | None = None
    posted_at: str | None = None
    attachment: Attachment | None = None


# ---------------------------------------------------------------------------
# Request payloads
#
# Only fields the caller actually set are sent, so a partial update never
# overwrites remote fields it did not mention. An explicit ``None`` counts as
# set and is sent as ``null``.
# ---------------------------------------------------------------------------


class _Payload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly provided."""
        return self.model_dump(exclude_unset=True, mode="json")


class TaskFilters(_Payload):
    """Query filters for listing tasks. Absent filters are not sent."""

    project_id: str | None = None
    section_id: str | None = None
    label: str | None = None
    filter: str | None = None
    lang: str | None = None
    ids: list[str] | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, value in self.model_dump(exclude_none=True).items():
            if key == "ids":
                if value:
                    params[key] = ",".join(value)
            elif value != "":
                params[key] = value
        return params


class TaskCreate(_Payload):
    content: str = Field(min_length=1, max_length=500)
    description: str | None = None
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    order: int | None = None
    priority: int | None = Field(default=None, ge=1, le=4)
    labels: list[str] | None = None
    due_string: str | None = None
    due_date: str | None = None
    due_datetime: str | None = None
    due_lang: str | None = None
    assignee_id: str | None = None


class TaskUpdate(_Payload):
    """Partial task update. Setting project_id, section_id or parent_id moves
    the task."""

    content: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    order: int | None = None
    priority: int | None = Field(default=None, ge=1, le=4)
    labels: list[str] | None = None
    due_string: str | None = None
    due_date: str | None = None
    due_datetime: str | None = None
    due_lang: str | None = None
    assignee_id: str | None = None


class ProjectCreate(_Payload):
    name: str = Field(min_length=1, max_length=120)
    parent_id: str | None = None
    color: str | None = None
    is_favorite: bool | None = None
    view_style: ViewStyle | None = None


class ProjectUpdate(_Payload):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    color: str | None = None
    is_favorite: bool | None = None
    view_style: ViewStyle | None = None


class SectionCreate(_Payload):
    name: str = Field(min_length=1, max_length=120)
    project_id: str = Field(min_length=1)
    order: int | None = None


class SectionUpdate(_Payload):
    name: str = Field(min_length=1, max_length=120)


class LabelCreate(_Payload):
    name: str = Field(min_length=1, max_length=50)
    order: int | None = None
    color: str | None = None
    is_favorite: bool | None = None


class LabelUpdate(_Payload):
    name: str | None = Field(default=None, min_length=1, max_length=50)
    order: int | None = None
    color: str | None = None
    is_favorite: bool | None = None


class CommentCreate(_Payload):
    """New comment. Exactly one of task_id/project_id is expected; the service
    rejects anything else."""

    content: str = Field(min_length=1)
    task_id: str | None = None
    project_id: str | None = None
    attachment: Attachment | None = None


class CommentUpdate(_Payload):
    content: str = Field(min_length=1)
