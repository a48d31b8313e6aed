from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Id = Union[int, str]
Order = Literal["asc", "desc"]
Currency = Literal["CZK", "EUR", "USD"]


class FreeloInput(BaseModel):
    """Base for tool payloads: unknown keys rejected, unset keys never sent upstream."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def dump(model: Optional[FreeloInput]) -> Dict[str, Any]:
    return model.payload() if model is not None else {}


class DateRange(FreeloInput):
    date_from: Optional[str] = Field(None, description="YYYY-MM-DD")
    date_to: Optional[str] = Field(None, description="YYYY-MM-DD")


# --- Projects -------------------------------------------------------------- #


class ProjectCreateInput(FreeloInput):
    name: str
    currency_iso: Currency
    project_owner_id: Optional[str] = None

    @field_validator("project_owner_id", mode="before")
    @classmethod
    def _owner_as_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value


class ProjectFromTemplateInput(FreeloInput):
    name: str
    currency_iso: Optional[Currency] = None


class TemplateProjectFilters(FreeloInput):
    order_by: Optional[Literal["name", "date_add", "date_edited_at"]] = None
    order: Optional[Order] = None
    tags: Optional[List[str]] = None
    users_ids: Optional[List[str]] = None
    page: Optional[int] = None


class UserProjectFilters(FreeloInput):
    states_ids: Optional[List[int]] = None
    order_by: Optional[Literal["name", "date_add", "date_edited_at"]] = None
    order: Optional[Order] = None
    page: Optional[int] = None


# --- Tasklists / tasks ----------------------------------------------------- #


class TasklistCreateInput(FreeloInput):
    name: str
    description: Optional[str] = None
    color: Optional[str] = None


class TasklistFilters(FreeloInput):
    projects_ids: Optional[List[Id]] = None
    p: Optional[int] = Field(None, description="Page number (0-based)")


class TaskCreateInput(FreeloInput):
    name: str
    description: Optional[str] = None
    assigned_to: Optional[str] = Field(None, alias="assignedTo")
    due_date: Optional[str] = Field(None, alias="dueDate")


class TaskEditInput(FreeloInput):
    name: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[str] = Field(None, alias="assignedTo")
    due_date: Optional[str] = Field(None, alias="dueDate")
    priority: Optional[int] = None
    status: Optional[str] = None


class TaskFilters(FreeloInput):
    search_query: Optional[str] = None
    state_id: Optional[int] = None
    projects_ids: Optional[List[Id]] = None
    tasklists_ids: Optional[List[Id]] = None
    order_by: Optional[Literal["priority", "name", "date_add", "date_edited_at"]] = None
    order: Optional[Order] = None
    with_label: Optional[str] = None
    without_label: Optional[str] = None
    no_due_date: Optional[bool] = None
    due_date_range: Optional[DateRange] = None
    finished_overdue: Optional[bool] = None
    finished_date_range: Optional[DateRange] = None
    worker_id: Optional[int] = None
    p: Optional[int] = Field(None, description="Page number (0-based)")


class ReminderInput(FreeloInput):
    date: str = Field(description="Reminder date in ISO 8601 format")
    user_ids: Optional[List[str]] = None


# --- Comments / labels ----------------------------------------------------- #


class CommentFile(FreeloInput):
    download_url: str
    filename: str


class CommentCreateInput(FreeloInput):
    content: str
    attachments: Optional[List[str]] = None
    files: Optional[List[CommentFile]] = None


class CommentEditInput(FreeloInput):
    content: str
    files: Optional[List[CommentFile]] = None


class CommentFilters(FreeloInput):
    projects_ids: Optional[List[Id]] = None
    type: Optional[Literal["all", "task", "document", "file", "link"]] = None
    order_by: Optional[Literal["date_add", "date_edited_at"]] = None
    order: Optional[Order] = None
    p: Optional[int] = None


class LabelInput(FreeloInput):
    name: str
    color: Optional[str] = Field(None, description="Hex color, e.g. #ff0000")
    project_id: Optional[Id] = None


# --- Files / users / time -------------------------------------------------- #


class FileFilters(FreeloInput):
    projects_ids: Optional[List[Id]] = None
    type: Optional[Literal["directory", "link", "file", "document"]] = None
    p: Optional[int] = None


class OutOfOfficeInput(FreeloInput):
    date_from: str
    date_to: str
    reason: Optional[str] = None


class TrackingEditInput(FreeloInput):
    task_id: Optional[str] = None
    description: Optional[str] = None


class WorkReportFilters(FreeloInput):
    projects_ids: Optional[List[Id]] = None
    users_ids: Optional[List[Id]] = None
    tasks_labels: Optional[List[str]] = None
    date_reported_range: Optional[DateRange] = None
    p: Optional[int] = None


class WorkReportInput(FreeloInput):
    minutes: int
    date: str = Field(description="YYYY-MM-DD")
    description: Optional[str] = None


class WorkReportUpdateInput(FreeloInput):
    minutes: Optional[int] = None
    date: Optional[str] = None
    description: Optional[str] = None


# --- Custom fields --------------------------------------------------------- #


class CustomFieldInput(FreeloInput):
    name: str
    type: str
    is_required: Optional[Literal["yes", "no"]] = None


class FieldValueInput(FreeloInput):
    task_id: Id
    custom_field_uuid: str
    value: Union[bool, int, float, str]


class EnumValueInput(FreeloInput):
    task_id: Id
    custom_field_uuid: str
    enum_option_uuid: str


class EnumOptionInput(FreeloInput):
    name: str
    color: Optional[str] = None


# --- Misc ------------------------------------------------------------------ #


class InvoiceFilters(FreeloInput):
    project_id: Optional[Id] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    p: Optional[int] = None


class NotificationFilters(FreeloInput):
    page: Optional[int] = None
    limit: Optional[int] = None


class NoteInput(FreeloInput):
    name: str
    content: str


class NoteUpdateInput(FreeloInput):
    name: Optional[str] = None
    content: Optional[str] = None


class EventFilters(FreeloInput):
    projects_ids: Optional[List[Id]] = None
    users_ids: Optional[List[Id]] = None
    events_types: Optional[List[str]] = None
    tasks_ids: Optional[List[Id]] = None
    order: Optional[Order] = None
    date_range: Optional[DateRange] = None
    p: Optional[int] = None


class PinItemInput(FreeloInput):
    type: Literal["task", "note", "file"]
    item_id: str
    link: Optional[str] = None


class SearchInput(FreeloInput):
    search_query: str = Field(min_length=1)
    projects_ids: Optional[List[Id]] = None
    tasklists_ids: Optional[List[Id]] = None
    tasks_ids: Optional[List[Id]] = None
    authors_ids: Optional[List[Id]] = None
    workers_ids: Optional[List[Id]] = None
    state_ids: Optional[List[str]] = None
    entity_type: Optional[
        Literal["task", "subtask", "project", "tasklist", "file", "comment"]
    ] = None
    page: Optional[int] = None
    limit: Optional[int] = None
