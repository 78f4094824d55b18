# solidarity_client/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Literal, Optional, TypedDict
from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Params(BaseModel):
    # vendor fields not modelled here are passed through untouched
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# ================= Query parameters =================
class PageQuery(_Params):
    limit: int | None = Field(default=None, alias="_limit", ge=1)
    offset: int | None = Field(default=None, alias="_offset", ge=0)


class ActivitiesQuery(PageQuery):
    user_id: int | None = None
    activity_type: str | None = None


class CallsQuery(PageQuery):
    user_id: int | None = None
    phonebank_id: int | None = None


class UsersQuery(PageQuery):
    email: str | None = None
    phone_number: str | None = None
    chapter_id: int | None = None
    updated_since: datetime | None = None


class TextsQuery(PageQuery):
    user_id: int | None = None
    chapter_id: int | None = None
    direction: Literal["inbound", "outbound"] | None = None


class EventRsvpsQuery(PageQuery):
    event_id: int | None = None
    event_session_id: int | None = None
    user_id: int | None = None


class EventSessionsQuery(PageQuery):
    event_id: int | None = None


class EventAttendancesQuery(PageQuery):
    event_session_id: int | None = None
    user_id: int | None = None


class TaskQuery(PageQuery):
    scheduled_task_id: int | None = None
    user_id: int | None = None


class SendTextQuery(_Params):
    body: str = Field(min_length=1)
    user_id: int | None = None
    phone_number: str | None = None
    chapter_phone_number_id: int | None = None

    @model_validator(mode="after")
    def _has_recipient(self) -> "SendTextQuery":
        if self.user_id is None and not self.phone_number:
            raise ValueError("either user_id or phone_number is required")
        return self


class UserNoteQuery(_Params):
    user_id: int
    content: str = Field(min_length=1)


# ================= Request bodies =================
class AgentAssignmentIn(_Params):
    user_id: int
    agent_user_id: int
    chapter_id: int | None = None


class AgentAssignmentUpdate(_Params):
    agent_user_id: int | None = None
    chapter_id: int | None = None


class EventAttendanceIn(_Params):
    user_id: int
    event_session_id: int
    attended: bool = True


class EventRsvpIn(_Params):
    user_id: int
    event_session_id: int
    status: str | None = None          # e.g. "yes", "no", "maybe"
    guests: int | None = Field(default=None, ge=0)


class EventRsvpUpdate(_Params):
    status: str | None = None
    guests: int | None = Field(default=None, ge=0)


class EventSessionIn(_Params):
    event_id: int
    start_time: datetime
    end_time: datetime | None = None
    location_name: str | None = None
    capacity: int | None = Field(default=None, ge=0)


class EventSessionUpdate(_Params):
    start_time: datetime | None = None
    end_time: datetime | None = None
    location_name: str | None = None
    capacity: int | None = Field(default=None, ge=0)


class ScheduledTaskIn(_Params):
    title: str = Field(min_length=1)
    user_id: int | None = None
    due_at: datetime | None = None
    notes: str | None = None


class ScheduledTaskUpdate(_Params):
    title: str | None = None
    due_at: datetime | None = None
    notes: str | None = None
    completed: bool | None = None


class TaskAgentIn(_Params):
    scheduled_task_id: int
    user_id: int


class TaskAssignmentIn(_Params):
    scheduled_task_id: int
    user_id: int
    agent_user_id: int | None = None
    status: str | None = None


class TaskAssignmentUpdate(_Params):
    agent_user_id: int | None = None
    status: str | None = None


class TextTemplateIn(_Params):
    name: str = Field(min_length=1)
    body: str = Field(min_length=1)
    chapter_id: int | None = None


class TextTemplateUpdate(_Params):
    name: str | None = None
    body: str | None = None
    chapter_id: int | None = None


class UserActionIn(_Params):
    """Action taken by a user on a page.

    Donation pages and scheduled call pages are rejected by the API.
    """
    user_id: int
    page_id: int
    answers: dict[str, Any] | None = None   # form field key -> value


class Address(_Params):
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class UserIn(_Params):
    phone_number: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    chapter_id: int | None = None
    preferred_language: str | None = None
    birthday: date | None = None
    address: Address | None = None
    custom_user_properties: dict[str, Any] | None = None
    add_tags: list[str] | None = None

    @model_validator(mode="after")
    def _has_identity(self) -> "UserIn":
        if not self.phone_number and not self.email:
            raise ValueError("either phone_number or email is required")
        return self


class UserUpdate(_Params):
    phone_number: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    chapter_id: int | None = None
    preferred_language: str | None = None
    birthday: date | None = None
    address: Address | None = None
    custom_user_properties: dict[str, Any] | None = None
    add_tags: list[str] | None = None
    remove_tags: list[str] | None = None


# ================= Responses (static shapes, not validated) =================
class PageMeta(TypedDict, total=False):
    total_count: int
    limit: int
    offset: int


class Page(TypedDict, total=False):
    data: list[dict[str, Any]]
    meta: PageMeta


class Record(TypedDict, total=False):
    data: dict[str, Any]


class Activity(TypedDict, total=False):
    id: int
    user_id: int
    activity_type: str
    description: str
    created_at: str


class Call(TypedDict, total=False):
    id: int
    user_id: int
    agent_user_id: Optional[int]
    phonebank_id: Optional[int]
    duration_seconds: int
    result: Optional[str]
    created_at: str


class Chapter(TypedDict, total=False):
    id: int
    name: str
    organization_id: int


class CustomUserProperty(TypedDict, total=False):
    id: int
    key: str
    name: str
    property_type: str
    options: list[str]


class Text(TypedDict, total=False):
    id: int
    user_id: int
    body: str
    direction: str
    status: str
    created_at: str


class User(TypedDict, total=False):
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    phone_number: Optional[str]
    chapter_id: Optional[int]
    tags: list[str]
    custom_user_properties: dict[str, Any]
    created_at: str
    updated_at: str


class ActivitiesPage(TypedDict, total=False):
    data: list[Activity]
    meta: PageMeta


class CallsPage(TypedDict, total=False):
    data: list[Call]
    meta: PageMeta


class ChaptersPage(TypedDict, total=False):
    data: list[Chapter]
    meta: PageMeta


class CustomUserPropertiesPage(TypedDict, total=False):
    data: list[CustomUserProperty]
    meta: PageMeta


class TextsPage(TypedDict, total=False):
    data: list[Text]
    meta: PageMeta


class UsersPage(TypedDict, total=False):
    data: list[User]
    meta: PageMeta
