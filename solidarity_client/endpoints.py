# solidarity_client/endpoints.py
"""Endpoint table for the Solidarity Tech v1 API.

One canonical table; the ``full`` and ``core`` client profiles are subsets of it.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, Literal, Mapping

from pydantic import BaseModel, ValidationError

from .auth import SecurityScheme
from .config import DEFAULT_BASE_URL
from .exceptions import ConfigError, EndpointUnavailable, ParameterError
from .urls import ServerSpec, placeholders
from . import models as M

HTTPMethod = Literal["GET", "POST", "PUT", "DELETE"]

SERVERS = (ServerSpec(url=DEFAULT_BASE_URL, description="Production"),)
SECURITY = SecurityScheme(type="http", scheme="bearer")

FULL = "full"
CORE = "core"
PROFILES = (FULL, CORE)

_BOTH = frozenset({FULL, CORE})
_FULL = frozenset({FULL})


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class Endpoint:
    name: str
    method: HTTPMethod
    path: str
    summary: str
    query: type[BaseModel] | None = None
    body: type[BaseModel] | None = None
    response: Any = M.Record
    profiles: frozenset[str] = _FULL

    @property
    def path_params(self) -> list[str]:
        return placeholders(self.path)

    def prepare(
        self,
        body: BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> tuple[dict[str, Any] | None, dict[str, Any]]:
        """Validate a call's inputs; return ``(json_body, metadata)`` for the fetch core."""
        params = dict(params or {})
        metadata: dict[str, Any] = {}

        for name in self.path_params:
            value = params.pop(name, None)
            if value is None or str(value) == "":
                raise ParameterError(self.name, f"path parameter {name!r} is required")
            metadata[name] = value

        if self.query is not None:
            try:
                metadata.update(_dump(self.query.model_validate(params)))
            except ValidationError as e:
                raise ParameterError(self.name, str(e)) from e
        elif params:
            raise ParameterError(self.name, f"unexpected parameters: {', '.join(sorted(params))}")

        if self.body is None:
            if body is not None:
                raise ParameterError(self.name, "this endpoint takes no request body")
            return None, metadata
        if body is None:
            raise ParameterError(self.name, "a request body is required")
        try:
            payload = body if isinstance(body, self.body) else self.body.model_validate(
                body.model_dump() if isinstance(body, BaseModel) else body
            )
        except ValidationError as e:
            raise ParameterError(self.name, str(e)) from e
        return _dump(payload), metadata


ENDPOINTS: tuple[Endpoint, ...] = (
    # -------- Activities / calls / chapters --------
    Endpoint("list_activities", "GET", "/activities", "Retrieves all activities",
             query=M.ActivitiesQuery, response=M.ActivitiesPage, profiles=_BOTH),
    Endpoint("list_calls", "GET", "/calls", "Retrieves all calls",
             query=M.CallsQuery, response=M.CallsPage, profiles=_BOTH),
    Endpoint("list_chapter_phone_numbers", "GET", "/chapter_phone_numbers", "Lists chapter phone numbers",
             query=M.PageQuery, response=M.Page),
    Endpoint("list_chapters", "GET", "/chapters", "Retrieves all chapters",
             query=M.PageQuery, response=M.ChaptersPage, profiles=_BOTH),
    Endpoint("list_custom_user_properties", "GET", "/custom_user_properties", "Retrieves all custom user properties",
             query=M.PageQuery, response=M.CustomUserPropertiesPage, profiles=_BOTH),

    # -------- Agent assignments --------
    Endpoint("list_agent_assignments", "GET", "/agent_assignments", "Lists agent assignments",
             query=M.PageQuery, response=M.Page),
    Endpoint("create_agent_assignment", "POST", "/agent_assignments", "Creates an agent assignment",
             body=M.AgentAssignmentIn),
    Endpoint("get_agent_assignment", "GET", "/agent_assignments/{id}", "Shows a single agent assignment"),
    Endpoint("update_agent_assignment", "PUT", "/agent_assignments/{id}", "Updates an agent assignment",
             body=M.AgentAssignmentUpdate),
    Endpoint("delete_agent_assignment", "DELETE", "/agent_assignments/{id}", "Deletes an agent assignment"),

    # -------- Email blasts --------
    Endpoint("list_email_blasts", "GET", "/email_blasts", "Lists email blasts",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_email_blast", "GET", "/email_blasts/{id}", "Shows a single email blast"),

    # -------- Events --------
    Endpoint("list_event_attendances", "GET", "/event_attendances", "Lists event attendances",
             query=M.EventAttendancesQuery, response=M.Page),
    Endpoint("create_event_attendance", "POST", "/event_attendances", "Creates an event attendance",
             body=M.EventAttendanceIn),
    Endpoint("list_event_rsvps", "GET", "/event_rsvps", "Lists event rsvps",
             query=M.EventRsvpsQuery, response=M.Page),
    Endpoint("create_event_rsvp", "POST", "/event_rsvps", "Creates an event rsvp",
             body=M.EventRsvpIn),
    Endpoint("get_event_rsvp", "GET", "/event_rsvps/{id}", "Shows a single event rsvp"),
    Endpoint("update_event_rsvp", "PUT", "/event_rsvps/{id}", "Updates an event rsvp",
             body=M.EventRsvpUpdate),
    Endpoint("delete_event_rsvp", "DELETE", "/event_rsvps/{id}", "Deletes an event rsvp"),
    Endpoint("list_event_sessions", "GET", "/event_sessions", "Lists event sessions",
             query=M.EventSessionsQuery, response=M.Page),
    Endpoint("create_event_session", "POST", "/event_sessions", "Creates an event session",
             body=M.EventSessionIn),
    Endpoint("get_event_session", "GET", "/event_sessions/{id}", "Shows a single event session"),
    Endpoint("update_event_session", "PUT", "/event_sessions/{id}", "Updates an event session",
             body=M.EventSessionUpdate),
    Endpoint("delete_event_session", "DELETE", "/event_sessions/{id}", "Deletes an event session"),
    Endpoint("list_events", "GET", "/events", "Lists events",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_event", "GET", "/events/{id}", "Shows a single event"),

    # -------- Organizations / pages --------
    Endpoint("list_organizations", "GET", "/organizations", "Lists organizations",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_organization", "GET", "/organizations/{id}", "Shows a single organization"),
    Endpoint("list_pages", "GET", "/pages", "Lists pages",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_page", "GET", "/pages/{id}", "Shows a single page"),

    # -------- Phonebanks / scheduled calls --------
    Endpoint("list_phonebanks", "GET", "/phonebanks", "Lists phonebanks",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_phonebank", "GET", "/phonebanks/{id}", "Shows a single phonebank"),
    Endpoint("list_scheduled_calls", "GET", "/scheduled_calls", "Lists scheduled calls",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_scheduled_call", "GET", "/scheduled_calls/{id}", "Shows a single scheduled call"),

    # -------- Tasks --------
    Endpoint("list_scheduled_tasks", "GET", "/scheduled_tasks", "Lists scheduled tasks",
             query=M.PageQuery, response=M.Page),
    Endpoint("create_scheduled_task", "POST", "/scheduled_tasks", "Creates a scheduled task",
             body=M.ScheduledTaskIn),
    Endpoint("get_scheduled_task", "GET", "/scheduled_tasks/{id}", "Shows a single scheduled task"),
    Endpoint("update_scheduled_task", "PUT", "/scheduled_tasks/{id}", "Updates a scheduled task",
             body=M.ScheduledTaskUpdate),
    Endpoint("delete_scheduled_task", "DELETE", "/scheduled_tasks/{id}", "Deletes a scheduled task"),
    Endpoint("list_task_agents", "GET", "/task_agents", "Lists task agents",
             query=M.TaskQuery, response=M.Page),
    Endpoint("create_task_agent", "POST", "/task_agents", "Creates a task agent",
             body=M.TaskAgentIn),
    Endpoint("get_task_agent", "GET", "/task_agents/{id}", "Shows a single task agent"),
    Endpoint("delete_task_agent", "DELETE", "/task_agents/{id}", "Deletes a task agent"),
    Endpoint("list_task_assignments", "GET", "/task_assignments", "Lists task assignments",
             query=M.TaskQuery, response=M.Page),
    Endpoint("create_task_assignment", "POST", "/task_assignments", "Creates a task assignment",
             body=M.TaskAssignmentIn),
    Endpoint("get_task_assignment", "GET", "/task_assignments/{id}", "Shows a single task assignment"),
    Endpoint("update_task_assignment", "PUT", "/task_assignments/{id}", "Updates a task assignment",
             body=M.TaskAssignmentUpdate),
    Endpoint("delete_task_assignment", "DELETE", "/task_assignments/{id}", "Deletes a task assignment"),

    # -------- Team --------
    Endpoint("list_team_members", "GET", "/team_members", "Lists team members",
             query=M.PageQuery, response=M.Page),

    # -------- Texting --------
    Endpoint("list_text_blasts", "GET", "/text_blasts", "Lists text blasts",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_text_blast", "GET", "/text_blasts/{id}", "Shows a single text blast"),
    Endpoint("list_text_templates", "GET", "/text_templates", "Lists text templates",
             query=M.PageQuery, response=M.Page),
    Endpoint("create_text_template", "POST", "/text_templates", "Creates a text template",
             body=M.TextTemplateIn),
    Endpoint("get_text_template", "GET", "/text_templates/{id}", "Shows a single text template"),
    Endpoint("update_text_template", "PUT", "/text_templates/{id}", "Updates a text template",
             body=M.TextTemplateUpdate),
    Endpoint("delete_text_template", "DELETE", "/text_templates/{id}", "Deletes a text template"),
    Endpoint("list_textbanks", "GET", "/textbanks", "Lists textbanks",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_textbank", "GET", "/textbanks/{id}", "Shows a single textbank"),
    Endpoint("send_text", "POST", "/texts", "Sends a text message",
             query=M.SendTextQuery, profiles=_BOTH),
    Endpoint("list_texts", "GET", "/texts", "Retrieves a list of texts",
             query=M.TextsQuery, response=M.TextsPage, profiles=_BOTH),

    # -------- Users --------
    Endpoint("create_user_action", "POST", "/user_actions", "Creates a user action",
             body=M.UserActionIn, profiles=_BOTH),
    Endpoint("list_user_lists", "GET", "/user_lists", "Lists user lists",
             query=M.PageQuery, response=M.Page),
    Endpoint("get_user_list", "GET", "/user_lists/{id}", "Shows a single user list"),
    Endpoint("create_user_note", "POST", "/user_notes", "Creates a user note",
             query=M.UserNoteQuery, profiles=_BOTH),
    Endpoint("upsert_user", "POST", "/users", "Creates or updates a user",
             body=M.UserIn, profiles=_BOTH),
    Endpoint("list_users", "GET", "/users", "Retrieves a list of users",
             query=M.UsersQuery, response=M.UsersPage, profiles=_BOTH),
    Endpoint("get_user", "GET", "/users/{id}", "Shows a single user", profiles=_BOTH),
    Endpoint("update_user", "PUT", "/users/{id}", "Updates a user",
             body=M.UserUpdate, profiles=_BOTH),
)


class Catalog:
    """The endpoints visible to one client profile, looked up by name."""

    def __init__(self, profile: str = FULL, endpoints: tuple[Endpoint, ...] = ENDPOINTS):
        if profile not in PROFILES:
            raise ConfigError(f"unknown profile {profile!r}; expected one of {PROFILES}")
        self.profile = profile
        self._by_name = {ep.name: ep for ep in endpoints if profile in ep.profiles}

    def __getitem__(self, name: str) -> Endpoint:
        try:
            return self._by_name[name]
        except KeyError:
            raise EndpointUnavailable(name, self.profile) from None

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
