# solidarity_client/client.py
from __future__ import annotations
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from .config import ClientConfig
from .core import APICore, FetchResponse
from .endpoints import Catalog, Endpoint, SECURITY, SERVERS
from . import models as M

Body = BaseModel | Mapping[str, Any]
ID = int | str


class SolidarityTechClient:
    """Async client for the Solidarity Tech v1 API.

    Every method is one request. Any HTTP response comes back as a ``FetchResponse``
    (call ``raise_for_status()`` to turn non-2xx into exceptions); transport failures
    raise ``TransportError``.

    Usage::

        async with SolidarityTechClient(ClientConfig(api_key="...")) as st:
            page = (await st.list_users(limit=50)).raise_for_status().data
    """

    def __init__(self, config: ClientConfig | None = None, *, transport: httpx.AsyncBaseTransport | None = None):
        self.core = APICore(config if config is not None else ClientConfig(), security=SECURITY, servers=SERVERS, transport=transport)
        self.cfg = self.core.cfg
        self.catalog = Catalog(self.cfg.profile)
        if self.cfg.api_key:
            self.core.set_auth(self.cfg.api_key)

    async def __aenter__(self) -> "SolidarityTechClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.core.aclose()

    # ------------ configuration ------------
    def configure(self, *, timeout: float | None = None) -> None:
        """Override the request timeout (seconds, default 30)."""
        self.core.configure(timeout=timeout)

    def auth(self, *values: str | int) -> "SolidarityTechClient":
        """Set credentials: ``auth(token)`` for this API's bearer scheme."""
        self.core.set_auth(*values)
        return self

    def server(self, url: str, variables: Mapping[str, Any] | None = None) -> None:
        """Point the client at another server, e.g. ``server("https://{region}.example.com", {"region": "eu"})``."""
        self.core.set_server(url, variables)

    def endpoints(self) -> list[Endpoint]:
        return list(self.catalog)

    # ------------ low-level helper ------------
    async def _call(self, name: str, body: Body | None = None, params: Mapping[str, Any] | None = None) -> FetchResponse[Any]:
        ep = self.catalog[name]
        payload, metadata = ep.prepare(body, params)
        return await self.core.fetch(ep.path, ep.method, payload, metadata)

    # ------------ Activities / calls / chapters ------------
    async def list_activities(self, **params: Any) -> FetchResponse[M.ActivitiesPage]:
        return await self._call("list_activities", params=params)

    async def list_calls(self, **params: Any) -> FetchResponse[M.CallsPage]:
        return await self._call("list_calls", params=params)

    async def list_chapter_phone_numbers(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_chapter_phone_numbers", params=params)

    async def list_chapters(self, **params: Any) -> FetchResponse[M.ChaptersPage]:
        return await self._call("list_chapters", params=params)

    async def list_custom_user_properties(self, **params: Any) -> FetchResponse[M.CustomUserPropertiesPage]:
        return await self._call("list_custom_user_properties", params=params)

    # ------------ Agent assignments ------------
    async def list_agent_assignments(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_agent_assignments", params=params)

    async def create_agent_assignment(self, body: M.AgentAssignmentIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_agent_assignment", body)

    async def get_agent_assignment(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_agent_assignment", params={"id": id})

    async def update_agent_assignment(self, id: ID, body: M.AgentAssignmentUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_agent_assignment", body, {"id": id})

    async def delete_agent_assignment(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_agent_assignment", params={"id": id})

    # ------------ Email blasts ------------
    async def list_email_blasts(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_email_blasts", params=params)

    async def get_email_blast(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_email_blast", params={"id": id})

    # ------------ Events ------------
    async def list_event_attendances(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_event_attendances", params=params)

    async def create_event_attendance(self, body: M.EventAttendanceIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_event_attendance", body)

    async def list_event_rsvps(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_event_rsvps", params=params)

    async def create_event_rsvp(self, body: M.EventRsvpIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_event_rsvp", body)

    async def get_event_rsvp(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_event_rsvp", params={"id": id})

    async def update_event_rsvp(self, id: ID, body: M.EventRsvpUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_event_rsvp", body, {"id": id})

    async def delete_event_rsvp(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_event_rsvp", params={"id": id})

    async def list_event_sessions(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_event_sessions", params=params)

    async def create_event_session(self, body: M.EventSessionIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_event_session", body)

    async def get_event_session(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_event_session", params={"id": id})

    async def update_event_session(self, id: ID, body: M.EventSessionUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_event_session", body, {"id": id})

    async def delete_event_session(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_event_session", params={"id": id})

    async def list_events(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_events", params=params)

    async def get_event(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_event", params={"id": id})

    # ------------ Organizations / pages ------------
    async def list_organizations(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_organizations", params=params)

    async def get_organization(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_organization", params={"id": id})

    async def list_pages(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_pages", params=params)

    async def get_page(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_page", params={"id": id})

    # ------------ Phonebanks / scheduled calls ------------
    async def list_phonebanks(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_phonebanks", params=params)

    async def get_phonebank(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_phonebank", params={"id": id})

    async def list_scheduled_calls(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_scheduled_calls", params=params)

    async def get_scheduled_call(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_scheduled_call", params={"id": id})

    # ------------ Tasks ------------
    async def list_scheduled_tasks(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_scheduled_tasks", params=params)

    async def create_scheduled_task(self, body: M.ScheduledTaskIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_scheduled_task", body)

    async def get_scheduled_task(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_scheduled_task", params={"id": id})

    async def update_scheduled_task(self, id: ID, body: M.ScheduledTaskUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_scheduled_task", body, {"id": id})

    async def delete_scheduled_task(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_scheduled_task", params={"id": id})

    async def list_task_agents(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_task_agents", params=params)

    async def create_task_agent(self, body: M.TaskAgentIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_task_agent", body)

    async def get_task_agent(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_task_agent", params={"id": id})

    async def delete_task_agent(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_task_agent", params={"id": id})

    async def list_task_assignments(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_task_assignments", params=params)

    async def create_task_assignment(self, body: M.TaskAssignmentIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_task_assignment", body)

    async def get_task_assignment(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_task_assignment", params={"id": id})

    async def update_task_assignment(self, id: ID, body: M.TaskAssignmentUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_task_assignment", body, {"id": id})

    async def delete_task_assignment(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_task_assignment", params={"id": id})

    # ------------ Team ------------
    async def list_team_members(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_team_members", params=params)

    # ------------ Texting ------------
    async def list_text_blasts(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_text_blasts", params=params)

    async def get_text_blast(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_text_blast", params={"id": id})

    async def list_text_templates(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_text_templates", params=params)

    async def create_text_template(self, body: M.TextTemplateIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("create_text_template", body)

    async def get_text_template(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_text_template", params={"id": id})

    async def update_text_template(self, id: ID, body: M.TextTemplateUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_text_template", body, {"id": id})

    async def delete_text_template(self, id: ID) -> FetchResponse[Any]:
        return await self._call("delete_text_template", params={"id": id})

    async def list_textbanks(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_textbanks", params=params)

    async def get_textbank(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_textbank", params={"id": id})

    async def send_text(self, **params: Any) -> FetchResponse[M.Record]:
        """Send a text. Takes ``body`` plus ``user_id`` or ``phone_number`` as query parameters."""
        return await self._call("send_text", params=params)

    async def list_texts(self, **params: Any) -> FetchResponse[M.TextsPage]:
        return await self._call("list_texts", params=params)

    # ------------ Users ------------
    async def create_user_action(self, body: M.UserActionIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        """Not usable for donation pages or scheduled call pages."""
        return await self._call("create_user_action", body)

    async def list_user_lists(self, **params: Any) -> FetchResponse[M.Page]:
        return await self._call("list_user_lists", params=params)

    async def get_user_list(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_user_list", params={"id": id})

    async def create_user_note(self, **params: Any) -> FetchResponse[M.Record]:
        return await self._call("create_user_note", params=params)

    async def upsert_user(self, body: M.UserIn | Mapping[str, Any]) -> FetchResponse[M.Record]:
        """Create a user, or update the one matching the phone number or email."""
        return await self._call("upsert_user", body)

    async def list_users(self, **params: Any) -> FetchResponse[M.UsersPage]:
        return await self._call("list_users", params=params)

    async def get_user(self, id: ID) -> FetchResponse[M.Record]:
        return await self._call("get_user", params={"id": id})

    async def update_user(self, id: ID, body: M.UserUpdate | Mapping[str, Any]) -> FetchResponse[M.Record]:
        return await self._call("update_user", body, {"id": id})
