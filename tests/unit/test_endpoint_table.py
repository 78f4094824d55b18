from datetime import datetime, timezone

import pytest

from solidarity_client import models as M
from solidarity_client.client import SolidarityTechClient
from solidarity_client.endpoints import CORE, ENDPOINTS, FULL, Catalog
from solidarity_client.exceptions import ConfigError, EndpointUnavailable, ParameterError


def test_names_unique_and_every_endpoint_has_a_client_method():
    names = [ep.name for ep in ENDPOINTS]
    assert len(names) == len(set(names))
    for name in names:
        assert callable(getattr(SolidarityTechClient, name, None)), name


def test_core_is_a_subset_of_full():
    full = {ep.name for ep in Catalog(FULL)}
    core = {ep.name for ep in Catalog(CORE)}
    assert core < full
    assert core == {
        "list_activities", "list_calls", "list_chapters", "list_custom_user_properties",
        "send_text", "list_texts", "create_user_action", "create_user_note",
        "upsert_user", "list_users", "get_user", "update_user",
    }
    assert len(Catalog(FULL)) == len(ENDPOINTS)


def test_unknown_profile():
    with pytest.raises(ConfigError):
        Catalog("partial")


def test_lookup_outside_profile():
    cat = Catalog(CORE)
    assert "list_users" in cat
    assert "list_events" not in cat
    with pytest.raises(EndpointUnavailable):
        cat["list_events"]


def test_path_templates_only_use_id():
    for ep in ENDPOINTS:
        assert ep.path_params in ([], ["id"]), ep.name
        if ep.body is not None:
            assert ep.method in ("POST", "PUT"), ep.name


def test_prepare_dumps_aliases_and_drops_none():
    ep = Catalog()["list_users"]
    since = datetime(2024, 5, 1, tzinfo=timezone.utc)
    body, meta = ep.prepare(params={"limit": 25, "offset": 50, "updated_since": since, "email": None})
    assert body is None
    assert meta == {"_limit": 25, "_offset": 50, "updated_since": "2024-05-01T00:00:00Z"}


def test_prepare_passes_unmodelled_vendor_params():
    ep = Catalog()["list_events"]
    _, meta = ep.prepare(params={"_limit": 5, "status": "upcoming"})
    assert meta == {"_limit": 5, "status": "upcoming"}


def test_prepare_accepts_model_instances():
    ep = Catalog()["create_event_session"]
    start = datetime(2024, 6, 1, 18, 0)
    body, meta = ep.prepare(M.EventSessionIn(event_id=3, start_time=start, location_name="Hall"))
    assert body == {"event_id": 3, "start_time": "2024-06-01T18:00:00", "location_name": "Hall"}
    assert meta == {}


def test_prepare_keeps_path_params_in_metadata():
    ep = Catalog()["update_text_template"]
    body, meta = ep.prepare({"body": "Hi {{first_name}}"}, {"id": 11})
    assert body == {"body": "Hi {{first_name}}"}
    assert meta == {"id": 11}


@pytest.mark.parametrize(
    "name, body, params",
    [
        ("list_users", None, {"limit": 0}),
        ("get_event", None, {"id": 1, "expand": "sessions"}),
        ("get_event", {"x": 1}, {"id": 1}),
        ("create_task_agent", None, {}),
        ("create_user_note", None, {"user_id": 1}),
        ("list_texts", None, {"direction": "sideways"}),
    ],
)
def test_prepare_rejects(name, body, params):
    with pytest.raises(ParameterError) as ei:
        Catalog()[name].prepare(body, params)
    assert ei.value.endpoint == name
