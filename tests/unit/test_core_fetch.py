import json

import httpx
import pytest

from solidarity_client import APICore, ClientConfig, SolidarityTechClient
from solidarity_client.config import USER_AGENT
from solidarity_client.endpoints import SECURITY, SERVERS
from solidarity_client.exceptions import ConfigError, ParameterError


class Recorder:
    def __init__(self, response: httpx.Response | None = None):
        self.requests: list[httpx.Request] = []
        self.response = response or httpx.Response(200, json={"data": {"id": 1}})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


def _core(rec: Recorder, **cfg) -> APICore:
    return APICore(ClientConfig(**cfg), security=SECURITY, servers=SERVERS, transport=httpx.MockTransport(rec))


@pytest.mark.asyncio
async def test_fetch_builds_url_query_and_json_body():
    rec = Recorder()
    core = _core(rec)
    core.set_auth("tok")
    r = await core.fetch("/users/{id}", "put", {"first_name": "Ada"}, {"id": 42, "notify": True, "skip": None})
    await core.aclose()

    req = rec.requests[0]
    assert req.method == "PUT"
    assert req.url.path == "/v1/users/42"
    assert dict(req.url.params) == {"notify": "true"}
    assert json.loads(req.content) == {"first_name": "Ada"}
    assert req.headers["authorization"] == "Bearer tok"
    assert req.headers["user-agent"] == USER_AGENT
    assert req.headers["accept"] == "application/json"
    assert r.status == 200
    assert r.data == {"data": {"id": 1}}


@pytest.mark.asyncio
async def test_fetch_without_params_sends_bare_url():
    rec = Recorder()
    core = _core(rec)
    await core.fetch("/texts", "get")
    await core.aclose()
    assert str(rec.requests[0].url) == "https://api.solidarity.tech/v1/texts"


@pytest.mark.asyncio
async def test_fetch_missing_path_param():
    rec = Recorder()
    core = _core(rec)
    with pytest.raises(ParameterError):
        await core.fetch("/users/{id}", "get", metadata={})
    await core.aclose()
    assert rec.requests == []


@pytest.mark.asyncio
async def test_configure_timeout_applies_to_next_request():
    rec = Recorder()
    core = _core(rec)
    core.configure(timeout=5)
    await core.fetch("/texts", "get")
    await core.aclose()
    assert rec.requests[0].extensions["timeout"]["read"] == 5


@pytest.mark.asyncio
async def test_text_responses_are_returned_as_text():
    rec = Recorder(httpx.Response(502, text="Bad Gateway"))
    core = _core(rec)
    r = await core.fetch("/texts", "get")
    await core.aclose()
    assert r.status == 502
    assert r.data == "Bad Gateway"


def test_server_from_config_variables():
    core = _core(Recorder(), base_url="https://{env}.solidarity.test/v1", server_variables={"env": "staging"})
    assert core.base_url == "https://staging.solidarity.test/v1"


def test_configure_rejects_non_positive_timeout():
    core = _core(Recorder())
    with pytest.raises(ConfigError):
        core.configure(timeout=0)
    assert core.cfg.timeout_s == 30.0


@pytest.mark.asyncio
async def test_clients_built_from_one_config_stay_independent():
    cfg = ClientConfig(_env_file=None)
    rec_a, rec_b = Recorder(), Recorder()
    a = SolidarityTechClient(cfg, transport=httpx.MockTransport(rec_a))
    b = SolidarityTechClient(cfg, transport=httpx.MockTransport(rec_b))

    a.configure(timeout=1)
    a.server("https://{r}.example.com", {"r": "eu"})
    await a.list_texts()
    await b.list_texts()
    await a.aclose()
    await b.aclose()

    assert rec_a.requests[0].extensions["timeout"]["read"] == 1
    assert rec_a.requests[0].url.host == "eu.example.com"
    assert rec_b.requests[0].extensions["timeout"]["read"] == 30.0
    assert str(rec_b.requests[0].url) == "https://api.solidarity.tech/v1/texts"
    assert cfg.timeout_s == 30.0
    assert cfg.base_url == "https://api.solidarity.tech/v1"
    assert cfg.server_variables == {}
