import pytest

from solidarity_client.config import USER_AGENT


@pytest.mark.asyncio
async def test_smoke(client, vendor_app):
    r = await client.upsert_user({"phone_number": "+15555550100", "first_name": "Ada"})
    assert r.status == 200
    assert r.ok

    page = await client.list_users(limit=10)
    assert page.data["data"]["path"] == "/v1/users"
    assert page.data["data"]["params"] == {"_limit": "10"}

    seen = vendor_app.state.requests
    assert [(x["method"], x["path"]) for x in seen] == [("POST", "/v1/users"), ("GET", "/v1/users")]
    assert seen[0]["body"] == {"phone_number": "+15555550100", "first_name": "Ada"}
    assert seen[0]["user_agent"] == USER_AGENT


@pytest.mark.asyncio
async def test_list_texts_without_params_has_no_query_string(client, vendor_app):
    r = await client.list_texts()
    assert r.status == 200
    rec = vendor_app.state.requests[-1]
    assert rec["method"] == "GET"
    assert rec["path"] == "/v1/texts"
    assert rec["query"] == ""


@pytest.mark.asyncio
async def test_delete_with_empty_response_body(client):
    r = await client.delete_task_agent(7)
    assert r.status == 204
    assert r.data is None
