import json

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from solidarity_client import ClientConfig, SolidarityTechClient


def create_vendor_app() -> FastAPI:
    """In-process stand-in for the vendor API that echoes what it received."""
    app = FastAPI(title="Solidarity Tech (fake)")
    app.state.requests = []

    @app.get("/v1/events/404")
    async def missing_event():
        return JSONResponse(status_code=404, content={"error": "Record not found"})

    @app.get("/v1/email_blasts/broken")
    async def broken_json():
        return Response(content=b"{not json", media_type="application/json")

    @app.delete("/v1/task_agents/{agent_id}")
    async def delete_task_agent(agent_id: str):
        return Response(status_code=204)

    @app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE"])
    async def echo(path: str, request: Request):
        raw = await request.body()
        record = {
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query,
            "params": dict(request.query_params),
            "authorization": request.headers.getlist("authorization"),
            "user_agent": request.headers.get("user-agent"),
            "body": json.loads(raw) if raw else None,
        }
        app.state.requests.append(record)
        return {"data": record}

    return app


@pytest.fixture
def vendor_app():
    return create_vendor_app()


@pytest.fixture
def make_client(vendor_app):
    def _make(**cfg) -> SolidarityTechClient:
        cfg.setdefault("api_key", "token123")
        return SolidarityTechClient(ClientConfig(**cfg), transport=httpx.ASGITransport(app=vendor_app))
    return _make


@pytest_asyncio.fixture
async def client(make_client):
    async with make_client() as c:
        yield c
