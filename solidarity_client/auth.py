# solidarity_client/auth.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generator, Literal

import httpx

from .exceptions import ConfigError


@dataclass(frozen=True)
class SecurityScheme:
    """How the API expects credentials, as declared by its security scheme."""
    type: Literal["http", "apiKey"]
    scheme: Literal["basic", "bearer"] | None = None    # for type="http"
    name: str | None = None                             # for type="apiKey"
    location: Literal["header", "query"] = "header"     # for type="apiKey"


class BearerAuth(httpx.Auth):
    def __init__(self, token: str):
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        # assignment, not append: exactly one Authorization header per request
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class ApiKeyAuth(httpx.Auth):
    def __init__(self, key: str, *, name: str, location: Literal["header", "query"] = "header"):
        self.key = key
        self.name = name
        self.location = location

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self.location == "query":
            request.url = request.url.copy_set_param(self.name, self.key)
        else:
            request.headers[self.name] = self.key
        yield request


def build_auth(scheme: SecurityScheme, *values: str | int) -> httpx.Auth:
    """Turn 1-2 caller-supplied credential values into an ``httpx.Auth`` for ``scheme``.

    - HTTP basic: ``(username, password)``; the password defaults to ``""``.
    - HTTP bearer: ``(token,)``.
    - API key: ``(key,)``, sent in the header or query parameter the scheme names.
    """
    if not 1 <= len(values) <= 2:
        raise ConfigError(f"auth() takes 1 or 2 credential values, got {len(values)}")
    creds = [str(v) for v in values]

    if scheme.type == "http" and scheme.scheme == "basic":
        return httpx.BasicAuth(creds[0], creds[1] if len(creds) > 1 else "")

    if len(creds) != 1:
        raise ConfigError(f"{scheme.type}/{scheme.scheme or scheme.location} auth takes a single credential")

    if scheme.type == "http" and scheme.scheme == "bearer":
        return BearerAuth(creds[0])
    if scheme.type == "apiKey":
        if not scheme.name:
            raise ConfigError("apiKey security scheme must name its header or query parameter")
        return ApiKeyAuth(creds[0], name=scheme.name, location=scheme.location)
    raise ConfigError(f"unsupported security scheme: {scheme}")
