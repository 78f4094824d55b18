# solidarity_client/core.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, TypeVar

import httpx
import pydantic

from .auth import SecurityScheme, build_auth
from .config import ClientConfig, USER_AGENT
from .exceptions import (
    ConfigError, ParameterError, TransportError, RequestTimeout, MalformedResponse, error_for_status
)
from .urls import ServerSpec, expand_path, resolve_server

logger = logging.getLogger("solidarity_client.core")

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResponse(Generic[T]):
    status: int
    data: T
    headers: httpx.Headers
    res: httpx.Response

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def raise_for_status(self) -> "FetchResponse[T]":
        """Raise the matching HTTPStatusError subclass for a non-2xx response."""
        if not self.ok:
            raise error_for_status(self.status, self.data)
        return self


def _decode(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    ctype = resp.headers.get("content-type", "")
    if "json" in ctype:
        try:
            return resp.json()
        except ValueError as e:
            logger.warning("%s %s returned malformed JSON: %s", resp.request.method, resp.request.url, e)
            raise MalformedResponse(f"invalid JSON body from {resp.request.method} {resp.request.url}: {e}") from e
    return resp.text


class APICore:
    """Executes one HTTP call for a path template, method and parameter bag.

    Holds the request-wide state (server, credentials, timeout); everything else is
    per call.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        security: SecurityScheme,
        servers: Iterable[ServerSpec] = (),
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        # owned copy; configure() and set_server() mutate it
        self.cfg = config.model_copy(deep=True)
        self.security = security
        self.servers = tuple(servers)
        self._auth: httpx.Auth | None = None
        self._base_url = resolve_server(config.base_url, config.server_variables, self.servers)
        self._client = httpx.AsyncClient(
            transport=transport,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        )

    # ------------ configuration ------------
    @property
    def base_url(self) -> str:
        return self._base_url

    def configure(self, *, timeout: float | None = None) -> None:
        if timeout is not None:
            try:
                self.cfg.timeout_s = timeout
            except pydantic.ValidationError as e:
                raise ConfigError(f"invalid timeout {timeout!r}: must be a positive number of seconds") from e

    def set_auth(self, *values: str | int) -> None:
        self._auth = build_auth(self.security, *values)

    def set_server(self, url: str, variables: Mapping[str, Any] | None = None) -> None:
        self._base_url = resolve_server(url, variables, self.servers)
        self.cfg.base_url = url
        self.cfg.server_variables = {k: str(v) for k, v in (variables or {}).items()}
        logger.debug("server set to %s", self._base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------ fetch ------------
    async def fetch(
        self,
        path: str,
        method: str,
        body: Any | None = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> FetchResponse[Any]:
        """Issue one request. Any received HTTP response resolves, whatever its status."""
        method = method.upper()
        params = {k: v for k, v in (metadata or {}).items() if v is not None}
        try:
            url = self._base_url + expand_path(path, params)
        except KeyError as e:
            raise ParameterError(f"{method} {path}", f"missing path parameter {e.args[0]!r}") from e
        query = {k: v for k, v in params.items() if f"{{{k}}}" not in path}

        logger.debug("%s %s", method, url)
        try:
            resp = await self._client.request(
                method,
                url,
                params=query or None,
                json=body,
                auth=self._auth,
                timeout=self.cfg.timeout_s,
            )
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out after %.1fs", method, url, self.cfg.timeout_s)
            raise RequestTimeout(f"{method} {url} timed out: {e}") from e
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return FetchResponse(status=resp.status_code, data=_decode(resp), headers=resp.headers, res=resp)
