# solidarity_client/exceptions.py
from __future__ import annotations
from typing import Any


class SolidarityTechError(Exception):
    """Base class for every error raised by the client."""


class ConfigError(SolidarityTechError, ValueError):
    pass


class ParameterError(SolidarityTechError, ValueError):
    def __init__(self, endpoint: str, detail: str):
        super().__init__(f"{endpoint}: {detail}")
        self.endpoint = endpoint
        self.detail = detail


class EndpointUnavailable(SolidarityTechError, LookupError):
    def __init__(self, name: str, profile: str):
        super().__init__(f"endpoint {name!r} is not part of the {profile!r} profile")
        self.name = name
        self.profile = profile


# -------- Transport --------
class TransportError(SolidarityTechError):
    """No usable HTTP response was received."""


class RequestTimeout(TransportError):
    pass


class MalformedResponse(TransportError):
    pass


# -------- HTTP status (raised only by FetchResponse.raise_for_status) --------
class HTTPStatusError(SolidarityTechError):
    def __init__(self, status: int, body: Any = None):
        super().__init__(f"HTTP {status}: {body!r}")
        self.status = status
        self.body = body


class BadRequest(HTTPStatusError):
    pass


class Unauthorized(HTTPStatusError):
    pass


class NotFound(HTTPStatusError):
    pass


class Conflict(HTTPStatusError):
    pass


class ServerError(HTTPStatusError):
    pass


def error_for_status(status: int, body: Any = None) -> HTTPStatusError:
    if status >= 500:
        return ServerError(status, body)
    if status == 404:
        return NotFound(status, body)
    if status == 409:
        return Conflict(status, body)
    if status in (400, 422):
        return BadRequest(status, body)
    if status in (401, 403):
        return Unauthorized(status, body)
    return HTTPStatusError(status, body)
