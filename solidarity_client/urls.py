# solidarity_client/urls.py
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping
from urllib.parse import quote

import httpx

from .exceptions import ConfigError

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def placeholders(template: str) -> list[str]:
    """Names of the ``{name}`` placeholders in a path or server template, in order."""
    return _PLACEHOLDER.findall(template)


def expand_path(template: str, values: Mapping[str, Any]) -> str:
    """Substitute path placeholders, percent-encoding each value as one path segment.

    Raises KeyError naming the first placeholder without a value.
    """
    def _sub(m: re.Match) -> str:
        value = values[m.group(1)]
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_sub, template)


@dataclass(frozen=True)
class ServerSpec:
    url: str
    variables: Mapping[str, str] = field(default_factory=dict)   # variable -> default
    description: str | None = None


def resolve_server(
    url: str,
    variables: Mapping[str, Any] | None = None,
    servers: Iterable[ServerSpec] = (),
) -> str:
    """Resolve a server URL template into a concrete base URL.

    Variables not given by the caller fall back to the declared defaults when ``url``
    is one of ``servers``.
    """
    declared = next((s for s in servers if s.url == url), None)
    merged = dict(declared.variables) if declared else {}
    merged.update({k: str(v) for k, v in (variables or {}).items()})

    missing = [name for name in placeholders(url) if name not in merged]
    if missing:
        raise ConfigError(f"server URL {url!r} has no value for: {', '.join(missing)}")

    resolved = _PLACEHOLDER.sub(lambda m: merged[m.group(1)], url).rstrip("/")
    try:
        parsed = httpx.URL(resolved)
    except httpx.InvalidURL as e:
        raise ConfigError(f"invalid server URL {resolved!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise ConfigError(f"server URL must be absolute http(s), got {resolved!r}")
    return resolved
