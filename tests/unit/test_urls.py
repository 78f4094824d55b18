import pytest

from solidarity_client.exceptions import ConfigError
from solidarity_client.urls import ServerSpec, expand_path, placeholders, resolve_server


def test_placeholders_in_order():
    assert placeholders("/a/{x}/b/{y}") == ["x", "y"]
    assert placeholders("/texts") == []


def test_expand_path_encodes_each_value_as_one_segment():
    assert expand_path("/users/{id}", {"id": 42}) == "/users/42"
    assert expand_path("/users/{id}", {"id": "a/b c"}) == "/users/a%2Fb%20c"


def test_expand_path_missing_value():
    with pytest.raises(KeyError):
        expand_path("/users/{id}", {})


def test_resolve_server_with_variables():
    assert resolve_server("https://{region}.example.com", {"region": "eu"}) == "https://eu.example.com"


def test_resolve_server_uses_declared_defaults():
    servers = [ServerSpec(url="https://{region}.example.com/{base}", variables={"region": "us", "base": "v1"})]
    assert resolve_server(servers[0].url, {"region": "eu"}, servers) == "https://eu.example.com/v1"


def test_resolve_server_strips_trailing_slash():
    assert resolve_server("https://api.example.com/v2/") == "https://api.example.com/v2"


@pytest.mark.parametrize("url", ["https://{region}.example.com", "ftp://example.com", "/relative/path"])
def test_resolve_server_rejects(url):
    with pytest.raises(ConfigError):
        resolve_server(url)
