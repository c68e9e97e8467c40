import pytest
import requests

from common.config import FileType, ImportSettings

REALM_YAML = """\
realm: demo
enabled: true
displayName: Demo Realm
users:
  - username: alice
    enabled: true
    realmRoles:
      - offline_access
clients:
  - clientId: demo-app
    publicClient: true
    redirectUris:
      - https://demo.example.com/*
"""

REALM_JSON = """\
{
  "realm": "demo-json",
  "enabled": true,
  "roles": {
    "realm": [{"name": "admin", "description": "Administrators"}]
  }
}
"""


@pytest.fixture
def make_settings():
    def _make(path="", **overrides) -> ImportSettings:
        overrides.setdefault("file_type", FileType.AUTO)
        return ImportSettings(path=str(path), **overrides)

    return _make


@pytest.fixture
def realm_dir(tmp_path):
    d = tmp_path / "realms"
    d.mkdir()
    (d / "demo.yaml").write_text(REALM_YAML, encoding="utf-8")
    (d / "other.json").write_text(REALM_JSON, encoding="utf-8")
    return d


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_http(monkeypatch):
    """Replace requests.get; records every call in `calls`."""
    calls = []
    state = {"response": FakeResponse(REALM_JSON.encode("utf-8"))}

    def _get(url, headers=None, timeout=None):
        calls.append({"url": url, "headers": headers or {}, "timeout": timeout})
        return state["response"]

    monkeypatch.setattr(requests, "get", _get)

    class _Http:
        def respond(self, content: bytes, status_code: int = 200):
            state["response"] = FakeResponse(content, status_code)

    http = _Http()
    http.calls = calls
    return http


@pytest.fixture
def realm_yaml():
    return REALM_YAML


@pytest.fixture
def realm_json():
    return REALM_JSON
