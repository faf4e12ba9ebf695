import json as _json
from urllib.parse import urlsplit

import pytest
import requests

from pura_admin.services.api_client import ApiClient
from pura_admin.services.media import ImageReplacer
from pura_admin.utils.notify import Notifier

BASE = "http://cms.test"

class Dummy:
    def __init__(self, status=200, body=None, raw=None):
        self.status_code = status
        self.ok = 200 <= status < 300
        if raw is not None:
            self.content = raw.encode()
        elif body is None:
            self.content = b""
        else:
            self.content = _json.dumps(body).encode()

    def json(self):
        return _json.loads(self.content.decode())

class FakeSession:
    """Stands in for requests.Session; answers from a (METHOD, path) table."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.closed = False

    def on(self, method, path, status=200, body=None, raw=None, exc=None):
        self.routes[(method, path)] = (status, body, raw, exc)

    def request(self, method, url, json=None, params=None, files=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append({"method": method, "path": path, "json": json,
                           "params": params, "files": files, "timeout": timeout})
        if (method, path) not in self.routes:
            return Dummy(404, {"errors": f"no route {method} {path}"})
        status, body, raw, exc = self.routes[(method, path)]
        if exc is not None:
            raise exc
        return Dummy(status, body, raw)

    def post(self, url, files=None, timeout=None, **kw):
        return self.request("POST", url, files=files, timeout=timeout, **kw)

    def close(self):
        self.closed = True

    def paths(self, method=None):
        return [(c["method"], c["path"]) for c in self.calls if method in (None, c["method"])]

@pytest.fixture
def session():
    return FakeSession()

@pytest.fixture
def client(session):
    return ApiClient(BASE, timeout=5, session=session)

@pytest.fixture
def replacer(client):
    return ImageReplacer(client.storage)

@pytest.fixture
def notifier():
    return Notifier()

@pytest.fixture
def network_down():
    return requests.ConnectionError("connection refused")
