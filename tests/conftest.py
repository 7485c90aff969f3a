import json
import sys
from pathlib import Path

import pytest

# Ensure the `gplaces` package is importable when running pytest from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.headers = {"Content-Type": "application/json"}
        self.text = text if text is not None else json.dumps(payload if payload is not None else {})

    def json(self):
        return json.loads(self.text)


class DummySession:
    def __init__(self, response=None):
        self.calls = []
        self.response = response or DummyResponse()

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        return self.response


@pytest.fixture
def make_response():
    return DummyResponse


@pytest.fixture
def session():
    return DummySession()
