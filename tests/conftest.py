from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest


class FakeSession:
    """Stands in for requests.Session; records every post()."""

    def __init__(self, status_code: int = 200, text: str = '{"requestId": "r0", "results": []}') -> None:
        self.status_code = status_code
        self.text = text
        self.calls: List[Dict[str, Any]] = []
        self.exc: Optional[Exception] = None

    def post(self, url, headers=None, data=None, timeout=None):
        self.calls.append({"url": url, "headers": dict(headers or {}), "data": data, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return SimpleNamespace(status_code=self.status_code, text=self.text)


@pytest.fixture
def session():
    return FakeSession()
