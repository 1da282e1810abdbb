from __future__ import annotations

from typing import Any, Dict, List

import pytest
import requests

from code_optimizer.core.config import Settings


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        OLLAMA_HOST="http://ollama.test:11434/",
        LLM_MODEL="phi3",
        LLM_API="generate",
        LLM_TIMEOUT=5,
        CODE_LANGUAGE="JavaScript",
        CODE_FENCE="javascript",
    )


@pytest.fixture()
def fake_post(monkeypatch):
    """Replace requests.post; set `.result` to a FakeResponse or an exception to raise."""

    class _Fake:
        def __init__(self) -> None:
            self.calls: List[Dict[str, Any]] = []
            self.result: Any = FakeResponse(200, {"response": "ok"})

        def __call__(self, url, json=None, timeout=None, **kwargs):
            self.calls.append({"url": url, "json": json, "timeout": timeout})
            if isinstance(self.result, BaseException):
                raise self.result
            return self.result

    fake = _Fake()
    monkeypatch.setattr(requests, "post", fake)
    return fake
