import json
import os
import pytest
from unittest.mock import MagicMock

@pytest.fixture(scope="function")
def gemini_env():
    """Mocked Gemini config (nenhuma chamada real sai dos testes)."""
    os.environ["GEMINI_API_KEY"] = "test-key-123"
    os.environ.pop("GEMINI_MODEL", None)
    os.environ.pop("GEMINI_API_BASE", None)
    yield
    os.environ.pop("GEMINI_API_KEY", None)

@pytest.fixture(scope="function")
def missing_api_key():
    os.environ.pop("GEMINI_API_KEY", None)
    yield

@pytest.fixture
def make_http_response():
    """
    Fábrica de respostas HTTP falsas no formato do requests.Response.
    Se 'payload' for passado, .json() devolve ele e .text a versão serializada.
    """
    def _make(status_code=200, payload=None, text=None):
        resp = MagicMock()
        resp.status_code = status_code
        if payload is not None:
            resp.json.return_value = payload
            resp.text = json.dumps(payload)
        else:
            resp.json.side_effect = ValueError("No JSON object could be decoded")
            resp.text = text or ""
        if text is not None:
            resp.text = text
        return resp
    return _make

@pytest.fixture
def http_session():
    """Sessão HTTP mockada, injetada nos handlers via http_session=."""
    return MagicMock()
