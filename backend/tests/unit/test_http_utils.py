import json
import os
import requests
from handlers import http_utils
from handlers.http_utils import get_http_method, json_response, get_http_session

def test_http_method_from_rest_event():
    assert get_http_method({"httpMethod": "post"}) == "POST"

def test_http_method_from_http_api_event():
    event = {"requestContext": {"http": {"method": "OPTIONS"}}}
    assert get_http_method(event) == "OPTIONS"

def test_http_method_missing():
    assert get_http_method({}) == ""
    assert get_http_method(None) == ""

def test_json_response_has_cors_headers():
    response = json_response(418, {"error": "teapot"})

    assert response["statusCode"] == 418
    assert json.loads(response["body"]) == {"error": "teapot"}
    assert response["headers"] == {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": "POST, OPTIONS",
    }

def test_http_session_is_reused():
    """Warm start: a mesma sessão é devolvida entre chamadas."""
    http_utils._HTTP_SESSION = None

    first = get_http_session()
    second = get_http_session()

    assert isinstance(first, requests.Session)
    assert first is second

def test_api_base_override():
    os.environ["GEMINI_API_BASE"] = "http://localhost:8080/v1beta"
    try:
        assert http_utils.get_api_base() == "http://localhost:8080/v1beta"
    finally:
        del os.environ["GEMINI_API_BASE"]

    assert http_utils.get_api_base() == http_utils.GEMINI_API_BASE
