import json
import os
import requests

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"

# Headers enviados em TODAS as respostas (inclusive erros e preflight)
CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

# --- Padrão Singleton para a sessão HTTP (Warm Start) ---
_HTTP_SESSION = None

def get_http_session():
    """
    Retorna ou inicializa a sessão HTTP.
    Reaproveita a conexão com o Google entre invocações do mesmo container.
    """
    global _HTTP_SESSION
    if _HTTP_SESSION is None:
        _HTTP_SESSION = requests.Session()
    return _HTTP_SESSION

def get_api_base():
    return os.environ.get("GEMINI_API_BASE") or GEMINI_API_BASE

def get_api_key():
    return os.environ.get("GEMINI_API_KEY")

def get_http_method(event):
    """
    Extrai o método HTTP do evento.
    API Gateway REST / Netlify usam 'httpMethod'; HTTP API (v2) e Function URLs
    usam requestContext.http.method.
    """
    method = (event or {}).get("httpMethod")
    if not method:
        request_context = (event or {}).get("requestContext") or {}
        method = (request_context.get("http") or {}).get("method")
    return (method or "").upper()

def json_response(status_code, payload):
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(payload),
    }

def raw_response(status_code, body):
    # Body já serializado (proxy direto)
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": body,
    }

def preflight_response():
    return raw_response(200, "")
