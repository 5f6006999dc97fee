from handlers.http_utils import (
    get_api_base,
    get_api_key,
    get_http_method,
    get_http_session,
    json_response,
    preflight_response,
    raw_response,
)

def lambda_handler(event, context, http_session=None):
    """
    Proxy simples da listagem de modelos do Gemini.
    Repassa status e body do Google sem alterações.
    """
    if get_http_method(event) == "OPTIONS":
        return preflight_response()

    api_key = get_api_key()
    if not api_key:
        print("ERRO: GEMINI_API_KEY não configurada no servidor.")
        return json_response(500, {"error": "Missing GEMINI_API_KEY env var"})

    try:
        session = http_session if http_session else get_http_session()

        resp = session.get(f"{get_api_base()}/models", params={"key": api_key})
        print(f"Listagem de modelos: HTTP {resp.status_code}")

        return raw_response(resp.status_code, resp.text)

    except Exception as e:
        print(f"ERRO: {str(e)}")
        return json_response(500, {"error": "Server exception", "details": str(e)})
