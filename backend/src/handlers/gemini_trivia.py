import json
import os
from handlers.http_utils import (
    get_api_base,
    get_api_key,
    get_http_method,
    get_http_session,
    json_response,
    preflight_response,
)

DEFAULT_MODEL = "gemini-1.5-flash"
TEMPERATURE = 0.8  # Mais variedade entre perguntas
MAX_DEBUG_CHARS = 500
OPTIONS_COUNT = 4

TRIVIA_PROMPT = """
You are a trivia game engine for a mobile app.
Generate a unique, fun, random trivia question suitable for a general audience.
Topics: Pop culture, Science, History, Geography, Food, Technology.
Return ONLY a valid JSON object with this schema:
{
  "question": "The question text here?",
  "options": ["Option A", "Option B", "Option C", "Option D"],
  "correctAnswer": "The exact text of the correct option"
}
Do not include markdown formatting like ```json. Just raw JSON.
"""


class InvalidTriviaShape(ValueError):
    """O JSON do modelo não bate com o formato de pergunta esperado."""

    def __init__(self, parsed):
        super().__init__("Invalid trivia shape returned")
        self.parsed = parsed


def strip_code_fences(text):
    return str(text).replace("```json", "").replace("```", "").strip()


def extract_candidate_text(data):
    """Lê candidates[0].content.parts[0].text; qualquer nível ausente vira ''."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return "" if text is None else text


def _reject_constant(name):
    # NaN / Infinity não são JSON válido
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_model_json(text):
    return json.loads(text, parse_constant=_reject_constant)


def to_display_text(value):
    """Converte escalares JSON em texto como o frontend exibe (true, null, 1)."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def normalize_trivia(parsed):
    """
    Valida e normaliza o objeto retornado pelo Gemini.
    Retorna {question, options, correctAnswer} com textos sem espaços nas pontas.
    Lança InvalidTriviaShape se alguma regra falhar.
    """
    if not isinstance(parsed, dict):
        raise InvalidTriviaShape(parsed)

    question = to_display_text(parsed.get("question") or "").strip()
    raw_options = parsed.get("options")
    options = [to_display_text(o).strip() for o in raw_options] if isinstance(raw_options, list) else []
    correct_answer = to_display_text(parsed.get("correctAnswer") or "").strip()

    if (
        not question
        or len(options) != OPTIONS_COUNT
        or len(set(options)) != OPTIONS_COUNT
        or not correct_answer
        or correct_answer not in options
    ):
        raise InvalidTriviaShape(parsed)

    return {"question": question, "options": options, "correctAnswer": correct_answer}


def shape_error_body(parsed):
    """
    Corpo do erro de formato. Objetos grandes demais não voltam inteiros:
    'parsed' sai do corpo e entra um trecho em 'parsedExcerpt'.
    """
    body = {"error": "Invalid trivia shape returned"}
    serialized = json.dumps(parsed)
    if len(serialized) > MAX_DEBUG_CHARS:
        body["parsedExcerpt"] = serialized[:MAX_DEBUG_CHARS]
    else:
        body["parsed"] = parsed
    return body


def build_request_body():
    return {
        "contents": [{"parts": [{"text": TRIVIA_PROMPT}]}],
        "generationConfig": {
            # Força o modelo a responder JSON
            "responseMimeType": "application/json",
            "temperature": TEMPERATURE,
        },
    }


def lambda_handler(event, context, http_session=None):
    """
    Gera uma pergunta de trivia via Gemini.
    Rota: POST /gemini-trivia (OPTIONS para preflight)
    """
    method = get_http_method(event)
    print(f"Requisição de trivia recebida: {method or 'SEM MÉTODO'}")

    if method == "OPTIONS":
        return preflight_response()

    if method != "POST":
        return json_response(405, {"error": "Method not allowed"})

    api_key = get_api_key()
    if not api_key:
        print("ERRO: GEMINI_API_KEY não configurada no servidor.")
        return json_response(500, {"error": "Missing GEMINI_API_KEY env var"})

    try:
        session = http_session if http_session else get_http_session()
        model = os.environ.get("GEMINI_MODEL") or DEFAULT_MODEL
        url = f"{get_api_base()}/models/{model}:generateContent"

        print(f"Chamando Gemini ({model})...")
        resp = session.post(
            url,
            params={"key": api_key},
            json=build_request_body(),
            headers={"Content-Type": "application/json"},
        )

        if not 200 <= resp.status_code < 300:
            print(f"Gemini respondeu com erro HTTP {resp.status_code}")
            return json_response(resp.status_code, {
                "error": "Gemini API error",
                "details": (resp.text or "")[:MAX_DEBUG_CHARS],
            })

        cleaned = strip_code_fences(extract_candidate_text(resp.json()))

        try:
            parsed = parse_model_json(cleaned)
        except ValueError:
            print("ERRO: modelo não retornou JSON válido.")
            return json_response(500, {
                "error": "Model did not return valid JSON",
                "raw": cleaned[:MAX_DEBUG_CHARS],
            })

        try:
            trivia = normalize_trivia(parsed)
        except InvalidTriviaShape as e:
            print(f"ERRO: {e}")
            return json_response(500, shape_error_body(e.parsed))

        return json_response(200, trivia)

    except Exception as e:
        print(f"ERRO CRÍTICO: {str(e)}")
        return json_response(500, {"error": "Server exception", "details": str(e)})
