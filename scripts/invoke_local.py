import json
import os
import sys
from dotenv import load_dotenv

current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.append(os.path.abspath(os.path.join(current_dir, "../backend/src")))

# Carrega GEMINI_API_KEY de um .env local (não versionado)
load_dotenv()

from handlers.gemini_trivia import lambda_handler as trivia_handler
from handlers.list_models import lambda_handler as list_models_handler

def run_trivia():
    print("🎲 Gerando pergunta de trivia (chamada REAL ao Gemini)...")
    response = trivia_handler({"httpMethod": "POST"}, None)
    body = json.loads(response["body"])

    if response["statusCode"] != 200:
        print(f"❌ FALHA: HTTP {response['statusCode']}")
        print(json.dumps(body, indent=2, ensure_ascii=False))
        return

    print(f"✅ {body['question']}")
    for option in body["options"]:
        marker = "👉" if option == body["correctAnswer"] else "  "
        print(f"   {marker} {option}")

def run_list_models():
    print("\n📋 Listando modelos disponíveis...")
    response = list_models_handler({"httpMethod": "GET"}, None)

    if response["statusCode"] != 200:
        print(f"❌ FALHA: HTTP {response['statusCode']} - {response['body'][:200]}")
        return

    models = json.loads(response["body"]).get("models", [])
    print(f"✅ {len(models)} modelos encontrados.")
    for model in models:
        print(f"   -> {model.get('name')}")

if __name__ == "__main__":
    if not os.environ.get("GEMINI_API_KEY"):
        print("❌ ERRO: Variável GEMINI_API_KEY não encontrada.")
        print("   -> Crie um arquivo .env na raiz com: GEMINI_API_KEY=AIza...")
        sys.exit(1)

    target = sys.argv[1] if len(sys.argv) > 1 else "all"
    if target in ("all", "trivia"):
        run_trivia()
    if target in ("all", "models"):
        run_list_models()
