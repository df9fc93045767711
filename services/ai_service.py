"""
Serviço de IA para sugestões de venda adicional a partir dos itens do carrinho.
Consultivo: nunca bloqueia carrinho ou finalização; falhas viram "sem sugestões".
"""
import json
import re
from typing import List, Optional, Sequence

from config.ai_config import AIConfigManager
from utils.logger import get_logger

logger = get_logger(__name__)

MAX_SUGGESTIONS = 3

PROMPT = (
    "Você é um assistente de vendas em um mercado. Com base nos itens do carrinho, "
    "sugira outros produtos relevantes para oferecer ao cliente. Seja conciso e "
    "responda apenas com uma lista JSON de no máximo 3 nomes de produtos.\n"
    "Itens no carrinho: {items}\n"
    "Sugestões:"
)

_BULLET = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def parse_suggestions(text: str) -> List[str]:
    """
    Aceita uma lista JSON (["a", "b"]) ou uma lista com marcadores/numeração.
    Retorna no máximo MAX_SUGGESTIONS itens não vazios.
    """
    text = (text or "").strip()
    if not text:
        return []
    start, end = text.find("["), text.rfind("]")
    if start != -1 and end > start:
        try:
            data = json.loads(text[start:end + 1])
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list):
            items = [str(x).strip() for x in data if str(x).strip()]
            return items[:MAX_SUGGESTIONS]
    items = []
    for line in text.splitlines():
        cleaned = _BULLET.sub("", line).strip().strip('"')
        if cleaned:
            items.append(cleaned)
    return items[:MAX_SUGGESTIONS]


class AIService:
    """
    Cliente mínimo para OpenAI, Groq ou Ollama (API compatível com OpenAI).
    """

    def __init__(self, config: Optional[dict] = None, client=None):
        self.config = config if config is not None else AIConfigManager.get_config_dict()
        self._client = client

    def is_available(self) -> bool:
        """Verifica se a IA está configurada e utilizável."""
        return self._client is not None or self.config is not None

    def _get_client(self):
        """
        Retorna o cliente da API de IA conforme o provedor configurado.
        Retorna (client, error_message); error_message é None em caso de sucesso.
        """
        if self._client is not None:
            return self._client, None
        if not self.config:
            return None, "Configuração de IA não encontrada"

        provider = self.config["provider"]
        api_key = (self.config.get("api_key") or "").strip()

        if provider == "openai":
            from openai import OpenAI

            self._client = OpenAI(api_key=api_key)
            return self._client, None

        if provider == "ollama":
            from openai import OpenAI

            base_url = self.config.get("base_url") or AIConfigManager.DEFAULT_BASE_URLS["ollama"]
            if not base_url.rstrip("/").endswith("/v1"):
                base_url = base_url.rstrip("/") + "/v1"
            self._client = OpenAI(api_key="ollama", base_url=base_url)
            return self._client, None

        if provider == "groq":
            from openai import OpenAI

            self._client = OpenAI(api_key=api_key, base_url="https://api.groq.com/openai/v1")
            return self._client, None

        return None, f"Provedor '{provider}' não suportado"

    def suggest(self, item_names: Sequence[str]) -> List[str]:
        """
        Até 3 sugestões para os itens informados. Lista vazia quando não há
        itens, a IA não está configurada ou a chamada falha.
        """
        names = [n for n in (item_names or []) if n]
        if not names or not self.is_available():
            return []
        try:
            client, error = self._get_client()
            if error:
                logger.warning("Sugestões indisponíveis: %s", error)
                return []
            model = (self.config or {}).get("model") or AIConfigManager.DEFAULT_MODELS["openai"]
            response = client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": PROMPT.format(items=", ".join(names))}],
                max_tokens=120,
                temperature=0.4,
            )
            content = response.choices[0].message.content
        except Exception:
            logger.warning("Falha ao obter sugestões de upsell", exc_info=True)
            return []
        suggestions = parse_suggestions(content)
        in_cart = {n.strip().lower() for n in names}
        return [s for s in suggestions if s.lower() not in in_cart]
