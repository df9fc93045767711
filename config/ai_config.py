"""
Configuração de IA para as sugestões de venda adicional (upsell).
"""
import os
from typing import Any, Dict, Optional


class AIConfigManager:
    """
    Gerenciador de configurações de IA (provedor, API key, modelo) via ambiente.
    """

    DEFAULT_MODELS = {
        "openai": "gpt-4o-mini",
        "ollama": "llama3.2",
        "groq": "llama-3.3-70b-versatile",
    }

    DEFAULT_BASE_URLS = {
        "ollama": "http://localhost:11434",
    }

    @staticmethod
    def is_enabled() -> bool:
        return os.getenv("AI_ENABLED", "false").lower() == "true"

    @staticmethod
    def is_configured() -> bool:
        """Verifica se há configuração de IA ativa."""
        return AIConfigManager.get_config_dict() is not None

    @staticmethod
    def get_config_dict() -> Optional[Dict[str, Any]]:
        """Retorna configuração ativa como dicionário (None se desativada/incompleta)."""
        if not AIConfigManager.is_enabled():
            return None
        provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
        api_key = (os.getenv("AI_API_KEY") or "").strip()
        if provider != "ollama" and not api_key:
            return None
        return {
            "provider": provider,
            "api_key": api_key,
            "model": os.getenv("AI_MODEL") or AIConfigManager.DEFAULT_MODELS.get(provider),
            "base_url": os.getenv("AI_BASE_URL") or AIConfigManager.DEFAULT_BASE_URLS.get(provider),
            "enabled": True,
        }
