"""
Configurações do PDV lidas do ambiente.
- Carrega o arquivo .env da raiz do projeto, se existir
- Valores padrão pensados para uso local (um único caixa)
"""
import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Diretório dos dados locais (banco SQLite)
DATA_DIR = PROJECT_ROOT / "data"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "sim", "yes", "on")


DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'pdv.db'}"

# Chave fixa sob a qual o snapshot inteiro do estado é gravado
STORAGE_KEY = os.getenv("PDV_STORAGE_KEY", "pos-storage")

STORE_NAME = os.getenv("PDV_STORE_NAME", "MERCADINHO")

LOG_LEVEL = os.getenv("PDV_LOG_LEVEL", "INFO").upper()

# Popula cargos, funcionários e produtos de demonstração quando não há snapshot salvo
SEED_DEMO = _env_bool("PDV_SEED_DEMO", True)
