"""
Carrega e salva configuração de layout do recibo para impressão.
"""
import json
from pathlib import Path

from config.settings import STORE_NAME
from utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "receipt_config.json"

DEFAULTS = {
    "paper_width_mm": 80,
    "margin_mm": 5,
    "font_size_pt": 10,
    "line_width": 40,
    "header_text": STORE_NAME,
    "address_text": "RUA EXEMPLO, 123 - CIDADE, ESTADO",
    "document_text": "CNPJ: 00.000.000/0001-00",
    "subheader_text": "CUPOM NAO FISCAL",
    "footer_text": "OBRIGADO E VOLTE SEMPRE!",
}


def load_receipt_config(path: Path = CONFIG_PATH) -> dict:
    """Retorna a configuração do recibo (merge com defaults)."""
    out = dict(DEFAULTS)
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            logger.warning("Configuração do recibo ilegível em %s; usando padrão", path)
            return out
        if isinstance(data, dict):
            out.update(data)
    return out


def save_receipt_config(config: dict, path: Path = CONFIG_PATH) -> None:
    """Salva a configuração do recibo em config/receipt_config.json."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, ensure_ascii=False, indent=2)
