import json

from models.product import Unit
from models.transaction import PaymentMethod
from utils.formatters import format_currency, format_quantity
from utils.receipt_builder import build_receipt_html, build_receipt_lines, build_receipt_text
from utils.receipt_config import DEFAULTS, load_receipt_config, save_receipt_config


def _sale(pos):
    pos.cart.add_to_cart(pos.catalog.find_product_by_code("PROD-0001"), 2)
    pos.cart.add_to_cart(pos.catalog.find_product_by_code("PROD-0004"), 1)
    return pos.sales.finalize_sale(PaymentMethod.CASH, 17.99)


def test_receipt_lines(open_pos):
    transaction = _sale(open_pos)

    lines = build_receipt_lines(transaction, dict(DEFAULTS))

    assert "DATA: 14/03/2026 HORA: 10:30:00" in lines
    assert "OPERADOR: Administrador (ADM-001)" in lines
    assert f"TRANSACAO ID: {transaction.id}" in lines
    assert "001 Café Expresso" in lines
    assert "002 Maçã Fuji" in lines
    assert any(line.endswith("2UN  5.00  10.00") for line in lines)
    assert any(line.endswith("1.000KG  7.99  7.99") for line in lines)
    assert any(line.startswith("QTD. TOTAL DE ITENS:") and line.endswith("3.000") for line in lines)
    assert any(line.startswith("TOTAL R$:") and line.endswith("17.99") for line in lines)
    assert any(line.startswith("FORMA PAGAMENTO:") and line.endswith("Dinheiro") for line in lines)
    assert lines[-1] == "OBRIGADO E VOLTE SEMPRE!".center(40).rstrip()


def test_receipt_respects_line_width(open_pos):
    transaction = _sale(open_pos)
    config = dict(DEFAULTS, line_width=32)

    lines = build_receipt_lines(transaction, config)

    assert "-" * 32 in lines
    assert "-" * 40 not in lines
    item_lines = [line for line in lines if line.endswith("5.00  10.00")]
    assert len(item_lines[0]) == 32


def test_receipt_html_escapes_content(open_pos):
    transaction = _sale(open_pos)
    config = dict(DEFAULTS, header_text="<Loja & Cia>")

    html = build_receipt_html(transaction, config)

    assert "&lt;Loja &amp; Cia&gt;" in html
    assert "<Loja" not in html
    assert build_receipt_text(transaction, config).startswith("CUPOM NAO FISCAL".center(40).rstrip())


def test_receipt_config_round_trip(tmp_path):
    path = tmp_path / "receipt_config.json"

    assert load_receipt_config(path) == DEFAULTS
    save_receipt_config({"line_width": 32}, path)

    config = load_receipt_config(path)
    assert config["line_width"] == 32
    assert config["footer_text"] == DEFAULTS["footer_text"]


def test_unreadable_receipt_config_uses_defaults(tmp_path):
    path = tmp_path / "receipt_config.json"
    path.write_text("{quebrado", encoding="utf-8")

    assert load_receipt_config(path) == DEFAULTS


def test_receipt_config_ignores_non_object(tmp_path):
    path = tmp_path / "receipt_config.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")

    assert load_receipt_config(path) == DEFAULTS


def test_formatters():
    assert format_currency(1234.5) == "R$ 1.234,50"
    assert format_quantity(3, Unit.UN) == "3 UN"
    assert format_quantity(0.25, Unit.KG) == "0.250 KG"
