"""
Gera o recibo da venda (texto para impressora térmica e HTML para o navegador).
Funções puras: recebem a transação congelada e não alteram nada.
"""
from html import escape

from utils.formatters import format_currency
from utils.receipt_config import load_receipt_config


def _center(text: str, width: int) -> str:
    return text[:width].center(width).rstrip()


def _columns(left: str, right: str, width: int) -> str:
    space = max(width - len(left) - len(right), 1)
    return f"{left}{' ' * space}{right}"


def build_receipt_lines(transaction, config: dict = None) -> list:
    """
    transaction: Transaction finalizada.
    config: dict de layout (ou None para usar load_receipt_config()).
    """
    if config is None:
        config = load_receipt_config()
    width = int(config.get("line_width", 40))
    sep = "-" * width

    lines = []
    for key in ("subheader_text", "header_text", "address_text", "document_text"):
        text = (config.get(key) or "").strip()
        if text:
            lines.append(_center(text, width))
    lines.append(sep)
    lines.append(
        f"DATA: {transaction.date.strftime('%d/%m/%Y')} HORA: {transaction.date.strftime('%H:%M:%S')}"
    )
    operator = transaction.operator
    if transaction.operator_cod:
        operator = f"{operator} ({transaction.operator_cod})"
    lines.append(f"OPERADOR: {operator}")
    lines.append(f"TRANSACAO ID: {transaction.id}")
    lines.append(sep)
    lines.append(_columns("ITEM", "QTD   VL.UN   VL.TOT", width))
    for index, item in enumerate(transaction.items, start=1):
        product = item.product
        lines.append(f"{index:03d} {product.name}"[:width])
        qty = f"{product.unit.quantity.format(item.quantity)}{product.unit.value}"
        lines.append(
            _columns("", f"{qty}  {product.price:.2f}  {item.line_total:.2f}", width)
        )
    lines.append(sep)
    lines.append(_columns("QTD. TOTAL DE ITENS:", f"{transaction.total_quantity:.3f}", width))
    lines.append(_columns("TOTAL R$:", f"{transaction.total:.2f}", width))
    lines.append(_columns("FORMA PAGAMENTO:", transaction.payment_method.value, width))
    footer = (config.get("footer_text") or "").strip()
    if footer:
        lines.append("")
        lines.append(_center(footer, width))
    return lines


def build_receipt_text(transaction, config: dict = None) -> str:
    return "\n".join(build_receipt_lines(transaction, config))


def build_receipt_html(transaction, config: dict = None) -> str:
    """
    Retorna HTML completo (documento) para exibir em iframe e imprimir.
    """
    if config is None:
        config = load_receipt_config()
    w_mm = config.get("paper_width_mm", 80)
    margin_mm = config.get("margin_mm", 5)
    font_pt = config.get("font_size_pt", 10)
    body_content = escape(build_receipt_text(transaction, config))
    width_px = max(200, min(400, w_mm * 3.78))  # aprox 80mm ~ 302px

    html = f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Recibo {escape(transaction.id)} - {escape(format_currency(transaction.total))}</title>
<style>
  body {{
    width: {w_mm}mm;
    max-width: {width_px}px;
    margin: {margin_mm}mm auto;
    font-family: monospace;
    font-size: {font_pt}pt;
    background: #fff;
    color: #000;
  }}
  pre {{ margin: 0; white-space: pre-wrap; }}
  .no-print {{ margin-top: 12px; text-align: center; }}
  @media print {{
    .no-print {{ display: none !important; }}
  }}
</style>
</head>
<body>
<pre class="receipt-content">{body_content}</pre>
<div class="no-print">
  <button type="button" onclick="window.print();">Imprimir</button>
</div>
</body>
</html>"""
    return html
