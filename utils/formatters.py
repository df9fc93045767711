from datetime import date, datetime

from models.product import Unit


def format_currency(value: float) -> str:
    """
    Formata um número como moeda em reais (R$ 1.234,56).
    """
    return f"R$ {value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_date(d: date | datetime) -> str:
    """
    Formata datas no padrão brasileiro.
    """
    if isinstance(d, datetime):
        return d.strftime("%d/%m/%Y %H:%M")
    return d.strftime("%d/%m/%Y")


def format_quantity(value, unit: Unit) -> str:
    """Quantidade com a unidade: '3 UN', '0.250 KG'."""
    return f"{unit.quantity.format(value)} {unit.value}"
