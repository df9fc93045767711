from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from models.cart import CartItem


class PaymentMethod(str, Enum):
    CASH = "Dinheiro"
    CARD = "Cartão"
    PIX = "PIX"

    @classmethod
    def parse(cls, value) -> Optional["PaymentMethod"]:
        """Aceita o enum, o rótulo ('Dinheiro') ou o nome ('CASH'); None se desconhecido."""
        if isinstance(value, PaymentMethod):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip()
        for method in cls:
            if text in (method.value, method.name) or text.lower() == method.value.lower():
                return method
        return None


@dataclass(frozen=True)
class Transaction:
    """
    Venda finalizada. Imutável; os itens são cópias congeladas do carrinho.
    """

    id: str
    items: Tuple[CartItem, ...]
    total: float
    payment_method: PaymentMethod
    date: datetime
    operator: str
    operator_cod: Optional[str] = None
    cash_register_session_id: Optional[str] = None
    pix_payload: Optional[str] = None

    @property
    def total_quantity(self) -> float:
        return round(sum(float(item.quantity) for item in self.items), 3)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
            "paymentMethod": self.payment_method.value,
            "date": self.date.isoformat(),
            "operator": self.operator,
            "operatorCod": self.operator_cod,
            "cashRegisterSessionId": self.cash_register_session_id,
            "pixPayload": self.pix_payload,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=str(data["id"]),
            items=tuple(CartItem.from_dict(i) for i in data.get("items") or []),
            total=float(data.get("total") or 0.0),
            payment_method=PaymentMethod.parse(data.get("paymentMethod")) or PaymentMethod.CASH,
            date=datetime.fromisoformat(data["date"]),
            operator=data.get("operator") or "",
            operator_cod=data.get("operatorCod"),
            cash_register_session_id=data.get("cashRegisterSessionId"),
            pix_payload=data.get("pixPayload"),
        )
