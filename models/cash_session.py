from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from models.transaction import Transaction

STATUS_OPEN = "aberto"
STATUS_CLOSED = "fechado"


@dataclass
class CashRegisterSession:
    """
    Sessões de caixa (abertura/fechamento).
    Apenas uma sessão com status 'aberto' deve existir por vez.
    """

    id: str
    opening_time: datetime
    opening_balance: float
    operator_id: str
    operator_name: str
    status: str = STATUS_OPEN
    closing_time: Optional[datetime] = None
    closing_balance: Optional[float] = None
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.status == STATUS_OPEN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "openingTime": self.opening_time.isoformat(),
            "closingTime": self.closing_time.isoformat() if self.closing_time else None,
            "openingBalance": self.opening_balance,
            "closingBalance": self.closing_balance,
            "operatorId": self.operator_id,
            "operatorName": self.operator_name,
            "status": self.status,
            "transactions": [t.to_dict() for t in self.transactions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CashRegisterSession":
        closing_time = data.get("closingTime")
        closing_balance = data.get("closingBalance")
        return cls(
            id=str(data["id"]),
            opening_time=datetime.fromisoformat(data["openingTime"]),
            opening_balance=float(data.get("openingBalance") or 0.0),
            operator_id=str(data.get("operatorId") or ""),
            operator_name=data.get("operatorName") or "",
            status=data.get("status") or STATUS_CLOSED,
            closing_time=datetime.fromisoformat(closing_time) if closing_time else None,
            closing_balance=float(closing_balance) if closing_balance is not None else None,
            transactions=[Transaction.from_dict(t) for t in data.get("transactions") or []],
        )
