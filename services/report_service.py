"""
Relatórios de vendas e de caixa. Somente leitura: nada aqui altera o estado.
"""
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional

from models.app_state import AppState
from models.cash_session import CashRegisterSession
from models.transaction import PaymentMethod, Transaction


@dataclass(frozen=True)
class SessionSummary:
    session_id: str
    operator_name: str
    opening_balance: float
    cash_total: float
    card_total: float
    pix_total: float
    transaction_count: int
    closing_balance: Optional[float]

    @property
    def total_sales(self) -> float:
        return round(self.cash_total + self.card_total + self.pix_total, 2)

    @property
    def expected_cash(self) -> float:
        """Dinheiro esperado na gaveta: troco inicial + vendas em dinheiro."""
        return round(self.opening_balance + self.cash_total, 2)


def totals_by_payment(transactions) -> Dict[PaymentMethod, float]:
    totals = {method: 0.0 for method in PaymentMethod}
    for t in transactions:
        totals[t.payment_method] += t.total
    return {method: round(value, 2) for method, value in totals.items()}


def summarize_session(session: CashRegisterSession) -> SessionSummary:
    totals = totals_by_payment(session.transactions)
    return SessionSummary(
        session_id=session.id,
        operator_name=session.operator_name,
        opening_balance=session.opening_balance,
        cash_total=totals[PaymentMethod.CASH],
        card_total=totals[PaymentMethod.CARD],
        pix_total=totals[PaymentMethod.PIX],
        transaction_count=len(session.transactions),
        closing_balance=session.closing_balance,
    )


class ReportService:
    def __init__(self, state: AppState, clock: Callable[[], datetime] = datetime.now):
        self.state = state
        self._clock = clock

    def history(self) -> List[CashRegisterSession]:
        return list(self.state.cash_register_history)

    def session_summary(self, session: CashRegisterSession) -> SessionSummary:
        return summarize_session(session)

    def current_session_summary(self) -> Optional[SessionSummary]:
        session = self.state.current_cash_register
        return summarize_session(session) if session else None

    def filter_transactions(
        self,
        start: Optional[date] = None,
        end: Optional[date] = None,
        payment_method=None,
    ) -> List[Transaction]:
        """
        Transações no período (datas inclusivas) e forma de pagamento,
        da mais recente para a mais antiga.
        """
        method = PaymentMethod.parse(payment_method) if payment_method else None
        result = []
        for t in self.state.transactions:
            day = t.date.date()
            if start and day < start:
                continue
            if end and day > end:
                continue
            if method and t.payment_method != method:
                continue
            result.append(t)
        return sorted(result, key=lambda t: t.date, reverse=True)

    def sales_by_day(self, days: int = 7) -> "OrderedDict[date, float]":
        """Total vendido por dia nos últimos `days` dias (inclui hoje)."""
        today = self._clock().date()
        series = OrderedDict(
            (today - timedelta(days=offset), 0.0) for offset in range(days - 1, -1, -1)
        )
        for t in self.state.transactions:
            day = t.date.date()
            if day in series:
                series[day] = round(series[day] + t.total, 2)
        return series

    def top_products(self, limit: int = 5) -> List[dict]:
        """Produtos mais vendidos por valor, a partir das cópias nas transações."""
        ranking: Dict[str, dict] = {}
        for t in self.state.transactions:
            for item in t.items:
                entry = ranking.setdefault(
                    item.product_id,
                    {"cod": item.product.cod, "name": item.product.name, "unit": item.product.unit.value,
                     "quantity": 0.0, "revenue": 0.0},
                )
                entry["quantity"] = round(entry["quantity"] + float(item.quantity), 3)
                entry["revenue"] = round(entry["revenue"] + item.line_total, 2)
        ordered = sorted(ranking.values(), key=lambda e: e["revenue"], reverse=True)
        return ordered[:limit]
