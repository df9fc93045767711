"""
Ciclo de vida do caixa: abertura, vendas vinculadas e fechamento.
"""
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from models.app_state import AppState
from models.cash_session import STATUS_CLOSED, STATUS_OPEN, CashRegisterSession
from models.transaction import PaymentMethod
from services import codes
from utils.logger import get_logger

logger = get_logger(__name__)


def cash_total(session: CashRegisterSession) -> float:
    return round(
        sum(t.total for t in session.transactions if t.payment_method == PaymentMethod.CASH), 2
    )


class CashRegisterService:
    """
    Máquina de estados com dois estados: fechado (inicial) e aberto.
    Apenas uma sessão pode estar aberta por vez.
    """

    def __init__(
        self,
        state: AppState,
        commit: Callable[[], None],
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.state = state
        self._commit = commit
        self._clock = clock

    @property
    def current(self) -> Optional[CashRegisterSession]:
        return self.state.current_cash_register

    def is_open(self) -> bool:
        session = self.state.current_cash_register
        return session is not None and session.status == STATUS_OPEN

    def open(self, opening_balance: float) -> Optional[CashRegisterSession]:
        """
        Abre o caixa com o troco inicial. Recusado (None) se já houver caixa
        aberto ou se ninguém estiver logado.
        """
        user = self.state.current_user
        if user is None:
            logger.info("Abertura de caixa recusada: nenhum operador logado")
            return None
        if self.is_open():
            logger.info("Abertura de caixa recusada: já existe um caixa aberto")
            return None
        session = CashRegisterSession(
            id=codes.new_id(),
            opening_time=self._clock(),
            opening_balance=round(float(opening_balance), 2),
            operator_id=user.id,
            operator_name=user.name,
            status=STATUS_OPEN,
        )
        self.state.current_cash_register = session
        logger.info(
            "Caixa aberto por %s com troco inicial %.2f", user.cod, session.opening_balance
        )
        return session

    def close(self) -> Optional[CashRegisterSession]:
        """
        Fecha o caixa: saldo final = abertura + vendas em dinheiro da sessão.
        A sessão fechada vai para o início do histórico.
        """
        session = self.state.current_cash_register
        if session is None or session.status != STATUS_OPEN:
            logger.info("Fechamento de caixa recusado: nenhum caixa aberto")
            return None
        closed = replace(
            session,
            status=STATUS_CLOSED,
            closing_time=self._clock(),
            closing_balance=round(session.opening_balance + cash_total(session), 2),
            transactions=list(session.transactions),
        )
        self.state.cash_register_history = [closed, *self.state.cash_register_history]
        self.state.current_cash_register = None
        self._commit()
        logger.info("Caixa fechado com saldo %.2f", closed.closing_balance)
        return closed
