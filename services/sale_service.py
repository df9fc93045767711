"""
Finalização de venda e razão de transações.
"""
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, Optional

from models.app_state import AppState
from models.cart import CartItem
from models.cash_session import STATUS_OPEN
from models.transaction import PaymentMethod, Transaction
from utils.logger import get_logger

logger = get_logger(__name__)


# ----- Aritmética do chamador (totais e troco); não faz parte da finalização -----


def cart_subtotal(items: Iterable[CartItem]) -> float:
    return round(sum(i.product.price * float(i.quantity) for i in items), 2)


def compute_total(subtotal: float, discount: float = 0.0, addition: float = 0.0) -> float:
    """Subtotal - desconto + acréscimo, nunca negativo."""
    return max(round(subtotal - (discount or 0.0) + (addition or 0.0), 2), 0.0)


def compute_change(total: float, amount_paid: float) -> Optional[float]:
    """Troco para pagamento em dinheiro; None se o valor pago não cobre o total."""
    if amount_paid is None or amount_paid < total:
        return None
    return round(amount_paid - total, 2)


class SaleService:
    """
    Converte carrinho + forma de pagamento + total em uma transação
    permanente, em um único passo.
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
    def last_transaction(self) -> Optional[Transaction]:
        return self.state.last_transaction

    def clear_last_transaction(self) -> None:
        self.state.last_transaction = None

    def _new_transaction_id(self, now: datetime) -> str:
        base = now.strftime("%Y%m%d%H%M%S%f")
        existing = {t.id for t in self.state.transactions}
        tx_id, n = base, 1
        while tx_id in existing:
            tx_id = f"{base}-{n}"
            n += 1
        return tx_id

    def finalize_sale(
        self,
        payment_method,
        total: float,
        pix_payload: Optional[str] = None,
    ) -> Optional[Transaction]:
        """
        Registra a venda. O total é exatamente o informado pelo chamador
        (já com desconto/acréscimo) e nunca é recalculado aqui.

        Pré-condições: carrinho não vazio, operador logado, caixa aberto e
        estoque atual suficiente para cada linha; caso contrário nada muda e o
        retorno é None.
        """
        cart = self.state.cart
        user = self.state.current_user
        session = self.state.current_cash_register
        method = PaymentMethod.parse(payment_method)
        if not cart:
            logger.info("Venda recusada: carrinho vazio")
            return None
        if user is None:
            logger.info("Venda recusada: nenhum operador logado")
            return None
        if session is None or session.status != STATUS_OPEN:
            logger.info("Venda recusada: caixa fechado")
            return None
        if method is None:
            logger.info("Venda recusada: forma de pagamento desconhecida %r", payment_method)
            return None

        sold = {}
        for item in cart:
            sold[item.product_id] = item.product.rule.add(sold.get(item.product_id, 0), item.quantity)
        catalog = {p.id: p for p in self.state.products}
        for product_id, quantity in sold.items():
            # O estoque pode ter mudado (ou o produto sido excluído) depois da inclusão no carrinho
            current = catalog.get(product_id)
            if current is None or quantity > current.stock:
                logger.info("Venda recusada: estoque atual insuficiente para %s", product_id)
                return None

        now = self._clock()
        transaction = Transaction(
            id=self._new_transaction_id(now),
            items=tuple(CartItem.of(i.product, i.quantity) for i in cart),
            total=round(float(total), 2),
            payment_method=method,
            date=now,
            operator=user.name,
            operator_cod=user.cod,
            cash_register_session_id=session.id,
            pix_payload=pix_payload if method == PaymentMethod.PIX else None,
        )

        products = [
            replace(p, stock=p.rule.subtract(p.stock, sold[p.id])) if p.id in sold else p
            for p in self.state.products
        ]

        # Tudo calculado acima; a partir daqui o estado muda de uma só vez
        self.state.products = products
        self.state.transactions = [transaction, *self.state.transactions]
        session.transactions = [*session.transactions, transaction]
        self.state.cart = []
        self.state.last_transaction = transaction
        self._commit()

        logger.info(
            "Venda %s registrada: %.2f (%s) por %s",
            transaction.id,
            transaction.total,
            method.value,
            user.cod,
        )
        return transaction
