from dataclasses import dataclass, field
from typing import List, Optional

from models.cart import CartItem
from models.cash_session import CashRegisterSession
from models.employee import CurrentUser, Employee, Role
from models.product import Product
from models.supplier import Supplier
from models.theme import ThemeSettings
from models.transaction import Transaction


@dataclass
class AppState:
    """
    Estado completo do PDV, pertencente a um único controlador (PointOfSale).

    Persistidos: produtos, transações, funcionários, fornecedores, cargos,
    histórico de caixa e tema. Locais ao processo: carrinho, usuário atual,
    caixa aberto e última transação.
    """

    products: List[Product] = field(default_factory=list)
    transactions: List[Transaction] = field(default_factory=list)  # mais recente primeiro
    employees: List[Employee] = field(default_factory=list)
    suppliers: List[Supplier] = field(default_factory=list)
    roles: List[Role] = field(default_factory=list)
    cash_register_history: List[CashRegisterSession] = field(default_factory=list)
    theme: ThemeSettings = field(default_factory=ThemeSettings)

    cart: List[CartItem] = field(default_factory=list)
    current_user: Optional[CurrentUser] = None
    current_cash_register: Optional[CashRegisterSession] = None
    last_transaction: Optional[Transaction] = None
