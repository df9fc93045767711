"""
Carrinho e controle de estoque.
O estoque só é baixado na finalização da venda; aqui garantimos apenas que
nenhuma linha do carrinho ultrapasse o estoque atual do produto.
"""
from typing import List, Optional

from models.app_state import AppState
from models.cart import CartItem
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Todas as recusas são no-ops silenciosos (retornam False); a mensagem ao
    usuário fica a cargo da interface.
    """

    def __init__(self, state: AppState):
        self.state = state

    @property
    def items(self) -> List[CartItem]:
        return list(self.state.cart)

    def is_empty(self) -> bool:
        return not self.state.cart

    def find_item(self, product_id: str) -> Optional[CartItem]:
        return next((i for i in self.state.cart if i.product_id == product_id), None)

    def _catalog_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self.state.products if p.id == product_id), None)

    def add_to_cart(self, product: Product, quantity=1) -> bool:
        """
        Adiciona `quantity` do produto (arredondada conforme a unidade).
        Recusado se o produto estiver sem estoque ou se o total no carrinho
        passar a exceder o estoque atual.
        """
        current = self._catalog_product(product.id)
        if current is None or current.stock <= 0:
            logger.debug("Produto %s sem estoque; item não adicionado", product.id)
            return False
        rule = current.rule
        amount = rule.normalize(quantity)
        if amount <= 0:
            return False

        existing = self.find_item(current.id)
        if existing is not None:
            new_quantity = rule.add(existing.quantity, amount)
            if new_quantity > current.stock:
                logger.debug("Estoque insuficiente para %s: %s > %s", current.cod, new_quantity, current.stock)
                return False
            self.state.cart = [
                i.with_quantity(new_quantity) if i.product_id == current.id else i
                for i in self.state.cart
            ]
        else:
            if amount > current.stock:
                logger.debug("Estoque insuficiente para %s: %s > %s", current.cod, amount, current.stock)
                return False
            self.state.cart = [*self.state.cart, CartItem.of(current, amount)]
        return True

    def remove_from_cart(self, product_id: str) -> bool:
        if self.find_item(product_id) is None:
            return False
        self.state.cart = [i for i in self.state.cart if i.product_id != product_id]
        return True

    def update_cart_item_quantity(self, product_id: str, new_quantity) -> bool:
        """
        Define a quantidade da linha. Quantidade <= 0 remove a linha; acima
        do estoque atual a alteração é recusada e a quantidade anterior fica.
        """
        item = self.find_item(product_id)
        if item is None:
            return False
        rule = item.product.rule
        quantity = rule.normalize(new_quantity)
        if quantity <= 0:
            return self.remove_from_cart(product_id)
        current = self._catalog_product(product_id)
        if current is None or quantity > current.stock:
            logger.debug("Quantidade %s recusada para %s", quantity, product_id)
            return False
        self.state.cart = [
            i.with_quantity(quantity) if i.product_id == product_id else i
            for i in self.state.cart
        ]
        return True

    def clear_cart(self) -> None:
        self.state.cart = []
