from dataclasses import dataclass, replace

from models.product import Product, Quantity


@dataclass(frozen=True)
class CartItem:
    """
    Item do carrinho: cópia do produto no momento da inclusão + quantidade.
    Alterações posteriores no produto não afetam o item.
    """

    product: Product
    quantity: Quantity

    @classmethod
    def of(cls, product: Product, quantity: Quantity) -> "CartItem":
        return cls(product=replace(product), quantity=quantity)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> float:
        return round(self.product.price * self.quantity, 2)

    def with_quantity(self, quantity: Quantity) -> "CartItem":
        return CartItem(product=self.product, quantity=quantity)

    def to_dict(self) -> dict:
        data = self.product.to_dict()
        data["quantity"] = self.quantity
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        product = Product.from_dict(data)
        return cls(
            product=product,
            quantity=product.rule.normalize(data.get("quantity") or 0),
        )
