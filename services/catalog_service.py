"""
Catálogo do PDV: produtos, fornecedores e cargos.
"""
from dataclasses import replace
from typing import Callable, Optional

from models.app_state import AppState
from models.employee import Role
from models.product import Product, Unit
from models.supplier import Supplier
from services import codes
from utils.logger import get_logger

logger = get_logger(__name__)


class CatalogService:
    """
    CRUD de produtos, fornecedores e cargos e geração dos próximos códigos.
    Nenhuma operação levanta exceção: validação de entrada é do chamador.
    """

    def __init__(self, state: AppState, commit: Callable[[], None]):
        self.state = state
        self._commit = commit

    # ----- Códigos -----

    def next_product_code(self) -> str:
        return codes.next_product_code(p.cod for p in self.state.products)

    def next_supplier_code(self) -> str:
        return codes.next_supplier_code(s.cod for s in self.state.suppliers)

    def next_employee_code(self, role_id: str) -> Optional[str]:
        return codes.next_employee_code(self.state.roles, self.state.employees, role_id)

    # ----- Produtos -----

    def find_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self.state.products if p.id == product_id), None)

    def find_product_by_code(self, cod: str) -> Optional[Product]:
        cod = (cod or "").strip()
        if not cod:
            return None
        return next((p for p in self.state.products if p.cod == cod), None)

    def add_product(
        self,
        name: str,
        price: float,
        stock=0,
        unit=Unit.UN,
        supplier_id: Optional[str] = None,
        cod: Optional[str] = None,
    ) -> Product:
        """
        Cadastra um produto. O código é gerado neste momento, a menos que o
        chamador informe um (ex.: código de barras do fabricante).
        """
        unit = Unit.parse(unit)
        product = Product(
            id=codes.new_id(),
            cod=(cod or "").strip() or self.next_product_code(),
            name=name,
            price=float(price),
            stock=unit.quantity.normalize(stock),
            unit=unit,
            supplier_id=supplier_id,
        )
        self.state.products = [*self.state.products, product]
        self._commit()
        logger.info("Produto cadastrado: %s (%s)", product.cod, product.name)
        return product

    def update_product(self, product: Product) -> bool:
        current = self.find_product(product.id)
        if current is None:
            return False
        # O código é imutável após o cadastro
        updated = replace(
            product,
            cod=current.cod,
            stock=product.unit.quantity.normalize(product.stock),
        )
        self.state.products = [updated if p.id == product.id else p for p in self.state.products]
        self._commit()
        return True

    def delete_product(self, product_id: str) -> bool:
        if self.find_product(product_id) is None:
            return False
        # Transações guardam cópias dos itens, então a exclusão é livre
        self.state.products = [p for p in self.state.products if p.id != product_id]
        self._commit()
        return True

    # ----- Fornecedores -----

    def find_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return next((s for s in self.state.suppliers if s.id == supplier_id), None)

    def add_supplier(
        self,
        name: str,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Supplier:
        supplier = Supplier(
            id=codes.new_id(),
            cod=self.next_supplier_code(),
            name=name,
            contact_person=contact_person,
            phone=phone,
            email=email,
            address=address,
        )
        self.state.suppliers = [*self.state.suppliers, supplier]
        self._commit()
        return supplier

    def update_supplier(self, supplier: Supplier) -> bool:
        current = self.find_supplier(supplier.id)
        if current is None:
            return False
        updated = replace(supplier, cod=current.cod)
        self.state.suppliers = [updated if s.id == supplier.id else s for s in self.state.suppliers]
        self._commit()
        return True

    def delete_supplier(self, supplier_id: str) -> bool:
        if self.find_supplier(supplier_id) is None:
            return False
        # supplier_id nos produtos é referência fraca: permanece como está
        self.state.suppliers = [s for s in self.state.suppliers if s.id != supplier_id]
        self._commit()
        return True

    # ----- Cargos -----

    def find_role(self, role_id: str) -> Optional[Role]:
        return next((r for r in self.state.roles if r.id == role_id), None)

    @staticmethod
    def _clean_prefix(prefix: str) -> str:
        return "".join(ch for ch in (prefix or "") if ch.isalpha()).upper()[:3]

    def add_role(self, name: str, prefix: str) -> Optional[Role]:
        """Cadastra um cargo. Recusado (None) se o prefixo não tiver letras."""
        clean = self._clean_prefix(prefix)
        if not clean:
            logger.info("Cargo %s ignorado: prefixo %r sem letras", name, prefix)
            return None
        role = Role(id=codes.new_id(), name=name, prefix=clean)
        self.state.roles = [*self.state.roles, role]
        self._commit()
        return role

    def update_role(self, role: Role) -> bool:
        clean = self._clean_prefix(role.prefix)
        if self.find_role(role.id) is None or not clean:
            return False
        updated = replace(role, prefix=clean)
        self.state.roles = [updated if r.id == role.id else r for r in self.state.roles]
        self._commit()
        return True

    def can_delete_role(self, role_id: str) -> bool:
        return not any(e.role_id == role_id for e in self.state.employees)

    def delete_role(self, role_id: str) -> bool:
        if self.find_role(role_id) is None:
            return False
        if not self.can_delete_role(role_id):
            logger.info("Cargo %s em uso por funcionários; exclusão ignorada", role_id)
            return False
        self.state.roles = [r for r in self.state.roles if r.id != role_id]
        self._commit()
        return True
