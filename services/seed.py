"""
Dados iniciais do PDV (cargos, funcionários e produtos de demonstração).
"""
from models.app_state import AppState
from models.employee import Employee, Role
from models.product import Product, Unit
from services.auth_service import AuthService

DEFAULT_ROLES = [
    Role(id="role-gerente", name="Gerente", prefix="G"),
    Role(id="role-vendedor", name="Vendedor", prefix="V"),
    Role(id="role-admin", name="Administrador", prefix="ADM"),
]

DEMO_PRODUCTS = [
    ("PROD-0001", "Café Expresso", 5.00, 100, Unit.UN),
    ("PROD-0002", "Pão de Queijo", 3.50, 50, Unit.UN),
    ("PROD-0003", "Bolo de Fubá", 7.00, 30, Unit.UN),
    ("PROD-0004", "Maçã Fuji", 7.99, 25.5, Unit.KG),
    ("PROD-0005", "Queijo Minas Frescal", 45.90, 8.25, Unit.KG),
    ("PROD-0006", "Leite Integral (caixa c/ 12)", 54.00, 10, Unit.CX),
]


def seed_defaults(state: AppState, with_products: bool = True) -> AppState:
    """
    Preenche um estado vazio com cargos e funcionários padrão.
    ADM-001 tem senha '2026'; G-001 e V-001 entram sem senha.
    """
    if not state.roles:
        state.roles = [Role(r.id, r.name, r.prefix) for r in DEFAULT_ROLES]
    if not state.employees:
        state.employees = [
            Employee(
                id="emp-adm-001",
                cod="ADM-001",
                name="Administrador",
                role_id="role-admin",
                password_hash=AuthService.hash_password("2026"),
            ),
            Employee(id="emp-g-001", cod="G-001", name="Gerente", role_id="role-gerente"),
            Employee(id="emp-v-001", cod="V-001", name="Vendedor", role_id="role-vendedor"),
        ]
    if with_products and not state.products:
        state.products = [
            Product(
                id=f"prod-{i + 1}",
                cod=cod,
                name=name,
                price=price,
                stock=unit.quantity.normalize(stock),
                unit=unit,
            )
            for i, (cod, name, price, stock, unit) in enumerate(DEMO_PRODUCTS)
        ]
    return state
