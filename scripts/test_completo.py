"""
Script de teste completo do PDV contra o armazenamento configurado.
Percorre login, abertura de caixa, venda, fechamento e relatórios, e confere
que o estado foi gravado e pode ser recarregado.
Usa uma chave de armazenamento própria para não tocar no estado real.
"""
import sys
from pathlib import Path

# Adiciona o diretório raiz ao path
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.database import init_db
from config.settings import DATABASE_URL
from services.persistence import SqlSnapshotRepository
from services.point_of_sale import PointOfSale
from utils.formatters import format_currency
from utils.receipt_builder import build_receipt_text

TEST_KEY = "pos-storage-teste-completo"


def print_header(text: str):
    """Imprime um cabeçalho formatado."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def print_success(text: str):
    print(f"[OK] {text}")


def print_error(text: str):
    print(f"[ERRO] {text}")


def check(condition: bool, ok: str, erro: str) -> bool:
    if condition:
        print_success(ok)
    else:
        print_error(erro)
    return condition


def main() -> int:
    print_header("TESTE COMPLETO DO PDV")
    print(f"  Banco: {DATABASE_URL}")
    init_db()
    repository = SqlSnapshotRepository()
    repository.delete(TEST_KEY)
    pos = PointOfSale(repository=repository, storage_key=TEST_KEY, seed=True)
    resultados = []

    print_header("1. Login e abertura de caixa")
    resultados.append(check(pos.auth.login("ADM-001", "2026"), "Login ADM-001", "Login ADM-001 falhou"))
    resultados.append(check(pos.cash_register.open(300.0) is not None, "Caixa aberto", "Caixa não abriu"))

    print_header("2. Venda")
    cafe = pos.catalog.find_product_by_code("PROD-0001")
    maca = pos.catalog.find_product_by_code("PROD-0004")
    pos.cart.add_to_cart(cafe, 3)
    pos.cart.add_to_cart(maca, 0.75)
    total = round(sum(i.line_total for i in pos.cart.items), 2)
    venda = pos.sales.finalize_sale("Dinheiro", total)
    resultados.append(check(venda is not None, f"Venda registrada: {format_currency(total)}", "Venda falhou"))
    if venda:
        print(build_receipt_text(venda))

    print_header("3. Fechamento")
    fechada = pos.cash_register.close()
    resultados.append(
        check(
            fechada is not None and fechada.closing_balance == round(300.0 + total, 2),
            f"Saldo final {format_currency(fechada.closing_balance if fechada else 0)}",
            "Fechamento incorreto",
        )
    )

    print_header("4. Recarga do estado")
    recarregado = PointOfSale(repository=repository, storage_key=TEST_KEY, seed=False)
    resultados.append(
        check(
            len(recarregado.state.transactions) == 1 and recarregado.state.current_user is None,
            "Snapshot recarregado (sem operador logado)",
            "Snapshot divergente",
        )
    )

    print_header(f"RESULTADO: {sum(resultados)}/{len(resultados)} verificações OK")
    return 0 if all(resultados) else 1


if __name__ == "__main__":
    sys.exit(main())
