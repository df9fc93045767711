"""
Script para limpar o estado salvo e testar do zero.
- Remove o snapshot do PDV (via SQL, sem apagar o arquivo do banco)
- Grava novamente o estado inicial (cargos, funcionários e produtos de demonstração)

Pode rodar mesmo com o Streamlit aberto (as sessões abertas continuam com o estado antigo
em memória até serem recarregadas).
"""
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from config.database import init_db
from config.settings import STORAGE_KEY
from services.persistence import SqlSnapshotRepository
from services.point_of_sale import PointOfSale


def main() -> None:
    print("Limpando estado do PDV...")
    init_db()  # garante que a tabela existe

    repository = SqlSnapshotRepository()
    removed = repository.delete(STORAGE_KEY)
    print(f"  Snapshot removido: {'sim' if removed else 'não havia'}")

    PointOfSale(repository=repository, seed=True)
    print("  Estado inicial recriado: ADM-001 (senha 2026), G-001 e V-001 (sem senha).")
    print("Pronto.")


if __name__ == "__main__":
    main()
