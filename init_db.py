"""
Script para inicializar o armazenamento do PDV.
- Cria a tabela de snapshots
- Grava o estado inicial (cargos, funcionários e produtos de demonstração)
"""
from config.database import init_db
from config.settings import STORAGE_KEY
from services.persistence import SqlSnapshotRepository
from services.point_of_sale import PointOfSale


def main() -> None:
    print("📦 Inicializando armazenamento do PDV...")
    init_db()
    print("✅ Tabelas criadas (se não existiam).")

    repository = SqlSnapshotRepository()
    if repository.load(STORAGE_KEY) is None:
        PointOfSale(repository=repository, seed=True)
        print(
            "✅ Estado inicial gravado: ADM-001 (senha 2026), G-001 e V-001 (sem senha) "
            "(altere em produção)."
        )
    else:
        print(f"ℹ️ Já existe um snapshot salvo em '{STORAGE_KEY}'.")


if __name__ == "__main__":
    main()
