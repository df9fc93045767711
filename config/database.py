"""
Configuração do banco de dados para o PDV
- O estado do PDV é gravado como um snapshot JSON por chave (tabela app_snapshots)
- Suporta SQLite para uso local (padrão: data/pdv.db)
- Suporta PostgreSQL via DATABASE_URL
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import DATA_DIR, DATABASE_URL


def build_engine(url: str):
    """
    Cria o engine conforme o tipo de banco.
    """
    if url.startswith("postgresql"):
        return create_engine(
            url,
            echo=False,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
            pool_recycle=3600,
        )
    if url.startswith("sqlite:///"):
        DATA_DIR.mkdir(parents=True, exist_ok=True)
    # SQLite (uso local)
    return create_engine(
        url,
        connect_args={"check_same_thread": False},
        echo=False,
    )


engine = build_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para os modelos
Base = declarative_base()


def get_db():
    """
    Dependency simples para obter uma sessão do banco de dados.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Cria todas as tabelas definidas nos modelos.
    Deve ser chamada uma vez na inicialização da aplicação.
    """
    # Importa modelos aqui para registrar no metadata
    from models import snapshot  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
