"""
Fronteira de persistência do PDV: serializa o estado em um snapshot JSON
e grava/lê esse snapshot em um armazenamento chave/valor durável.
"""
import json
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from models.app_state import AppState
from models.cash_session import STATUS_CLOSED, CashRegisterSession
from models.employee import Employee, Role
from models.product import Product
from models.snapshot import AppSnapshot
from models.supplier import Supplier
from models.theme import ThemeSettings
from models.transaction import Transaction

# Campos gravados no snapshot
PERSISTED_FIELDS = (
    "products",
    "transactions",
    "employees",
    "suppliers",
    "roles",
    "cashRegisterHistory",
    "theme",
)

# Nunca gravados: representam quem está fisicamente no caixa agora
LOCAL_FIELDS = ("cart", "currentUser", "currentCashRegister", "lastTransaction")

# Erros de gravação tratados como falha de persistência (não fatais)
PERSISTENCE_ERRORS = (SQLAlchemyError, OSError)


class SnapshotError(ValueError):
    """Snapshot salvo não é um objeto JSON válido."""


def serialize_state(state: AppState) -> dict:
    """Converte o estado para o layout persistido (apenas PERSISTED_FIELDS)."""
    return {
        "products": [p.to_dict() for p in state.products],
        "transactions": [t.to_dict() for t in state.transactions],
        "employees": [e.to_dict() for e in state.employees],
        "suppliers": [s.to_dict() for s in state.suppliers],
        "roles": [r.to_dict() for r in state.roles],
        "cashRegisterHistory": [s.to_dict() for s in state.cash_register_history],
        "theme": state.theme.to_dict(),
    }


def deserialize_state(data: dict) -> AppState:
    """
    Reconstrói o estado a partir de um snapshot.
    Chaves ausentes caem nos valores padrão; campos locais são ignorados.
    """
    if not isinstance(data, dict):
        raise SnapshotError(f"Snapshot inválido: esperado objeto, recebido {type(data).__name__}")
    try:
        history = [CashRegisterSession.from_dict(s) for s in data.get("cashRegisterHistory") or []]
        for session in history:
            # Sessões no histórico estão sempre fechadas
            session.status = STATUS_CLOSED
        return AppState(
            products=[Product.from_dict(p) for p in data.get("products") or []],
            transactions=[Transaction.from_dict(t) for t in data.get("transactions") or []],
            employees=[Employee.from_dict(e) for e in data.get("employees") or []],
            suppliers=[Supplier.from_dict(s) for s in data.get("suppliers") or []],
            roles=[Role.from_dict(r) for r in data.get("roles") or []],
            cash_register_history=history,
            theme=ThemeSettings.from_dict(data.get("theme") or {}),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotError(f"Snapshot inválido: registro malformado ({e!r})") from e


class SnapshotRepository:
    """
    Interface do armazenamento chave/valor.
    """

    def load(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def save(self, key: str, data: dict) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError


class MemorySnapshotRepository(SnapshotRepository):
    """
    Armazenamento em memória (testes e execuções descartáveis).
    Guarda o JSON serializado para reproduzir a fronteira real.
    """

    def __init__(self, initial: Optional[Dict[str, dict]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._data[key] = json.dumps(value)

    def load(self, key: str) -> Optional[dict]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, data: dict) -> None:
        self._data[key] = json.dumps(data, ensure_ascii=False)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def __contains__(self, key: str) -> bool:
        return key in self._data


class SqlSnapshotRepository(SnapshotRepository):
    """
    Armazenamento durável em banco via SQLAlchemy (tabela app_snapshots).
    """

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        if session_factory is None:
            from config.database import SessionLocal

            session_factory = SessionLocal
        self.session_factory = session_factory

    def load(self, key: str) -> Optional[dict]:
        db = self.session_factory()
        try:
            row = db.get(AppSnapshot, key)
            if row is None:
                return None
            try:
                return json.loads(row.payload)
            except json.JSONDecodeError as e:
                raise SnapshotError(f"Snapshot '{key}' corrompido: {e}") from e
        finally:
            db.close()

    def save(self, key: str, data: dict) -> None:
        payload = json.dumps(data, ensure_ascii=False)
        db = self.session_factory()
        try:
            row = db.get(AppSnapshot, key)
            if row is None:
                db.add(AppSnapshot(key=key, payload=payload))
            else:
                row.payload = payload
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()

    def delete(self, key: str) -> bool:
        db = self.session_factory()
        try:
            removed = db.query(AppSnapshot).filter(AppSnapshot.key == key).delete()
            db.commit()
            return bool(removed)
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()
