"""
Controlador do PDV: dono único do estado da aplicação.

Carrega o snapshot ao iniciar, liga os serviços ao mesmo estado e grava o
snapshot a cada mutação confirmada. A gravação é "dispare e esqueça": uma
falha é registrada em log e o estado em memória permanece como está.

Se a leitura do armazenamento falhar (banco travado, fora do ar), o
controlador fica somente leitura: nada é gravado por cima do snapshot que
não pôde ser lido até que `reload()` consiga carregá-lo.
"""
from dataclasses import fields
from datetime import datetime
from typing import Callable, Optional

from config import settings
from models.app_state import AppState
from models.theme import FONT_FAMILIES, HSLColor, ThemeSettings
from services.auth_service import AuthService
from services.cart_service import CartService
from services.cash_register_service import CashRegisterService
from services.catalog_service import CatalogService
from services.persistence import (
    PERSISTENCE_ERRORS,
    SnapshotError,
    SnapshotRepository,
    deserialize_state,
    serialize_state,
)
from services.report_service import ReportService
from services.sale_service import SaleService
from services.seed import seed_defaults
from utils.logger import get_logger

logger = get_logger(__name__)


class PointOfSale:
    def __init__(
        self,
        repository: Optional[SnapshotRepository] = None,
        storage_key: Optional[str] = None,
        clock: Callable[[], datetime] = datetime.now,
        seed: Optional[bool] = None,
    ):
        if repository is None:
            from services.persistence import SqlSnapshotRepository

            repository = SqlSnapshotRepository()
        self.repository = repository
        self.storage_key = storage_key or settings.STORAGE_KEY
        self.seed = settings.SEED_DEMO if seed is None else seed
        self.read_only = False
        self.state = AppState()
        self._load()

        self.catalog = CatalogService(self.state, self.commit)
        self.auth = AuthService(self.state, self.commit)
        self.cash_register = CashRegisterService(self.state, self.commit, clock)
        self.cart = CartService(self.state)
        self.sales = SaleService(self.state, self.commit, clock)
        self.reports = ReportService(self.state, clock)

    def _replace_state(self, loaded: AppState) -> None:
        # Os serviços guardam a referência de self.state: troca campo a campo
        for f in fields(AppState):
            setattr(self.state, f.name, getattr(loaded, f.name))

    def _load(self) -> bool:
        try:
            data = self.repository.load(self.storage_key)
        except PERSISTENCE_ERRORS:
            logger.exception(
                "Falha ao ler o snapshot '%s'; modo somente leitura até recarregar",
                self.storage_key,
            )
            self.read_only = True
            return False
        except SnapshotError:
            logger.exception("Snapshot '%s' inválido; iniciando vazio", self.storage_key)
            data = None
        self.read_only = False

        if data is not None:
            try:
                self._replace_state(deserialize_state(data))
                return True
            except SnapshotError:
                logger.exception("Snapshot '%s' inválido; iniciando vazio", self.storage_key)

        loaded = AppState()
        if self.seed:
            seed_defaults(loaded)
        self._replace_state(loaded)
        if self.seed:
            self._save()
        return True

    def reload(self) -> bool:
        """
        Relê o snapshot. Usuário, caixa aberto e carrinho atuais são mantidos
        apenas se a leitura falhar de novo.
        """
        return self._load()

    def _save(self) -> bool:
        if self.read_only:
            logger.warning("Snapshot '%s' não gravado: modo somente leitura", self.storage_key)
            return False
        try:
            self.repository.save(self.storage_key, serialize_state(self.state))
        except PERSISTENCE_ERRORS:
            logger.exception("Falha ao gravar o snapshot '%s'", self.storage_key)
            return False
        return True

    def commit(self) -> bool:
        """Espelha o estado atual no armazenamento durável."""
        return self._save()

    def update_theme(self, h: int, s: int, l: int, font_family: Optional[str] = None) -> ThemeSettings:  # noqa: E741
        font = font_family if font_family in FONT_FAMILIES else self.state.theme.font_family
        self.state.theme = ThemeSettings(primary_color=HSLColor(h=h, s=s, l=l), font_family=font)
        self.commit()
        return self.state.theme
