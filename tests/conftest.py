import os
import sys
from datetime import datetime, timedelta

import pytest

# Permite rodar o pytest da raiz do projeto ou de dentro de `tests/`.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

# Nada de arquivo em disco nem IA de verdade durante os testes
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PDV_SEED_DEMO", "false")
os.environ["AI_ENABLED"] = "false"

from models.app_state import AppState  # noqa: E402
from services.persistence import MemorySnapshotRepository, serialize_state  # noqa: E402
from services.point_of_sale import PointOfSale  # noqa: E402
from services.seed import seed_defaults  # noqa: E402

STORAGE_KEY = "pos-storage-test"


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(scope="session")
def seeded_snapshot():
    # bcrypt é lento: o estado padrão é gerado uma vez por sessão de testes
    return serialize_state(seed_defaults(AppState()))


@pytest.fixture
def repository(seeded_snapshot):
    return MemorySnapshotRepository({STORAGE_KEY: seeded_snapshot})


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 3, 14, 10, 30, 0))


@pytest.fixture
def pos(repository, clock):
    return PointOfSale(repository=repository, storage_key=STORAGE_KEY, clock=clock, seed=False)


@pytest.fixture
def logged_in_pos(pos):
    assert pos.auth.login("ADM-001", "2026")
    return pos


@pytest.fixture
def open_pos(logged_in_pos):
    assert logged_in_pos.cash_register.open(300.0) is not None
    return logged_in_pos
