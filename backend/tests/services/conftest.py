"""Service test fixtures — in-memory SQLite persistence and wired stores.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Stores are built on the real SqlDocumentPersistence (no mocks below the store)
    - No seeding unless a test asks for it; fixtures create the users they need

Design Decisions:
    - SQLite in-memory with StaticPool: fast, no external dependency, same engine
      for every session the persistence opens
"""

from datetime import datetime, timedelta, timezone

import pytest

from showcase.core.domain_types import PortfolioCategory, PortfolioType, UserRole
from showcase.infrastructure.database import DatabaseSessionManager
from showcase.infrastructure.document_persistence import SqlDocumentPersistence
from showcase.schemas.portfolio import PortfolioCreate
from showcase.schemas.user import UserCreate
from showcase.services.aggregation_engine import PortfolioAggregationEngine
from showcase.services.portfolio_store import PortfolioStore
from showcase.services.session_manager import SessionManager
from showcase.services.user_store import UserStore


class FakeClock:
    """Deterministic, manually advanced UTC clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def db_manager():
    manager = DatabaseSessionManager("sqlite://")
    manager.create_tables()
    yield manager
    manager.dispose()


@pytest.fixture
def persistence(db_manager):
    return SqlDocumentPersistence(db_manager)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 5, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def user_store(persistence):
    return UserStore(persistence)


@pytest.fixture
def portfolio_store(persistence, user_store, clock):
    return PortfolioStore(persistence, user_store, clock=clock)


@pytest.fixture
def session_manager(persistence, user_store):
    return SessionManager(persistence, user_store)


@pytest.fixture
def engine(portfolio_store):
    return PortfolioAggregationEngine(portfolio_store)


@pytest.fixture
def admin(user_store):
    return user_store.create(UserCreate(
        username="admin", password="admin-pw", display_name="Ada Admin",
        role=UserRole.ADMIN,
    ))


@pytest.fixture
def contributor(user_store):
    return user_store.create(UserCreate(
        username="jane", password="jane-pw", display_name="Jane Doe",
        role=UserRole.CONTRIBUTOR,
    ))


@pytest.fixture
def portfolio_data():
    return PortfolioCreate(
        title="Library System",
        description="Loans and returns for the school library.",
        category=PortfolioCategory.PERSONNEL,
        type=PortfolioType.APPLICATION,
        cover_image="data:image/png;base64,AAAA",
        album_images=["data:image/png;base64,BBBB", "data:image/png;base64,CCCC"],
    )


@pytest.fixture
def portfolio(portfolio_store, contributor, portfolio_data):
    return portfolio_store.create(portfolio_data, contributor.id)
