"""Bootstrap — first-use seeding and wiring of stores, session, and aggregation engine.

Invariants:
    - Seeding writes a store key only if it has never been written (at most once per key)
    - Existing data is never touched by a later start, even an empty collection
    - Seeding runs before any store is constructed (stores load at construction)
    - Dependency order: persistence -> users, portfolios -> session, aggregation

Design Decisions:
    - Singleton showcase initialized on startup by the FastAPI lifespan,
      mirroring db_manager (no global import side effects)
    - Showcase as a plain dataclass container: routes receive it via Depends(get_showcase)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from showcase.core.domain_types import StoreKey
from showcase.core.repository_protocols import DocumentPersistence
from showcase.core.seed_data import initial_portfolios, initial_users
from showcase.services.aggregation_engine import PortfolioAggregationEngine
from showcase.services.portfolio_store import PortfolioStore
from showcase.services.session_manager import SessionManager
from showcase.services.user_store import UserStore

logger = logging.getLogger(__name__)


def seed_initial_data(
    persistence: DocumentPersistence, now: datetime | None = None,
) -> list[str]:
    """Write the literal dataset under each absent key. Returns the keys seeded."""
    now = now or datetime.now(timezone.utc)
    seeds = {
        StoreKey.USERS.value: initial_users,
        StoreKey.PORTFOLIOS.value: lambda: initial_portfolios(now),
    }
    seeded = []
    for key, build in seeds.items():
        with persistence.lock(key):
            if persistence.exists(key):
                continue
            persistence.save_all(key, build())
        seeded.append(key)
        logger.info("Seeded initial dataset", extra={"store_key": key})
    return seeded


@dataclass
class Showcase:
    """The wired data layer."""
    persistence: DocumentPersistence
    users: UserStore
    portfolios: PortfolioStore
    sessions: SessionManager
    aggregation: PortfolioAggregationEngine


def build_showcase(persistence: DocumentPersistence, seed: bool = True) -> Showcase:
    if seed:
        seed_initial_data(persistence)
    users = UserStore(persistence)
    portfolios = PortfolioStore(persistence, users)
    return Showcase(
        persistence=persistence,
        users=users,
        portfolios=portfolios,
        sessions=SessionManager(persistence, users),
        aggregation=PortfolioAggregationEngine(portfolios),
    )


# Singleton (initialized on startup)
showcase: Showcase | None = None


def init_showcase(persistence: DocumentPersistence, seed: bool = True) -> Showcase:
    global showcase
    showcase = build_showcase(persistence, seed=seed)
    return showcase


def get_showcase() -> Showcase:
    """FastAPI dependency for the wired data layer."""
    if not showcase:
        raise RuntimeError("Showcase not initialized")
    return showcase
