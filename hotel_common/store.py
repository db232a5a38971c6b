"""Assembles the repositories for the configured storage backend."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import Settings
from .database import Base, build_engine, build_session_factory
from .repositories import (
    BookingRepository,
    InMemoryBookingRepository,
    InMemoryRoomRepository,
    InMemoryUserRepository,
    RoomRepository,
    SqlBookingRepository,
    SqlRoomRepository,
    SqlUserRepository,
    UserRepository,
)
from .seed import seed_demo_users

logger = logging.getLogger(__name__)


@dataclass
class DataStore:
    users: UserRepository
    rooms: RoomRepository
    bookings: BookingRepository


def build_store(settings: Settings) -> DataStore:
    if settings.storage_backend == "sql":
        engine = build_engine(settings.database_url)
        if settings.run_db_migrations:
            Base.metadata.create_all(bind=engine)
        session_factory = build_session_factory(engine)
        store = DataStore(
            users=SqlUserRepository(session_factory),
            rooms=SqlRoomRepository(session_factory),
            bookings=SqlBookingRepository(session_factory),
        )
    else:
        store = DataStore(
            users=InMemoryUserRepository(),
            rooms=InMemoryRoomRepository(),
            bookings=InMemoryBookingRepository(),
        )
    if settings.seed_demo_users:
        added = seed_demo_users(store.users)
        if added:
            logger.info("Seeded demo accounts: %s", ", ".join(added))
    return store
