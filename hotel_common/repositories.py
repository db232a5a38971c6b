"""Repository interfaces and their in-memory and SQLAlchemy implementations.

Every method returns detached copies of stored records; callers can change
what they receive without touching the store.
"""
from __future__ import annotations

import copy
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from circuitbreaker import circuit
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .errors import ConflictError
from .models import Booking, Room, User, utcnow
from .schemas import BookingRead, RoomRead, UserRecord

RecordT = TypeVar("RecordT", bound=BaseModel)


class Repository(ABC, Generic[RecordT]):
    @abstractmethod
    def list(self) -> List[RecordT]:
        raise NotImplementedError

    @abstractmethod
    def get(self, record_id: int) -> Optional[RecordT]:
        raise NotImplementedError

    @abstractmethod
    def add(self, data: Dict[str, Any]) -> RecordT:
        """Store a new record built from ``data`` and return it with its id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        """Merge ``changes`` into the record; ``None`` when the id is unknown."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        raise NotImplementedError


class UserRepository(Repository[UserRecord]):
    """Emails are unique: ``add`` and ``update`` raise ``ConflictError`` on a taken address."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[UserRecord]:
        raise NotImplementedError


class RoomRepository(Repository[RoomRead]):
    pass


class BookingRepository(Repository[BookingRead]):
    @abstractmethod
    def list_for_user(self, user_id: int) -> List[BookingRead]:
        raise NotImplementedError


class InMemoryRepository(Repository[RecordT]):
    record_type: Type[RecordT]

    def __init__(self) -> None:
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _check_unique(self, payload: Dict[str, Any], record_id: int) -> None:
        """Called with the lock held before ``payload`` is stored under ``record_id``."""

    def _find(self, **criteria: Any) -> List[RecordT]:
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if all(getattr(record, key) == value for key, value in criteria.items())
            ]

    def list(self) -> List[RecordT]:
        return self._find()

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record else None

    def add(self, data: Dict[str, Any]) -> RecordT:
        with self._lock:
            payload = copy.deepcopy(data)
            payload["id"] = self._next_id
            payload.setdefault("created_at", utcnow())
            self._check_unique(payload, payload["id"])
            record = self.record_type.model_validate(payload)
            self._records[record.id] = record
            self._next_id += 1
            return record.model_copy(deep=True)

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            merged = {**current.model_dump(), **copy.deepcopy(changes), "id": record_id, "updated_at": utcnow()}
            self._check_unique(merged, record_id)
            record = self.record_type.model_validate(merged)
            self._records[record_id] = record
            return record.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class InMemoryUserRepository(InMemoryRepository[UserRecord], UserRepository):
    record_type = UserRecord

    def _check_unique(self, payload: Dict[str, Any], record_id: int) -> None:
        email = payload.get("email")
        if any(user.email == email and user.id != record_id for user in self._records.values()):
            raise ConflictError("Email already in use")

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        matches = self._find(email=email)
        return matches[0] if matches else None


class InMemoryRoomRepository(InMemoryRepository[RoomRead], RoomRepository):
    record_type = RoomRead


class InMemoryBookingRepository(InMemoryRepository[BookingRead], BookingRepository):
    record_type = BookingRead

    def list_for_user(self, user_id: int) -> List[BookingRead]:
        return self._find(user_id=user_id)


class SqlRepository(Repository[RecordT]):
    record_type: Type[RecordT]
    orm_model: Type[Any]

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def _to_record(self, row: Any) -> RecordT:
        return self.record_type.model_validate(row, from_attributes=True)

    @circuit(failure_threshold=5, recovery_timeout=60, expected_exception=SQLAlchemyError)
    def _select(self, *conditions: Any) -> List[RecordT]:
        with self._session_factory() as db:
            query = select(self.orm_model).order_by(self.orm_model.id)
            if conditions:
                query = query.where(*conditions)
            return [self._to_record(row) for row in db.scalars(query).all()]

    def list(self) -> List[RecordT]:
        return self._select()

    def get(self, record_id: int) -> Optional[RecordT]:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            return self._to_record(row) if row else None

    def add(self, data: Dict[str, Any]) -> RecordT:
        with self._session_factory() as db:
            row = self.orm_model(**copy.deepcopy(data))
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._to_record(row)

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[RecordT]:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            if row is None:
                return None
            for key, value in copy.deepcopy(changes).items():
                setattr(row, key, value)
            row.updated_at = utcnow()
            db.commit()
            db.refresh(row)
            return self._to_record(row)

    def delete(self, record_id: int) -> bool:
        with self._session_factory() as db:
            row = db.get(self.orm_model, record_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True


class SqlUserRepository(SqlRepository[UserRecord], UserRepository):
    record_type = UserRecord
    orm_model = User

    def add(self, data: Dict[str, Any]) -> UserRecord:
        try:
            return super().add(data)
        except IntegrityError as exc:
            raise ConflictError("Email already in use") from exc

    def update(self, record_id: int, changes: Dict[str, Any]) -> Optional[UserRecord]:
        try:
            return super().update(record_id, changes)
        except IntegrityError as exc:
            raise ConflictError("Email already in use") from exc

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        matches = self._select(User.email == email)
        return matches[0] if matches else None


class SqlRoomRepository(SqlRepository[RoomRead], RoomRepository):
    record_type = RoomRead
    orm_model = Room


class SqlBookingRepository(SqlRepository[BookingRead], BookingRepository):
    record_type = BookingRead
    orm_model = Booking

    def list_for_user(self, user_id: int) -> List[BookingRead]:
        return self._select(Booking.user_id == user_id)
