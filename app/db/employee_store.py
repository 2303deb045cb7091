import logging
import uuid

from fastapi import Request
from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from app.core.errors import DuplicateEmailError
from app.db.base import Base
from app.db.session import build_engine, build_session_factory
from app.models.employee import Employee, utcnow

logger = logging.getLogger(__name__)


def _like_escape(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _is_email_conflict(exc: IntegrityError) -> bool:
    # postgres: ... unique constraint "ix_employees_email"; sqlite: UNIQUE constraint failed: employees.email
    return "email" in str(exc.orig).lower()


class EmployeeStore:
    """
    Persistence for Employee records.

    Every method is one short transaction; objects come back detached
    (expire_on_commit=False) so handlers can serialize them freely.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, database_url: str, **engine_kwargs) -> "EmployeeStore":
        return cls(build_session_factory(build_engine(database_url, **engine_kwargs)))

    @property
    def engine(self) -> Engine:
        return self._session_factory.kw["bind"]

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_schema(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> None:
        with self._session_factory() as db:
            db.execute(text("SELECT 1"))

    def create(self, fields: dict) -> Employee:
        e = Employee(**fields)
        try:
            with self._session_factory.begin() as db:
                db.add(e)
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                raise DuplicateEmailError(fields.get("email")) from exc
            raise
        return e

    def list_all(self) -> list[Employee]:
        with self._session_factory() as db:
            return list(db.scalars(select(Employee).order_by(Employee.created_at.asc(), Employee.id)))

    def search(self, *, name: str | None = None, department: str | None = None) -> list[Employee]:
        stmt = select(Employee)
        if name:
            stmt = stmt.where(Employee.full_name.ilike(f"%{_like_escape(name)}%", escape="\\"))
        if department:
            stmt = stmt.where(Employee.department == department)

        with self._session_factory() as db:
            return list(db.scalars(stmt.order_by(Employee.created_at.asc(), Employee.id)))

    def get(self, employee_id: uuid.UUID) -> Employee | None:
        with self._session_factory() as db:
            return db.get(Employee, employee_id)

    def update(self, employee_id: uuid.UUID, changes: dict) -> Employee | None:
        try:
            with self._session_factory.begin() as db:
                e = db.get(Employee, employee_id)
                if e is None:
                    return None
                for key, value in changes.items():
                    setattr(e, key, value)
                e.updated_at = utcnow()
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                raise DuplicateEmailError(changes.get("email")) from exc
            raise
        return e

    def delete(self, employee_id: uuid.UUID) -> bool:
        with self._session_factory.begin() as db:
            e = db.get(Employee, employee_id)
            if e is None:
                return False
            db.delete(e)
        return True


def get_store(request: Request) -> EmployeeStore:
    return request.app.state.store
