"""Storage access for employees and their phone sets."""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional, Sequence
from uuid import UUID

from sqlalchemy import exists, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy.orm.exc import StaleDataError

from app.core.database import atomic
from app.core.errors import ConflictError, InternalFailureError
from app.models.employee import Employee
from app.models.phone import Phone

logger = logging.getLogger(__name__)


class EmployeeRepository:
    def __init__(self, db: Session):
        self.db = db

    # --- reads ---

    def get(self, employee_id: UUID) -> Optional[Employee]:
        stmt = (
            select(Employee)
            .options(joinedload(Employee.manager), selectinload(Employee.phones))
            .where(Employee.employee_id == employee_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def search(self, q: Optional[str] = None) -> Sequence[Employee]:
        stmt = select(Employee).options(
            joinedload(Employee.manager), selectinload(Employee.phones)
        )
        if q and q.strip():
            term = q.strip()
            stmt = stmt.where(
                or_(
                    Employee.first_name.icontains(term, autoescape=True),
                    Employee.last_name.icontains(term, autoescape=True),
                    Employee.email.icontains(term, autoescape=True),
                    Employee.doc_number.icontains(term, autoescape=True),
                )
            )
        stmt = stmt.order_by(Employee.first_name.asc(), Employee.last_name.asc())
        return self.db.execute(stmt).scalars().all()

    def find_by_email(self, email: str) -> Optional[Employee]:
        stmt = select(Employee).where(Employee.email == email)
        return self.db.execute(stmt).scalars().first()

    def employee_exists(self, employee_id: UUID) -> bool:
        return bool(self.db.execute(select(exists().where(Employee.employee_id == employee_id))).scalar())

    def exists_by_document(self, doc_number: str, exclude_id: Optional[UUID] = None) -> bool:
        cond = Employee.doc_number == doc_number
        if exclude_id is not None:
            cond = cond & (Employee.employee_id != exclude_id)
        return bool(self.db.execute(select(exists().where(cond))).scalar())

    def has_reports(self, employee_id: UUID) -> bool:
        return bool(self.db.execute(select(exists().where(Employee.manager_id == employee_id))).scalar())

    # --- writes ---

    @contextmanager
    def _unit_of_work(self, conflict_message: Optional[str] = None) -> Iterator[Session]:
        """
        Transaction scope for a single mutation. Stale version checks surface as
        ConflictError; any other storage failure as InternalFailureError.
        """
        try:
            with atomic(self.db) as db:
                yield db
        except StaleDataError as exc:
            logger.warning("Optimistic concurrency conflict: %s", exc)
            raise ConflictError(conflict_message) from exc
        except IntegrityError as exc:
            # a unique or foreign-key check lost a race with another writer
            logger.warning("Integrity conflict: %s", exc.orig)
            raise ConflictError(
                "The change conflicts with a concurrent update. Reload and try again."
            ) from exc
        except SQLAlchemyError as exc:
            logger.exception("Storage failure")
            raise InternalFailureError() from exc

    def replace_phones(self, employee: Employee, numbers: list[str]) -> None:
        """
        Delete the employee's phone set and insert `numbers` in its place.
        Runs inside the caller's unit of work, so both halves commit or roll back together.
        """
        employee.phones.clear()
        self.db.flush()
        employee.phones.extend(Phone(number=n) for n in numbers)

    def create(self, employee: Employee, numbers: list[str]) -> Employee:
        with self._unit_of_work() as db:
            employee.phones = [Phone(number=n) for n in numbers]
            db.add(employee)
        return self.get(employee.employee_id)

    def update(self, employee: Employee, numbers: list[str]) -> Employee:
        with self._unit_of_work() as db:
            # always emits UPDATE, so the version check runs even for phone-only edits
            employee.updated_at = datetime.now(timezone.utc)
            db.flush()
            self.replace_phones(employee, numbers)
        return self.get(employee.employee_id)

    def delete(self, employee: Employee) -> None:
        with self._unit_of_work("The employee was already removed by another process.") as db:
            db.delete(employee)
