"""
Employee create/update/delete orchestration.

Order per mutation: load target (404), authorize on role rank (403),
validate business rules (400), persist (409 on stale writes, 500 otherwise).
Nothing is written until authorization and validation have both passed.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError, ValidationFailedError
from app.core.security import get_password_hash
from app.models.employee import Employee
from app.repositories.employee_repository import EmployeeRepository
from app.schemas.auth import Caller
from app.schemas.employees import EmployeeCreate, EmployeeUpdate, EmployeeWrite
from app.services import policy
from app.services.validators import (
    normalize_phones,
    validate_age,
    validate_document_available,
    validate_not_own_manager,
    validate_phone_count,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, db: Session, today: Optional[date] = None):
        self.repo = EmployeeRepository(db)
        # fixed "today" for tests; None means the current UTC date
        self.today = today

    # --- reads ---

    def list_employees(self, q: Optional[str] = None) -> Sequence[Employee]:
        return self.repo.search(q)

    def get_employee(self, employee_id: UUID) -> Employee:
        emp = self.repo.get(employee_id)
        if emp is None:
            raise NotFoundError()
        return emp

    # --- rules ---

    def _validate(self, payload: EmployeeWrite, employee_id: Optional[UUID] = None) -> list[str]:
        validate_age(payload.date_of_birth, self.today)
        validate_phone_count(payload.phones)
        phones = normalize_phones(payload.phones)
        validate_document_available(
            self.repo.exists_by_document(payload.doc_number, exclude_id=employee_id),
            updating=employee_id is not None,
        )
        if employee_id is not None:
            validate_not_own_manager(employee_id, payload.manager_id)
        if payload.manager_id is not None and not self.repo.employee_exists(payload.manager_id):
            raise ValidationFailedError("Manager not found.")
        return phones

    # --- mutations ---

    def create_employee(self, payload: EmployeeCreate, caller: Caller) -> Employee:
        policy.authorize_create(payload.role, caller.role)
        phones = self._validate(payload)

        emp = Employee(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=str(payload.email),
            doc_number=payload.doc_number,
            date_of_birth=payload.date_of_birth,
            role=payload.role,
            manager_id=payload.manager_id,
            password_hash=get_password_hash(payload.password),
        )
        created = self.repo.create(emp, phones)
        logger.info(
            "Employee %s (%s) created by %s (%s)",
            created.employee_id, created.role.value, caller.id, caller.role.value,
        )
        return created

    def update_employee(self, employee_id: UUID, payload: EmployeeUpdate, caller: Caller) -> Employee:
        emp = self.get_employee(employee_id)
        policy.authorize_update(emp.role, payload.role, caller.role)
        phones = self._validate(payload, employee_id=employee_id)

        if payload.version is not None and payload.version != emp.version:
            logger.warning(
                "Stale update of employee %s: client version %s, stored %s",
                employee_id, payload.version, emp.version,
            )
            raise ConflictError()

        emp.first_name = payload.first_name
        emp.last_name = payload.last_name
        emp.email = str(payload.email)
        emp.doc_number = payload.doc_number
        emp.date_of_birth = payload.date_of_birth
        emp.role = payload.role
        emp.manager_id = payload.manager_id

        updated = self.repo.update(emp, phones)
        logger.info("Employee %s updated by %s (%s)", employee_id, caller.id, caller.role.value)
        return updated

    def delete_employee(self, employee_id: UUID, caller: Caller) -> None:
        emp = self.get_employee(employee_id)
        policy.authorize_delete(emp.role, caller.role)

        if self.repo.has_reports(employee_id):
            raise ValidationFailedError(
                "Employee still manages other employees. Reassign them before deleting."
            )

        self.repo.delete(emp)
        logger.info("Employee %s deleted by %s (%s)", employee_id, caller.id, caller.role.value)
