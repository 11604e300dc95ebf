from __future__ import annotations

import os

# Settings and the module-level engine are built at import time.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from datetime import date  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from starlette.testclient import TestClient  # noqa: E402

from app.core.database import Base, build_engine, get_db  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.main import app  # noqa: E402
from app.models.employee import Employee, Role  # noqa: E402
from app.models.phone import Phone  # noqa: E402
from app.schemas.auth import Caller  # noqa: E402
from app.services.seed import seed_demo_employees  # noqa: E402

TODAY = date(2026, 10, 19)


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    # in-memory database is discarded with the pool
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded(db) -> dict[Role, UUID]:
    """Erica (employee) -> Liam (leader) -> Diana (director); returns ids by role."""
    created = seed_demo_employees(db)
    return {e.role: e.employee_id for e in created}


@pytest.fixture
def client(session_factory):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_caller(role: Role, caller_id: str = "11111111-1111-1111-1111-111111111111") -> Caller:
    return Caller(id=caller_id, email=f"{role.value}@example.com", name=role.value.title(), role=role)


def auth_headers(employee_id: UUID, role: str = "director", **extra) -> dict[str, str]:
    claims = {"sub": str(employee_id), "email": "caller@demo.com", "name": "Caller", "role": role}
    claims.update(extra)
    return {"Authorization": f"Bearer {create_access_token(claims)}"}


def add_employee(
    db,
    *,
    first_name: str = "Test",
    last_name: str = "Person",
    doc_number: str = "DOC-1",
    role: Role = Role.employee,
    manager_id: UUID | None = None,
    phones: tuple[str, ...] = ("+1 555 0001", "+1 555 0002"),
) -> Employee:
    """Insert a row directly, bypassing the rules, for arranging test state."""
    emp = Employee(
        first_name=first_name,
        last_name=last_name,
        email=f"{doc_number.lower()}@example.com",
        doc_number=doc_number,
        date_of_birth=date(1990, 1, 1),
        role=role,
        manager_id=manager_id,
        password_hash="not-a-real-hash",
        phones=[Phone(number=n) for n in phones],
    )
    db.add(emp)
    db.commit()
    return emp


def employee_payload(**overrides) -> dict:
    body = {
        "firstName": "Nora",
        "lastName": "Newhire",
        "email": "nora@demo.com",
        "docNumber": "NEW-001",
        "dateOfBirth": "1999-04-02",
        "role": "employee",
        "managerId": None,
        "phones": ["+55 11 90000-0001", "+55 11 90000-0002"],
        "password": "S3cret!pass",
    }
    body.update(overrides)
    return body
