import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.database import atomic
from app.core.security import get_password_hash
from app.models.employee import Employee, Role
from app.models.phone import Phone

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "P@ssw0rd!"

DEMO_EMPLOYEES = [
    ("Erica", "Employee", "employee@demo.com", "EMP-001", date(1995, 1, 10), Role.employee),
    ("Liam", "Leader", "leader@demo.com", "LED-001", date(1990, 5, 20), Role.leader),
    ("Diana", "Director", "director@demo.com", "DIR-001", date(1985, 8, 15), Role.director),
]


def seed_demo_employees(db: Session) -> list[Employee]:
    """
    Insert the three demo accounts (employee -> leader -> director manager chain)
    when the employees table is empty. Returns the created rows, or [] if skipped.
    """
    if db.execute(select(Employee.employee_id).limit(1)).first() is not None:
        logger.info("Employees already present; skipping demo seed")
        return []

    password_hash = get_password_hash(DEMO_PASSWORD)
    by_role: dict[Role, Employee] = {}
    for first, last, email, doc, dob, role in DEMO_EMPLOYEES:
        by_role[role] = Employee(
            first_name=first,
            last_name=last,
            email=email,
            doc_number=doc,
            date_of_birth=dob,
            role=role,
            password_hash=password_hash,
            phones=[Phone(number="+55 11 99999-0001"), Phone(number="+55 11 98888-0001")],
        )

    by_role[Role.employee].manager = by_role[Role.leader]
    by_role[Role.leader].manager = by_role[Role.director]

    with atomic(db):
        db.add_all(by_role.values())

    logger.info("Seeded %d demo employees", len(by_role))
    return list(by_role.values())
