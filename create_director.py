#!/usr/bin/env python3
"""
Script to create a Director account, the highest role in the directory.
Run this after the database migration has been completed.

Usage:
    python create_director.py <email> <password> <first_name> <last_name> <doc_number> <date_of_birth> <phone> <phone>

Example:
    python create_director.py boss@example.com mypassword123 Ada Lovelace DIR-100 1980-12-10 "+1 555 0100" "+1 555 0101"
"""

import sys
from datetime import date
from pathlib import Path

# Add the apps/api directory to the path so we can import from app
api_dir = Path(__file__).parent / "apps" / "api"
sys.path.insert(0, str(api_dir))

from app.core.database import SessionLocal
from app.core.errors import APIError
from app.models.employee import Role
from app.schemas.auth import Caller
from app.schemas.employees import EmployeeCreate
from app.services.employee_service import EmployeeService

# A bootstrap caller with director rank; only used to pass the role check.
BOOTSTRAP_CALLER = Caller(
    id="00000000-0000-0000-0000-000000000000",
    email="bootstrap@localhost",
    name="bootstrap",
    role=Role.director,
)


def create_director(email: str, password: str, first_name: str, last_name: str,
                    doc_number: str, date_of_birth: date, phones: list[str]) -> bool:
    """Create a Director through the same rules as the API."""
    db = SessionLocal()
    try:
        payload = EmployeeCreate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            doc_number=doc_number,
            date_of_birth=date_of_birth,
            role=Role.director,
            phones=phones,
            password=password,
        )
        emp = EmployeeService(db).create_employee(payload, BOOTSTRAP_CALLER)

        print("✅ Director created successfully!")
        print(f"   Employee ID: {emp.employee_id}")
        print(f"   Name: {emp.full_name}")
        print(f"   Email: {emp.email}")
        return True
    except APIError as e:
        print(f"❌ Could not create director: {e.message}")
        return False
    finally:
        db.close()

if __name__ == "__main__":
    if len(sys.argv) != 9:
        print(__doc__)
        sys.exit(1)

    email, password, first_name, last_name, doc_number, dob = sys.argv[1:7]
    phones = sys.argv[7:9]

    try:
        date_of_birth = date.fromisoformat(dob)
    except ValueError:
        print("❌ date_of_birth must be YYYY-MM-DD")
        sys.exit(1)

    success = create_director(email, password, first_name, last_name, doc_number, date_of_birth, phones)
    sys.exit(0 if success else 1)
