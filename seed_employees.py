#!/usr/bin/env python3
"""
Seed the three demo accounts (employee -> leader -> director) into an empty database.
Every account uses the password P@ssw0rd!

Usage:
    python seed_employees.py
"""

import sys
from pathlib import Path

# Add the apps/api directory to the path so we can import from app
api_dir = Path(__file__).parent / "apps" / "api"
sys.path.insert(0, str(api_dir))

from app.core.database import SessionLocal
from app.services.seed import seed_demo_employees

if __name__ == "__main__":
    db = SessionLocal()
    try:
        created = seed_demo_employees(db)
        if not created:
            print("ℹ️  Employees already exist, nothing seeded.")
        for e in created:
            print(f"✅ {e.email} ({e.role.value})")
    finally:
        db.close()
