from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

from app.core.errors import ValidationFailedError

MINIMUM_AGE = 18
MINIMUM_PHONES = 2


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _add_years(d: date, years: int) -> date:
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        # 29 Feb in a non-leap year falls back to 28 Feb
        return d.replace(year=d.year + years, day=28)


def age_on(date_of_birth: date, today: date) -> int:
    """Whole years between date_of_birth and today (calendar-year subtraction, birthday corrected)."""
    age = today.year - date_of_birth.year
    if _add_years(date_of_birth, age) > today:
        age -= 1
    return age


def validate_age(date_of_birth: date, today: Optional[date] = None) -> None:
    today = today or utc_today()
    if age_on(date_of_birth, today) < MINIMUM_AGE:
        raise ValidationFailedError(f"Employee must be at least {MINIMUM_AGE} years old.")


def validate_phone_count(phones: list[str]) -> None:
    # counted on the raw input, duplicates included
    if len([p for p in phones if p and p.strip()]) < MINIMUM_PHONES:
        raise ValidationFailedError(f"Employee must have at least {MINIMUM_PHONES} phone numbers.")


def normalize_phones(phones: list[str]) -> list[str]:
    """
    Trimmed, non-empty, distinct numbers in first-seen order.
    Raises if fewer than MINIMUM_PHONES distinct numbers remain.
    """
    seen: list[str] = []
    for p in phones:
        n = (p or "").strip()
        if n and n not in seen:
            seen.append(n)
    if len(seen) < MINIMUM_PHONES:
        raise ValidationFailedError(f"Employee must have at least {MINIMUM_PHONES} distinct phone numbers.")
    return seen


def validate_document_available(doc_taken: bool, updating: bool = False) -> None:
    if doc_taken:
        if updating:
            raise ValidationFailedError("DocNumber already exists for another employee.")
        raise ValidationFailedError("DocNumber already exists.")


def validate_not_own_manager(employee_id: UUID, manager_id: Optional[UUID]) -> None:
    if manager_id is not None and manager_id == employee_id:
        raise ValidationFailedError("An employee cannot be their own manager.")
