from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import date
from typing import Annotated, Optional
from uuid import UUID

from app.models.employee import Employee, Role

# The web client sends the all-zero UUID when no manager is picked.
EMPTY_MANAGER_ID = UUID(int=0)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeWrite(CamelModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    doc_number: str = Field(min_length=1, max_length=50)
    date_of_birth: date
    role: Role
    manager_id: Optional[UUID] = None
    phones: list[Annotated[str, Field(max_length=30)]] = Field(default_factory=list)

    @field_validator("first_name", "last_name", "doc_number")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def _email_length(cls, v: str) -> str:
        if len(v) > 200:
            raise ValueError("must be at most 200 characters")
        return v

    @field_validator("role", mode="before")
    @classmethod
    def _parse_role(cls, v):
        role = Role.parse(v)
        if role is None:
            raise ValueError("role must be one of employee, leader, director (or 1, 2, 3)")
        return role

    @field_validator("manager_id", mode="after")
    @classmethod
    def _normalize_manager(cls, v: Optional[UUID]) -> Optional[UUID]:
        if v == EMPTY_MANAGER_ID:
            return None
        return v

    @field_validator("phones", mode="before")
    @classmethod
    def _accept_phone_objects(cls, v):
        # the web form may post [{"number": "..."}] instead of plain strings
        if isinstance(v, list):
            return [p.get("number", "") if isinstance(p, dict) else p for p in v]
        return v


class EmployeeCreate(EmployeeWrite):
    password: str = Field(min_length=1)

    @field_validator("password")
    @classmethod
    def _password_not_blank(cls, v: str) -> str:
        # kept verbatim; only an all-whitespace value is refused
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class EmployeeUpdate(EmployeeWrite):
    # when sent, must match the stored version or the update is rejected as a conflict
    version: Optional[int] = None


class PhoneOut(CamelModel):
    number: str


class EmployeeOut(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    doc_number: str
    date_of_birth: date
    role: Role
    manager_id: Optional[UUID] = None
    manager_name: Optional[str] = None
    phones: list[PhoneOut] = Field(default_factory=list)
    version: int

    @classmethod
    def from_employee(cls, e: Employee) -> "EmployeeOut":
        return cls(
            id=e.employee_id,
            first_name=e.first_name,
            last_name=e.last_name,
            email=e.email,
            doc_number=e.doc_number,
            date_of_birth=e.date_of_birth,
            role=e.role,
            manager_id=e.manager_id,
            manager_name=e.manager.full_name if e.manager is not None else None,
            phones=[PhoneOut(number=p.number) for p in e.phones],
            version=e.version,
        )
