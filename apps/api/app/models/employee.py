import enum
import uuid
from typing import Optional, Union

from sqlalchemy import Column, String, Date, DateTime, Enum, ForeignKey, Integer, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Role(str, enum.Enum):
    employee = "employee"
    leader = "leader"
    director = "director"

    @property
    def rank(self) -> int:
        return ROLE_RANK[self]

    @classmethod
    def parse(cls, value: Union[str, int, "Role", None]) -> Optional["Role"]:
        """
        Map a role name (any case) or a rank number to a Role.
        Returns None for anything unrecognized.
        """
        if isinstance(value, Role):
            return value
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, int):
            return _ROLE_BY_RANK.get(value)
        key = str(value).strip().lower()
        if key.isdigit():
            return _ROLE_BY_RANK.get(int(key))
        try:
            return cls(key)
        except ValueError:
            return None


# Single source of truth for ordering; authorization and display both read it.
ROLE_RANK: dict[Role, int] = {
    Role.employee: 1,
    Role.leader: 2,
    Role.director: 3,
}
_ROLE_BY_RANK: dict[int, Role] = {r: role for role, r in ROLE_RANK.items()}


class Employee(Base):
    __tablename__ = "employees"

    employee_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False, index=True)
    doc_number = Column(String(50), nullable=False, unique=True, index=True)
    date_of_birth = Column(Date, nullable=False)

    role = Column(Enum(Role, name="employee_role"), nullable=False, default=Role.employee)

    manager_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("employees.employee_id", ondelete="RESTRICT"),
        nullable=True,
        index=True,
    )

    password_hash = Column(String, nullable=False)

    # bumped by the ORM on every UPDATE; stale writers get StaleDataError
    version = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    manager = relationship("Employee", remote_side=[employee_id])
    phones = relationship(
        "Phone",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="Phone.number",
    )

    __mapper_args__ = {"version_id_col": version}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
