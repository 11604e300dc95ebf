import uuid
from sqlalchemy import Column, String, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.core.database import Base

class Phone(Base):
    __tablename__ = "phones"

    phone_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    employee_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("employees.employee_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    number = Column(String(30), nullable=False)

    employee = relationship("Employee", back_populates="phones")
