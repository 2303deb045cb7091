import uuid
from datetime import date, datetime, timezone

from sqlalchemy import String, Float, Date, DateTime, CheckConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint(
            "department IN ('HR','IT','Finance','Marketing','Sales')",
            name="ck_employees_department",
        ),
        CheckConstraint(
            "employment_type IN ('Full-time','Part-time','Contract')",
            name="ck_employees_employment_type",
        ),
        CheckConstraint(
            "status IN ('Active','Inactive')",
            name="ck_employees_status",
        ),
        CheckConstraint("salary >= 0", name="ck_employees_salary_non_negative"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False)

    department: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    designation: Mapped[str] = mapped_column(String(200), nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)
    employment_type: Mapped[str] = mapped_column(String(20), nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Active")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
