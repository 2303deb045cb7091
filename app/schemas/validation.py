from pydantic import BaseModel

from app.schemas.employee import EmployeeCreate, EmployeeUpdate


class FieldViolation(BaseModel):
    """Individual validation error"""
    field: str
    code: str  # required, type, min, choice, etc.
    message: str


class EmployeeValidationResult(BaseModel):
    """Outcome of validating an employee payload"""
    ok: bool
    data: EmployeeCreate | EmployeeUpdate | None = None
    errors: list[FieldViolation] = []
