from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from app.schemas.employee import EmployeeCreate, EmployeeUpdate
from app.schemas.validation import EmployeeValidationResult, FieldViolation

# pydantic error type -> our violation code
_CODES = {
    "missing": "required",
    "required": "required",
    "string_too_short": "required",
    "string_too_long": "max_length",
    "literal_error": "choice",
    "greater_than_equal": "min",
    "finite_number": "type",
}


def _code_for(error_type: str) -> str:
    if error_type in _CODES:
        return _CODES[error_type]
    if error_type.endswith(("_type", "_parsing")) or error_type.startswith("date_"):
        return "type"
    return error_type


def _violations(exc: ValidationError) -> list[FieldViolation]:
    out: list[FieldViolation] = []
    for e in exc.errors():
        field = ".".join(str(p) for p in e["loc"]) or "body"
        out.append(FieldViolation(field=field, code=_code_for(e["type"]), message=e["msg"]))
    return out


def validate_employee_payload(payload: Any, *, partial: bool = False) -> EmployeeValidationResult:
    """
    create (partial=False): every required field present, status defaults to Active.
    update (partial=True): only supplied fields are checked, null is rejected.

    Enum membership and salary >= 0 are checked in both modes. Email
    uniqueness is left to the store.
    """
    if not isinstance(payload, dict):
        return EmployeeValidationResult(
            ok=False,
            errors=[FieldViolation(field="body", code="type", message="Body must be a JSON object")],
        )

    model = EmployeeUpdate if partial else EmployeeCreate
    try:
        data = model.model_validate(payload)
    except ValidationError as exc:
        return EmployeeValidationResult(ok=False, errors=_violations(exc))

    return EmployeeValidationResult(ok=True, data=data)
