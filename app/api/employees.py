import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from app.core.employee_validation import validate_employee_payload
from app.core.errors import DuplicateEmailError
from app.db.employee_store import EmployeeStore, get_store
from app.models.employee import Employee
from app.schemas.employee import DeleteEmployeeOut, EmployeeOut
from app.schemas.validation import EmployeeValidationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _as_utc(value: datetime) -> datetime:
    # sqlite hands timestamps back without tzinfo; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def employee_to_out(e: Employee) -> EmployeeOut:
    return EmployeeOut(
        id=str(e.id),
        full_name=e.full_name,
        email=e.email,
        phone_number=e.phone_number,
        department=e.department,
        designation=e.designation,
        salary=e.salary,
        date_of_joining=e.date_of_joining,
        employment_type=e.employment_type,
        status=e.status,
        created_at=_as_utc(e.created_at),
        updated_at=_as_utc(e.updated_at),
    )


def _parse_id(employee_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(employee_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid employee id")


def _raise_if_invalid(result: EmployeeValidationResult) -> None:
    if result.ok:
        return
    logger.warning("Employee validation failed: %s", [v.field for v in result.errors])
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "message": "Employee validation failed",
            "errors": [v.model_dump() for v in result.errors],
        },
    )


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: Any = Body(...),
    store: EmployeeStore = Depends(get_store),
):
    result = validate_employee_payload(payload, partial=False)
    _raise_if_invalid(result)

    try:
        e = store.create(result.data.model_dump())
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    logger.info("Employee created id=%s", e.id)
    return employee_to_out(e)


@router.get("", response_model=list[EmployeeOut])
def list_employees(store: EmployeeStore = Depends(get_store)):
    """
    List every employee, oldest first. There is no pagination.
    """
    return [employee_to_out(e) for e in store.list_all()]


@router.get("/search", response_model=list[EmployeeOut])
def search_employees(
    name: str | None = Query(default=None, description="Case-insensitive substring of full name"),
    department: str | None = Query(default=None, description="Exact department"),
    store: EmployeeStore = Depends(get_store),
):
    """
    Filter employees by name and/or department. Both filters are ANDed;
    no match is an empty list, not a 404.
    """
    return [employee_to_out(e) for e in store.search(name=name, department=department)]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    e = store.get(_parse_id(employee_id))
    if not e:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee_to_out(e)


@router.put("/{employee_id}", response_model=EmployeeOut)
def update_employee(
    employee_id: str,
    payload: Any = Body(...),
    store: EmployeeStore = Depends(get_store),
):
    emp_id = _parse_id(employee_id)

    result = validate_employee_payload(payload, partial=True)
    _raise_if_invalid(result)

    changes = result.data.changes()
    try:
        e = store.update(emp_id, changes)
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    if not e:
        raise HTTPException(status_code=404, detail="Employee not found")

    logger.info("Employee updated id=%s fields=%s", e.id, sorted(changes))
    return employee_to_out(e)


@router.delete("/{employee_id}", response_model=DeleteEmployeeOut)
def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_store),
):
    if not store.delete(_parse_id(employee_id)):
        raise HTTPException(status_code=404, detail="Employee not found")

    logger.info("Employee deleted id=%s", employee_id)
    return DeleteEmployeeOut(message="Employee deleted successfully")
