from datetime import date

from app.db.employee_store import EmployeeStore
from app.models.employee import Employee


def employee_payload(**overrides) -> dict:
    """JSON body for POST /employees (camelCase keys)."""
    body = {
        "fullName": "Jane Doe",
        "email": "jane@x.com",
        "phoneNumber": "555-0100",
        "department": "IT",
        "designation": "Engineer",
        "salary": 90000,
        "dateOfJoining": "2023-01-01",
        "employmentType": "Full-time",
    }
    body.update(overrides)
    return body


def create_employee(
    store: EmployeeStore,
    email: str,
    full_name: str = "Employee",
    department: str = "IT",
    **fields,
) -> Employee:
    values = {
        "full_name": full_name,
        "email": email,
        "phone_number": "555-0199",
        "department": department,
        "designation": "Engineer",
        "salary": 50000,
        "date_of_joining": date(2022, 5, 2),
        "employment_type": "Full-time",
    }
    values.update(fields)
    return store.create(values)
