from datetime import date

from app.core.config import settings
from app.core.errors import DuplicateEmailError
from app.db.employee_store import EmployeeStore
from app.models.employee import Employee

DEMO_EMPLOYEES = [
    {
        "full_name": "Alice Smith",
        "email": "alice.smith@example.com",
        "phone_number": "555-0101",
        "department": "IT",
        "designation": "Engineer",
        "salary": 95000,
        "date_of_joining": date(2021, 3, 15),
        "employment_type": "Full-time",
    },
    {
        "full_name": "Bob Jones",
        "email": "bob.jones@example.com",
        "phone_number": "555-0102",
        "department": "Finance",
        "designation": "Analyst",
        "salary": 72000,
        "date_of_joining": date(2022, 7, 1),
        "employment_type": "Full-time",
    },
    {
        "full_name": "Carla Diaz",
        "email": "carla.diaz@example.com",
        "phone_number": "555-0103",
        "department": "HR",
        "designation": "Recruiter",
        "salary": 41000,
        "date_of_joining": date(2023, 1, 9),
        "employment_type": "Part-time",
        "status": "Inactive",
    },
]


def seed(store: EmployeeStore, employees: list[dict] = DEMO_EMPLOYEES) -> list[Employee]:
    """Insert demo employees, skipping emails that already exist."""
    created = []
    for fields in employees:
        try:
            created.append(store.create(dict(fields)))
        except DuplicateEmailError:
            continue
    return created


def main():
    store = EmployeeStore.from_url(settings.DATABASE_URL)
    store.create_schema()
    try:
        created = seed(store)
        print(f"Seeded {len(created)} employees:")
        for e in created:
            print(e.id, e.full_name, e.email, e.department)
    finally:
        store.engine.dispose()

if __name__ == "__main__":
    main()
