from fastapi import APIRouter, Depends

from app.db.employee_store import EmployeeStore, get_store

router = APIRouter(tags=["health"])


@router.get("/health")
def health(store: EmployeeStore = Depends(get_store)):
    # Simple DB ping
    store.ping()
    return {"status": "ok"}
