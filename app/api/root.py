from fastapi import APIRouter, Request

from app.core.config import settings

router = APIRouter(tags=["meta"])


@router.get("/")
def service_info(request: Request):
    """Service name and environment with links to the main entry points."""
    return {
        "name": request.app.title,
        "env": settings.APP_ENV,
        "status": "ok",
        "docs": request.app.docs_url,
        "health": "/health",
        "employees": "/employees",
    }
