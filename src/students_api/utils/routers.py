"""Router Initializer."""

from fastapi import FastAPI

from students_api.common.router import router as common_router
from students_api.student.router import router as student_router

__all__ = ["register_routers"]


def register_routers(app: FastAPI) -> None:
    """Register all API routers with the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(common_router)
    app.include_router(student_router, prefix="/students")
