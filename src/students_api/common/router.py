"""Common router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from students_api.config.db import get_session

from .exceptions import InternalServerError

__all__ = ["router"]


router = APIRouter(tags=["Common", "Health"])


@router.get("/", include_in_schema=False, summary="Home page")
async def root() -> Response:
    """Plain-text home page."""
    return Response("Students API is running", media_type="text/plain")


@router.get("/health", include_in_schema=False, summary="Health check endpoint")
async def health(db: Annotated[AsyncSession, Depends(get_session)]) -> Response:
    """Report 204 when the database answers a trivial query."""
    try:
        await db.scalar(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check failed", error=str(exc))
        raise InternalServerError("database is unreachable") from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
