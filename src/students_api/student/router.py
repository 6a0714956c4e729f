"""Student router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from loguru import logger

from .models import StudentCreated, StudentPublic
from .repository import StudentStore, get_student_store
from .schemas import PaginatedResponse, StudentCreate
from .service import create_student_svc, get_student_svc, get_students_paged_svc

__all__ = ["router"]


router = APIRouter(tags=["Student"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a student",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": StudentCreate.model_json_schema()}
            },
        }
    },
)
async def create_student(
    request: Request,
    response: Response,
    store: Annotated[StudentStore, Depends(get_student_store)],
) -> StudentCreated:
    """Create a student.

    The body is read raw so that an empty body, a malformed body and a body
    that breaks the field rules each get their own 400 message.

    Args:
        request: The HTTP request carrying the JSON body.
        response: FastAPI response object for setting headers.
        store: Student store.

    Returns:
        The identifier of the created student, with a Location header.
    """
    created = await create_student_svc(store, await request.body())
    response.headers["Location"] = f"{request.url.path}/{created.id}"
    return created


@router.get("", summary="Get students paged")
async def get_students(
    store: Annotated[StudentStore, Depends(get_student_store)],
    page: Annotated[str | None, Query(description="Page number, starts at 1")] = None,
    limit: Annotated[
        str | None, Query(description="Items per page, between 1 and 100")
    ] = None,
) -> PaginatedResponse[StudentPublic]:
    """Return one page of students in creation order.

    Invalid ``page`` or ``limit`` values fall back to their defaults instead of
    failing the request.
    """
    result = await get_students_paged_svc(store, page, limit)
    logger.debug(
        "Students retrieved",
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
        total_items=result.total_items,
        items_count=len(result.data),
    )
    return result


@router.get("/{student_id}", summary="Get student by ID")
async def get_student(
    student_id: str,
    store: Annotated[StudentStore, Depends(get_student_store)],
) -> StudentPublic:
    """Retrieve a single student by its ID.

    Args:
        student_id: Base-10 identifier from the path.
        store: Student store.

    Returns:
        The student.

    Raises:
        InvalidStudentIdError: If the id is not an integer.
        StudentNotFoundError: If the student does not exist.
    """
    student = await get_student_svc(store, student_id)
    logger.debug("Student retrieved", student_id=student.id)
    return student
