"""Student repository."""

from collections.abc import Sequence
from typing import Annotated, Protocol

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from students_api.config.db import get_session
from students_api.utils.parsing import INT64_MAX

from .exceptions import DatabaseError, RecordNotFoundError
from .models import Student

__all__ = ["SQLStudentStore", "StudentStore", "get_student_store"]


class StudentStore(Protocol):
    """Storage capability the student handlers depend on.

    Implementations raise only ``StorageError`` subclasses.
    """

    async def create(self, name: str, email: str, age: int) -> int:
        """Insert a student and return its new identifier."""
        ...

    async def get_by_id(self, student_id: int) -> Student:
        """Return the student with ``student_id``."""
        ...

    async def list(self, offset: int, limit: int) -> Sequence[Student]:
        """Return up to ``limit`` students after ``offset``, ordered by id."""
        ...

    async def count(self) -> int:
        """Return the total number of students."""
        ...


class SQLStudentStore:
    """``StudentStore`` backed by a SQLModel async session."""

    def __init__(self, db: AsyncSession) -> None:
        """Bind the store to a request-scoped session."""
        self._db = db

    async def create(self, name: str, email: str, age: int) -> int:
        """Persist a new student.

        Args:
            name: Name of the student.
            email: Email address of the student.
            age: Age of the student.

        Returns:
            int: The identifier assigned by the database.

        Raises:
            DatabaseError: If the insert or commit fails.
        """
        student = Student(name=name, email=email, age=age)
        try:
            self._db.add(student)
            await self._db.commit()
            await self._db.refresh(student)
        except SQLAlchemyError as exc:
            logger.error("Error inserting student", error=str(exc))
            await self._db.rollback()
            raise DatabaseError(str(exc)) from exc

        if student.id is None:
            raise DatabaseError("database did not assign an id")

        logger.debug("Student saved to DB", student_id=student.id)
        return student.id

    async def get_by_id(self, student_id: int) -> Student:
        """Retrieve a student by its ID.

        Args:
            student_id: The identifier of the student to retrieve.

        Returns:
            Student: The stored student.

        Raises:
            RecordNotFoundError: If no student has this ID.
            DatabaseError: If the query fails.
        """
        try:
            student = await self._db.get(Student, student_id)
        except SQLAlchemyError as exc:
            logger.error("Error loading student", student_id=student_id, error=str(exc))
            raise DatabaseError(str(exc)) from exc

        if student is None:
            raise RecordNotFoundError(f"no student with id {student_id}")

        logger.debug("Student loaded from DB", student_id=student_id)
        return student

    async def list(self, offset: int, limit: int) -> Sequence[Student]:
        """Fetch a slice of students in insertion order.

        Args:
            offset: Number of students to skip.
            limit: Maximum number of students to return.

        Returns:
            The students of the slice, possibly none.

        Raises:
            DatabaseError: If the query fails.
        """
        if offset > INT64_MAX:
            return []

        stmt = select(Student).order_by(col(Student.id)).offset(offset).limit(limit)
        try:
            students = (await self._db.exec(stmt)).all()
        except SQLAlchemyError as exc:
            logger.error("Error listing students", error=str(exc))
            raise DatabaseError(str(exc)) from exc

        logger.debug("Students retrieved", offset=offset, items=len(students))
        return students

    async def count(self) -> int:
        """Count all students.

        Raises:
            DatabaseError: If the query fails.
        """
        try:
            total = await self._db.scalar(select(func.count()).select_from(Student))
        except SQLAlchemyError as exc:
            logger.error("Error counting students", error=str(exc))
            raise DatabaseError(str(exc)) from exc

        return total or 0


def get_student_store(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> StudentStore:
    """Provide the request-scoped student store."""
    return SQLStudentStore(db)
