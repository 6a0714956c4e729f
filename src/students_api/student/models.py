"""Student models."""

from sqlmodel import Field, SQLModel

__all__ = ["Student", "StudentCreated", "StudentPublic"]


class _StudentBase(SQLModel):
    """Base Student model."""

    name: str = Field(description="Full name of the student.")

    email: str = Field(description="Email address of the student.")

    age: int = Field(description="Age of the student in years.")


class StudentPublic(SQLModel):
    """Student as returned by the API, identifier first."""

    id: int = Field(description="Unique identifier of the student.")

    name: str = Field(description="Full name of the student.")

    email: str = Field(description="Email address of the student.")

    age: int = Field(description="Age of the student in years.")


class StudentCreated(SQLModel):
    """Response body of a successful create."""

    id: int = Field(description="Identifier assigned to the new student.")


class Student(_StudentBase, table=True):
    """Student table.

    ``AUTOINCREMENT`` keeps SQLite from handing out the id of a removed row again.
    """

    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned on insert.",
    )
