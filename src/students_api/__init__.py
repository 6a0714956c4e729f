"""Declaration of the root package students_api."""

from students_api.app import app
from students_api.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server."""
    run()
