"""Get the source location of an error."""

import traceback

__all__ = ["get_error_path"]


def get_error_path(err: BaseException) -> str:
    """Extract the innermost source location from an error's traceback.

    Paths inside the package are shortened to start at ``students_api``.

    Args:
        err: The raised exception.

    Returns:
        A string in the format ``"filename:line (fn:function_name)"``, or
        ``"unknown"`` when the error was never raised.
    """
    frames = traceback.extract_tb(err.__traceback__)
    if not frames:
        return "unknown"

    filename, line, func, _ = frames[-1]
    if "students_api" in filename:
        filename = "students_api" + filename.split("students_api")[-1]
    return f"{filename}:{line} (fn:{func})"
