"""Startup banner."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from students_api.config.config import Settings

__all__ = ["create_banner"]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    base_url = f"http://{settings.host_binding}:{settings.port}{settings.root_path}"

    lines = [
        "\033[1;36m" + figlet_format("STUDENTS", font="slant") + "\033[0m",
        f"\033[1;33mStudents API v{settings.version}\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
        f"Environment: {env_color}{settings.app_env}\033[0m",
        f"API: {base_url}/students",
        f"Docs: {base_url}/docs",
        f"Metrics: {base_url}/metrics",
        "\n\033[1;33mDatabase\033[0m",
        f"  • URL: {settings.db_url}",
        f"  • Pool Size: {settings.db_pool_size} (max: {settings.db_pool_size + settings.db_max_overflow})",  # noqa: E501
        f"  • Clear on Restart: {'yes' if settings.clear_db_on_restart else 'no'}",
        "\n\033[1;33mHTTP\033[0m",
        f"  • Keep-Alive Timeout: {settings.timeout_keep_alive}s",
        f"  • Graceful Shutdown: {settings.timeout_graceful_shutdown}s",
        "\n\033[1;33mLogging\033[0m",
        f"  • Log Level: {settings.log_level}",
        f"  • Log Path: {settings.log_path if settings.app_env != 'production' else 'stderr'}",  # noqa: E501
        "\n\033[1;33mSystem\033[0m",
        f"  • OS: {platform.system()} {platform.release()}",
        f"  • Python: {sys.version.split()[0]}",
        f"  • Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ]

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
