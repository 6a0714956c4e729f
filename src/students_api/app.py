"""Main application module for the students API."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Final

from aiofiles.os import makedirs
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlmodel import SQLModel

from students_api.config import config_logger, engine, settings
from students_api.config.db import sqlite_directory
from students_api.utils.banner import create_banner
from students_api.utils.error_handler import register_exception_handlers
from students_api.utils.prometheus import add_prometheus_metrics
from students_api.utils.routers import register_routers
from students_api.utils.security import add_security_headers

config_logger()


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None]:
    """Provision storage on startup and release it on shutdown."""
    create_banner(settings)

    db_dir = sqlite_directory(settings.db_url)
    if db_dir is not None:
        await makedirs(db_dir, exist_ok=True)

    async with engine.begin() as conn:
        if settings.clear_db_on_restart:
            await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Students table ready", db_url=settings.db_url)

    yield

    await engine.dispose()
    logger.info("Database connections closed")


app: Final = FastAPI(
    title="Students API",
    description="Store and list student records",
    root_path=settings.root_path,
    version=settings.version,
    lifespan=lifespan,
)


# --------------------------------------------------------
# P R O M E T H E U S
# --------------------------------------------------------
add_prometheus_metrics(app)


# --------------------------------------------------------
# S E C U R I T Y
# --------------------------------------------------------
add_security_headers(app)


# --------------------------------------------------------
# C O R S
# --------------------------------------------------------
if settings.app_env != "production":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origin_in_dev,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# --------------------------------------------------------
# R O U T E R S
# --------------------------------------------------------
register_routers(app)


# --------------------------------------------------------
# E X C E P T I O N S
# --------------------------------------------------------
register_exception_handlers(app)
