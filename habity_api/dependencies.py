"""
FastAPI dependencies for application-scoped objects.

Settings and services are created once by the application factory and
kept on ``app.state``; these dependencies hand them to route handlers.
"""

from fastapi import Request

from .config import AppSettings
from .services import HabitifyImportService


def get_settings(request: Request) -> AppSettings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_import_service(request: Request) -> HabitifyImportService:
    """Habitify import service bound to the running application."""
    return request.app.state.import_service
