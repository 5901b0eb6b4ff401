"""
Dépendances partagées de l'application web.

Les services sont résolus depuis le Container DI attaché à l'application
au démarrage (voir lifespan dans app.py).
"""

from fastapi import Request

from ..config import Settings
from ..services.directory import DirectoryService


def get_directory_service(request: Request) -> DirectoryService:
    """Service d'annuaire lié au store de l'application."""
    return request.app.state.container.directory_service()


def get_settings(request: Request) -> Settings:
    """Paramètres de l'application."""
    return request.app.state.container.config()
