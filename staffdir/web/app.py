"""
Application FastAPI de StaffDir.

Initialise l'application web avec le Container DI, monte les middlewares,
les gestionnaires d'erreurs et les routes.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container
from ..utils.constants import APP_NAME, APP_VERSION
from .errors import register_error_handlers
from .middleware import register_middleware
from .routes.employees import router as employees_router
from .routes.health import router as health_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args :
        container : Container DI a utiliser (un nouveau par defaut, donc un store vide)

    Retourne :
        L'application FastAPI prete a servir
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Attache le Container au démarrage et journalise l'arrêt."""
        app.state.container = container
        app.state.started_at = time.monotonic()
        logger.info(f"Démarrage de {APP_NAME}", version=APP_VERSION)
        yield
        logger.info(f"Arrêt de {APP_NAME}")

    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)

    register_middleware(app, container.config())
    register_error_handlers(app)

    # Routes
    app.include_router(health_router)
    app.include_router(employees_router)
    return app


app = create_app()
