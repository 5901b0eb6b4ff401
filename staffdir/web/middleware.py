"""
Middlewares HTTP : CORS, en-tetes de securite, journalisation des requetes.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..config import Settings

SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'self'",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
}


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Monte les middlewares sur l'application."""

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Contexte lie a tous les logs emis pendant le traitement de la requete
        with logger.contextualize(request=f"{request.method} {request.url.path}"):
            logger.info("Requete recue")
            return await call_next(request)

    # Ajoute en dernier : enveloppe les autres et repond aux pre-requetes OPTIONS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
