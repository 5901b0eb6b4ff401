"""
Gestionnaires d'erreurs globaux de l'API.

Chaque reponse d'erreur a la forme ``{"success": false, "error": message}``.

- DirectoryError : code HTTP determine par le type d'erreur
- RequestValidationError : 400 (corps mal forme ou JSON invalide)
- HTTPException : 404 pour une route inconnue, sinon code d'origine
- Exception : 500, sans exposer le detail interne
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import DirectoryError, ErrorKind
from .middleware import SECURITY_HEADERS

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.EMPLOYEE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.EMPLOYEE_EMAIL_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(
    status_code: int, message: str, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre tous les gestionnaires d'erreurs sur l'application."""

    @app.exception_handler(DirectoryError)
    async def directory_error_handler(request: Request, exc: DirectoryError):
        logger.warning(f"{exc.kind.name} sur {request.url.path}: {exc.message}")
        return error_response(STATUS_BY_KIND[exc.kind], exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Requete invalide sur {request.url.path}: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return error_response(exc.status_code, f"Route {request.url.path} not found")
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Erreur non geree sur {request.url.path}")
        # Reponse produite hors des middlewares : en-tetes de securite poses ici
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            headers=SECURITY_HEADERS,
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        return "Invalid JSON format"
    return "; ".join(_describe_error(error) for error in errors)


def _describe_error(error: dict) -> str:
    field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
    return f"{field}: {error['msg']}" if field else error["msg"]
