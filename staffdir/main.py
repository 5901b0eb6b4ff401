"""
Point d'entrée CLI de StaffDir.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from .config import Settings
from .container import Container
from .logging_config import configure_logging
from .utils.constants import APP_NAME, APP_VERSION

app = typer.Typer(
    name="staffdir",
    help="Annuaire des employés (API HTTP en mémoire)",
)
container = Container()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info(f"Configuration {APP_NAME}")
    typer.echo(f"Écoute : {config.host}:{config.port}")
    typer.echo(f"Origines CORS : {', '.join(config.cors_origins)}")
    typer.echo(f"Limite de page par défaut : {config.default_page_limit}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"{APP_NAME} v{APP_VERSION}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web StaffDir."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("staffdir.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.debug(f"Démarrage de la CLI {APP_NAME}", version=APP_VERSION)
    app()


if __name__ == "__main__":
    main()
