"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le store des employes est un singleton : une seule instance par container.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.repositories import InMemoryEmployeeRepository
from .services.directory import DirectoryService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.directory_service()
        repository = container.employee_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Store en memoire - Singleton car il porte l'etat de l'annuaire
    employee_repository = providers.Singleton(InMemoryEmployeeRepository)

    # Services - Factory, l'etat est dans le repository partage
    directory_service = providers.Factory(
        DirectoryService,
        repository=employee_repository,
    )
