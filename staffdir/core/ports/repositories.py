"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour le stockage des employes.
L'implementation fournie (adaptateur) est un stockage en memoire ; une autre
implementation devra respecter les memes garanties d'unicite et d'atomicite.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from staffdir.core.entities.employee import Employee
from staffdir.core.value_objects.requests import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
)


class IEmployeeRepository(ABC):
    """
    Interface de stockage des employes.

    Les donnees recues sont deja normalisees et validees par la couche service :
    le repository ne verifie que l'unicite des emails. Chaque operation est
    atomique vis-a-vis des autres operations sur la meme instance.
    """

    @abstractmethod
    def create(self, request: CreateEmployeeRequest) -> Employee:
        """
        Cree un employe et retourne son instantane.

        Leve DirectoryError(DUPLICATE_EMAIL) si l'email est deja utilise.
        """
        ...

    @abstractmethod
    def delete(self, request: DeleteEmployeeRequest) -> Employee:
        """
        Supprime un employe par ID (prioritaire) ou par email.

        Leve DirectoryError(EMPLOYEE_NOT_FOUND) ou DirectoryError(EMPLOYEE_EMAIL_NOT_FOUND).
        """
        ...

    @abstractmethod
    def list(self, page: int, limit: int) -> list[Employee]:
        """Liste une page d'employes tries par date de creation croissante."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre d'employes vivants."""
        ...

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Verifie si un email normalise est deja utilise."""
        ...

    @abstractmethod
    def snapshot(self) -> AbstractContextManager:
        """
        Section critique couvrant plusieurs lectures.

        Les appels a list() et count() faits a l'interieur du bloc ``with``
        observent le meme etat du store.
        """
        ...
