"""
Erreurs du domaine de l'annuaire.

Les erreurs forment un ensemble ferme de types (ErrorKind) portant leurs donnees
associees (message, ID ou email en cause). Une seule classe d'exception les
transporte, de sorte que chaque appelant peut traiter tous les types de
maniere exhaustive en testant ``error.kind``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Types d'erreurs produits par le domaine.

    Valeurs:
        VALIDATION: Saisie invalide (champ manquant, email mal forme, pagination hors bornes)
        DUPLICATE_EMAIL: Email deja associe a un employe vivant
        EMPLOYEE_NOT_FOUND: Aucun employe pour l'ID demande
        EMPLOYEE_EMAIL_NOT_FOUND: Aucun employe pour l'email demande
    """

    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate_email"
    EMPLOYEE_NOT_FOUND = "employee_not_found"
    EMPLOYEE_EMAIL_NOT_FOUND = "employee_email_not_found"


class DirectoryError(Exception):
    """
    Exception levee par le domaine de l'annuaire.

    Attributes:
        kind: Type d'erreur (voir ErrorKind)
        message: Message lisible destine a l'appelant
        employee_id: ID en cause (EMPLOYEE_NOT_FOUND)
        email: Email en cause (DUPLICATE_EMAIL, EMPLOYEE_EMAIL_NOT_FOUND)
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        employee_id: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.employee_id = employee_id
        self.email = email
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DirectoryError(kind={self.kind.name}, message={self.message!r})"

    @classmethod
    def validation(cls, message: str) -> "DirectoryError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def duplicate_email(cls, email: str) -> "DirectoryError":
        return cls(
            ErrorKind.DUPLICATE_EMAIL,
            f"Employee with email {email} already exists",
            email=email,
        )

    @classmethod
    def employee_not_found(cls, employee_id: str) -> "DirectoryError":
        return cls(
            ErrorKind.EMPLOYEE_NOT_FOUND,
            f"Employee with id {employee_id} not found",
            employee_id=employee_id,
        )

    @classmethod
    def employee_email_not_found(cls, email: str) -> "DirectoryError":
        return cls(
            ErrorKind.EMPLOYEE_EMAIL_NOT_FOUND,
            f"Employee with email {email} not found",
            email=email,
        )
