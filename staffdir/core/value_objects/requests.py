"""
Objets valeur pour les requetes adressees a l'annuaire.

Ces objets representent la saisie brute de l'appelant (creation, suppression,
pagination). Ils sont immutables : la normalisation produit toujours une
nouvelle instance au lieu de modifier celle de l'appelant.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateEmployeeRequest:
    """
    Demande de creation d'un employe.

    Attributs :
        first_name : Prenom (None si absent de la saisie)
        last_name : Nom de famille (None si absent)
        email : Adresse email (None si absente)
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class DeleteEmployeeRequest:
    """
    Demande de suppression d'un employe, par ID ou par email.

    Si les deux sont fournis, l'ID est prioritaire lors de la resolution.
    """

    id: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class PaginationRequest:
    """Page (a partir de 1) et nombre d'elements par page."""

    page: Optional[int] = None
    limit: Optional[int] = None
