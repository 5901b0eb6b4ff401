"""
Objets valeur pour les resultats pagines.
"""

from dataclasses import dataclass

from staffdir.core.entities.employee import Employee


@dataclass(frozen=True)
class PaginationMeta:
    """
    Metadonnees de pagination calculees au moment de la requete.

    Attributs :
        page : Page demandee (a partir de 1)
        limit : Nombre d'elements par page
        total : Nombre total d'employes vivants
        total_pages : ceil(total / limit)
        has_next : Vrai si une page suivante existe
        has_prev : Vrai si la page demandee n'est pas la premiere
    """

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """Construit les metadonnees a partir de la page, la limite et le total."""
        total_pages = -(-total // limit)
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


@dataclass(frozen=True)
class EmployeePage:
    """Une page d'employes ordonnes par date de creation, avec ses metadonnees."""

    data: tuple[Employee, ...]
    pagination: PaginationMeta
