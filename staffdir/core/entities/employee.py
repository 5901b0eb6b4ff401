"""
Entite Employee.

Un employe est cree par le store a partir d'une demande validee et n'est jamais
modifie ensuite : toute instance retournee est un instantane de l'etat du store
au moment de l'appel.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Employee:
    """
    Represente un employe de l'annuaire.

    Attributs :
        id : Identifiant unique opaque (UUID genere a la creation)
        first_name : Prenom (sans espaces en bordure)
        last_name : Nom de famille (sans espaces en bordure)
        email : Email normalise (minuscules), unique parmi les employes vivants
        created_at : Date de creation de l'enregistrement (UTC)
        updated_at : Date de derniere modification de l'enregistrement (UTC)
    """

    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        """Prenom et nom separes par un espace."""
        return f"{self.first_name} {self.last_name}"
