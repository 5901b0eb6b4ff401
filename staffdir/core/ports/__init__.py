"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de stockage des donnees
- IEmployeeRepository : Stockage des employes avec index d'unicite par email
"""

from staffdir.core.ports.repositories import IEmployeeRepository

__all__ = [
    # Repositories
    "IEmployeeRepository",
]
