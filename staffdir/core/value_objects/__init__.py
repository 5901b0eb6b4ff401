"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- CreateEmployeeRequest : Saisie de creation d'un employe
- DeleteEmployeeRequest : Saisie de suppression (par ID ou email)
- PaginationRequest : Page et limite demandees
- PaginationMeta : Metadonnees de pagination calculees
- EmployeePage : Page d'employes avec ses metadonnees
"""

from staffdir.core.value_objects.requests import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
    PaginationRequest,
)
from staffdir.core.value_objects.pagination import EmployeePage, PaginationMeta

__all__ = [
    "CreateEmployeeRequest",
    "DeleteEmployeeRequest",
    "PaginationRequest",
    "PaginationMeta",
    "EmployeePage",
]
