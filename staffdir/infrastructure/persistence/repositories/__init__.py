"""
Implementations des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans staffdir/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Retourne des entites de domaine immutables (instantanes)
"""

from staffdir.infrastructure.persistence.repositories.employee_repository import (
    InMemoryEmployeeRepository,
)

__all__ = [
    "InMemoryEmployeeRepository",
]
