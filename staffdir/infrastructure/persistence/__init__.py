"""
Module de stockage en memoire pour StaffDir.

Le stockage dure le temps du processus : aucune donnee n'est conservee
entre deux demarrages.

Usage:
    from staffdir.infrastructure.persistence import InMemoryEmployeeRepository

    repository = InMemoryEmployeeRepository()
    employee = repository.create(CreateEmployeeRequest("John", "Doe", "john@x.com"))
"""

from staffdir.infrastructure.persistence.repositories import (
    InMemoryEmployeeRepository,
)

__all__ = [
    "InMemoryEmployeeRepository",
]
