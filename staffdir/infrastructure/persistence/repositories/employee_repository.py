"""
Implementation en memoire du repository Employee.

Implemente l'interface IEmployeeRepository avec deux tables internes :
- les enregistrements indexes par ID (table principale)
- l'index secondaire email normalise -> ID

Les deux tables sont modifiees ensemble sous un meme verrou et ne sont jamais
exposees directement.
"""

import itertools
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, NamedTuple, Optional

from loguru import logger

from staffdir.core.entities.employee import Employee
from staffdir.core.errors import DirectoryError
from staffdir.core.ports.repositories import IEmployeeRepository
from staffdir.core.value_objects.requests import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _Entry(NamedTuple):
    """Enregistrement stocke : numero d'insertion et instantane de l'employe."""

    sequence: int
    employee: Employee


class InMemoryEmployeeRepository(IEmployeeRepository):
    """
    Repository en memoire pour les employes.

    Le stockage dure le temps du processus. Toutes les operations publiques
    prennent le meme verrou re-entrant, ce qui permet aussi de les combiner
    dans snapshot().
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        """
        Initialise un store vide.

        Args :
            clock : Source de l'heure courante (UTC par defaut), injectable pour les tests
        """
        self._clock = clock or _utc_now
        self._lock = threading.RLock()
        self._employees: dict[str, _Entry] = {}
        self._email_index: dict[str, str] = {}
        self._sequence = itertools.count()

    def create(self, request: CreateEmployeeRequest) -> Employee:
        with self._lock:
            if request.email in self._email_index:
                raise DirectoryError.duplicate_email(request.email)

            employee_id = str(uuid.uuid4())
            now = self._clock()
            employee = Employee(
                id=employee_id,
                first_name=request.first_name,
                last_name=request.last_name,
                email=request.email,
                created_at=now,
                updated_at=now,
            )

            self._employees[employee_id] = _Entry(next(self._sequence), employee)
            self._email_index[employee.email] = employee_id

        logger.debug("Employe enregistre", employee_id=employee_id)
        return employee

    def delete(self, request: DeleteEmployeeRequest) -> Employee:
        with self._lock:
            if request.id:
                employee_id = request.id
                if employee_id not in self._employees:
                    raise DirectoryError.employee_not_found(employee_id)
            else:
                employee_id = self._email_index.get(request.email)
                if employee_id is None:
                    raise DirectoryError.employee_email_not_found(request.email)

            entry = self._employees.pop(employee_id)
            del self._email_index[entry.employee.email]

        logger.debug("Employe supprime", employee_id=employee_id)
        return entry.employee

    def list(self, page: int, limit: int) -> list[Employee]:
        with self._lock:
            entries = sorted(
                self._employees.values(),
                key=lambda entry: (entry.employee.created_at, entry.sequence),
            )

        start = (page - 1) * limit
        return [entry.employee for entry in entries[start:start + limit]]

    def count(self) -> int:
        with self._lock:
            return len(self._employees)

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return email in self._email_index

    @contextmanager
    def snapshot(self) -> Iterator[None]:
        with self._lock:
            yield

    def clear(self) -> None:
        """Supprime tous les employes et vide l'index des emails."""
        with self._lock:
            self._employees.clear()
            self._email_index.clear()
        logger.debug("Store des employes vide")
