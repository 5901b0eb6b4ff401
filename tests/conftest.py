"""
Fixtures pytest partagees pour les tests StaffDir.

Ce module contient les fixtures communes utilisees dans les tests:
- Repository en memoire avec horloge controlable
- Service d'annuaire branche sur ce repository
- Mock de l'interface IEmployeeRepository
- Settings de test avec chemins temporaires
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from staffdir.config import Settings
from staffdir.core.ports.repositories import IEmployeeRepository
from staffdir.infrastructure.persistence.repositories import InMemoryEmployeeRepository
from staffdir.services.directory import DirectoryService


class FakeClock:
    """Horloge de test : avance d'une seconde a chaque lecture, sauf si figee."""

    def __init__(self, start: datetime) -> None:
        self.current = start
        self.frozen = False

    def __call__(self) -> datetime:
        now = self.current
        if not self.frozen:
            self.current = self.current + timedelta(seconds=1)
        return now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def repository(clock: FakeClock) -> InMemoryEmployeeRepository:
    """Store en memoire vide, avec des dates de creation strictement croissantes."""
    return InMemoryEmployeeRepository(clock=clock)


@pytest.fixture
def directory_service(repository: InMemoryEmployeeRepository) -> DirectoryService:
    return DirectoryService(repository=repository)


@pytest.fixture
def mock_repository() -> MagicMock:
    """
    Mock de IEmployeeRepository pour les tests.

    snapshot() se comporte comme un context manager neutre.
    """
    mock = MagicMock(spec=IEmployeeRepository)
    mock.list.return_value = []
    mock.count.return_value = 0
    mock.exists_by_email.return_value = False
    mock.snapshot.return_value.__enter__.return_value = None
    mock.snapshot.return_value.__exit__.return_value = None
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles de l'environnement (log dans tmp_path)."""
    return Settings(
        host="127.0.0.1",
        port=3100,
        allowed_origins="http://localhost:5173,http://example.test",
        default_page_limit=10,
        log_file=tmp_path / "test.log",
    )
