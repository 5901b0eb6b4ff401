"""
Service d'annuaire des employes.

Point de passage unique entre la saisie de l'appelant et le store : chaque
demande est normalisee et validee avant d'etre transmise au repository, et les
erreurs du repository sont propagees sans modification.
"""

from loguru import logger

from staffdir.core.entities.employee import Employee
from staffdir.core.ports.repositories import IEmployeeRepository
from staffdir.core.value_objects import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
    EmployeePage,
    PaginationMeta,
    PaginationRequest,
)
from staffdir.services.normalization import (
    check_pagination,
    normalize_create,
    normalize_delete,
)


class DirectoryService:
    """
    Cas d'utilisation de l'annuaire : creation, suppression, listing pagine.

    Utilisation :
        service = DirectoryService(repository=InMemoryEmployeeRepository())
        employee = service.create_employee(
            CreateEmployeeRequest(first_name="John", last_name="Doe", email="john@x.com")
        )
    """

    def __init__(self, repository: IEmployeeRepository) -> None:
        """
        Initialise le service.

        Args :
            repository : Stockage des employes
        """
        self._repository = repository

    def create_employee(self, request: CreateEmployeeRequest) -> Employee:
        """
        Cree un employe apres normalisation de la saisie.

        Raises:
            DirectoryError: VALIDATION ou DUPLICATE_EMAIL
        """
        normalized = normalize_create(request)
        employee = self._repository.create(normalized)
        logger.info("Employe cree", employee_id=employee.id)
        return employee

    def delete_employee(self, request: DeleteEmployeeRequest) -> Employee:
        """
        Supprime un employe par ID ou par email.

        Raises:
            DirectoryError: VALIDATION, EMPLOYEE_NOT_FOUND ou EMPLOYEE_EMAIL_NOT_FOUND
        """
        normalized = normalize_delete(request)
        employee = self._repository.delete(normalized)
        logger.info("Employe supprime", employee_id=employee.id)
        return employee

    def list_employees(self, request: PaginationRequest) -> EmployeePage:
        """
        Retourne une page d'employes et ses metadonnees de pagination.

        La page et le total sont lus dans la meme section critique du store.

        Raises:
            DirectoryError: VALIDATION si la pagination est hors bornes
        """
        pagination = check_pagination(request)

        with self._repository.snapshot():
            employees = self._repository.list(pagination.page, pagination.limit)
            total = self._repository.count()

        return EmployeePage(
            data=tuple(employees),
            pagination=PaginationMeta.build(pagination.page, pagination.limit, total),
        )
