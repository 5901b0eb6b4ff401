"""
Routes de l'annuaire des employes.

Creation, suppression (par ID ou email) et listing pagine. Les erreurs du
domaine remontent telles quelles jusqu'aux gestionnaires de errors.py.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status

from ...config import Settings
from ...core.errors import DirectoryError
from ...core.value_objects import PaginationRequest
from ...services.directory import DirectoryService
from ...utils.constants import DEFAULT_PAGE
from ..deps import get_directory_service, get_settings
from ..schemas import (
    CreateEmployeeBody,
    DeleteEmployeeBody,
    dump_employee,
    dump_pagination,
)

router = APIRouter(prefix="/api/employees", tags=["employees"])

ServiceDep = Annotated[DirectoryService, Depends(get_directory_service)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employee(
    service: ServiceDep,
    body: Optional[CreateEmployeeBody] = None,
) -> dict:
    """Cree un employe."""
    employee = service.create_employee((body or CreateEmployeeBody()).to_request())
    return {
        "success": True,
        "data": dump_employee(employee),
        "message": f"Employee created successfully: {employee.full_name}",
    }


@router.delete("")
async def delete_employee(
    service: ServiceDep,
    body: Optional[DeleteEmployeeBody] = None,
) -> dict:
    """Supprime un employe par ID ou par email."""
    employee = service.delete_employee((body or DeleteEmployeeBody()).to_request())
    return {
        "success": True,
        "data": dump_employee(employee),
        "message": f"Employee deleted successfully: {employee.full_name}",
    }


@router.get("")
async def list_employees(
    service: ServiceDep,
    settings: Annotated[Settings, Depends(get_settings)],
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> dict:
    """Liste une page d'employes (page 1 et limite par defaut si absentes)."""
    result = service.list_employees(_parse_pagination(page, limit, settings))
    return {
        "success": True,
        "data": [dump_employee(employee) for employee in result.data],
        "pagination": dump_pagination(result.pagination),
        "message": "Employees fetched successfully",
    }


def _parse_pagination(
    page: Optional[str], limit: Optional[str], settings: Settings
) -> PaginationRequest:
    """Convertit les parametres de requete ; page et limit vont ensemble."""
    if not page or not limit:
        return PaginationRequest(page=DEFAULT_PAGE, limit=settings.default_page_limit)
    try:
        return PaginationRequest(page=int(page), limit=int(limit))
    except ValueError:
        raise DirectoryError.validation("Page and limit must be valid numbers") from None
