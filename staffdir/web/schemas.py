"""
Schemas Pydantic de la couche HTTP.

Les corps de requete acceptent des champs absents (None) : c'est la couche
service qui decide si un champ manque. Les reponses sont serialisees en
camelCase avec des dates ISO-8601.
"""

from dataclasses import asdict
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..core.entities.employee import Employee
from ..core.value_objects import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
    PaginationMeta,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CreateEmployeeBody(_CamelModel):
    """Corps de POST /api/employees."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    def to_request(self) -> CreateEmployeeRequest:
        return CreateEmployeeRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )


class DeleteEmployeeBody(_CamelModel):
    """Corps de DELETE /api/employees."""

    id: Optional[str] = None
    email: Optional[str] = None

    def to_request(self) -> DeleteEmployeeRequest:
        return DeleteEmployeeRequest(id=self.id, email=self.email)


class EmployeeOut(_CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime


class PaginationOut(_CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


def dump_employee(employee: Employee) -> dict:
    """Serialise un employe en dictionnaire JSON (camelCase)."""
    return EmployeeOut.model_validate(asdict(employee)).model_dump(mode="json", by_alias=True)


def dump_pagination(meta: PaginationMeta) -> dict:
    """Serialise les metadonnees de pagination en dictionnaire JSON (camelCase)."""
    return PaginationOut.model_validate(asdict(meta)).model_dump(mode="json", by_alias=True)
