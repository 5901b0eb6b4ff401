"""
Normalisation et validation des saisies de l'annuaire.

Chaque fonction recoit la saisie brute de l'appelant et retourne une nouvelle
valeur normalisee, ou leve DirectoryError(VALIDATION). La saisie d'origine
n'est jamais modifiee.

Normalisation :
- prenom et nom : suppression des espaces en bordure
- email : suppression des espaces en bordure puis passage en minuscules
"""

import re
from typing import Optional

from staffdir.core.errors import DirectoryError
from staffdir.core.value_objects.requests import (
    CreateEmployeeRequest,
    DeleteEmployeeRequest,
    PaginationRequest,
)
from staffdir.utils.constants import MAX_PAGE_LIMIT, MIN_PAGE, MIN_PAGE_LIMIT

# Partie locale : atomes separes par des points, ou chaine entre guillemets.
# Domaine : labels separes par des points, ou litteral IPv4 entre crochets.
_EMAIL_PATTERN = re.compile(
    r"(?:[a-z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r'|"(?:[\x01-\x08\x0b\x0c\x0e-\x1f\x21\x23-\x5b\x5d-\x7f]|\\[\x01-\x09\x0b\x0c\x0e-\x7f])*")'
    r"@"
    r"(?:(?:[a-z0-9](?:[a-z0-9-]*[a-z0-9])?\.)+[a-z0-9](?:[a-z0-9-]*[a-z0-9])?"
    r"|\[(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\])",
    re.IGNORECASE,
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def email_rejection_reason(email: str) -> Optional[str]:
    """
    Retourne la raison du rejet d'un email, ou None s'il est valide.

    Les regles sont evaluees dans l'ordre et la premiere en echec est retournee.

    Args:
        email: Email deja normalise (sans espaces, en minuscules)

    Returns:
        Message lisible decrivant la regle violee, None si l'email est valide
    """
    if ".." in email:
        return "email must not contain consecutive dots"
    if "@@" in email:
        return "email must not contain '@@'"
    if email.endswith("."):
        return "email must not end with a dot"
    if email.startswith("@"):
        return "email must not start with '@'"

    at_index = email.find("@")
    if at_index == -1:
        return "email must contain '@'"
    if "." not in email[at_index + 1:]:
        return "email domain must contain a dot"

    if _EMAIL_PATTERN.fullmatch(email) is None:
        return "email does not match the local-part@domain format"
    return None


def _normalize_email(email: str) -> str:
    normalized = email.strip().lower()
    reason = email_rejection_reason(normalized)
    if reason is not None:
        raise DirectoryError.validation(f"Invalid email format: {reason}")
    return normalized


def normalize_create(request: CreateEmployeeRequest) -> CreateEmployeeRequest:
    """
    Valide et normalise une demande de creation.

    Raises:
        DirectoryError: VALIDATION si un champ est absent, vide ou si l'email est invalide
    """
    if _is_blank(request.first_name):
        raise DirectoryError.validation("First name is required")
    if _is_blank(request.last_name):
        raise DirectoryError.validation("Last name is required")
    if _is_blank(request.email):
        raise DirectoryError.validation("Email is required")

    return CreateEmployeeRequest(
        first_name=request.first_name.strip(),
        last_name=request.last_name.strip(),
        email=_normalize_email(request.email),
    )


def normalize_delete(request: DeleteEmployeeRequest) -> DeleteEmployeeRequest:
    """
    Valide et normalise une demande de suppression.

    Un champ vide ou compose uniquement d'espaces est considere comme absent.
    L'email, s'il est fourni, est valide meme lorsqu'un ID est aussi present.

    Raises:
        DirectoryError: VALIDATION si ni ID ni email, ou si l'email est invalide
    """
    if _is_blank(request.id) and _is_blank(request.email):
        raise DirectoryError.validation("Email or id is required")

    email = None if _is_blank(request.email) else _normalize_email(request.email)
    employee_id = None if _is_blank(request.id) else request.id.strip()
    return DeleteEmployeeRequest(id=employee_id, email=email)


def check_pagination(request: PaginationRequest) -> PaginationRequest:
    """
    Verifie les bornes de pagination.

    Raises:
        DirectoryError: VALIDATION si page ou limite absente, nulle ou hors bornes
    """
    if not request.page or not request.limit:
        raise DirectoryError.validation("Page and limit are required")
    if request.page < MIN_PAGE:
        raise DirectoryError.validation("Page must be greater than 0")
    if request.limit < MIN_PAGE_LIMIT or request.limit > MAX_PAGE_LIMIT:
        raise DirectoryError.validation(
            f"Limit must be between {MIN_PAGE_LIMIT} and {MAX_PAGE_LIMIT}"
        )
    return request
