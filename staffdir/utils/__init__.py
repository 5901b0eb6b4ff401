"""
Utilitaires et constantes pour StaffDir.

Ce module contient les constantes partagees.
"""

from staffdir.utils.constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    MIN_PAGE,
    MIN_PAGE_LIMIT,
)

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
    "MIN_PAGE",
    "MIN_PAGE_LIMIT",
]
