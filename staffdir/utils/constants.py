"""
Constantes globales pour StaffDir.

Ce module contient les constantes utilisees dans l'application:
- Bornes de pagination (page minimale, limite par page)
- Valeurs par defaut de pagination lorsque le client n'en fournit pas
- Version de l'application
"""

APP_NAME = "StaffDir"
APP_VERSION = "0.1.0"

# Pagination (pages numerotees a partir de 1)
MIN_PAGE = 1
MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100

# Valeurs utilisees par la couche HTTP quand page/limit sont absents
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
