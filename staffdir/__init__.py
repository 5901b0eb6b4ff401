"""
StaffDir - Annuaire des employes en memoire.

Ce package fournit la creation, la suppression et le listing pagine
d'employes, avec unicite des emails et normalisation des saisies.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, erreurs)
- services/ : Couche application (normalisation, cas d'utilisation)
- infrastructure/ : Stockage en memoire
- web/ : Transport HTTP (FastAPI)
"""
