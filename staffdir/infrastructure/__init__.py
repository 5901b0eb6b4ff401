"""
Couche infrastructure de StaffDir.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage en memoire des employes avec index d'unicite par email

Architecture hexagonale : les adapters ici implementent les ports du domaine,
permettant de changer l'implementation (ex: base de donnees au lieu de la memoire)
sans modifier la logique metier.
"""
