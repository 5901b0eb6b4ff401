"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), objets valeur et
la taxonomie d'erreurs. Cette couche n'a AUCUNE dependance vers l'infrastructure
(stockage, frameworks web).

Sous-packages :
- entities/ : Entites metier (Employee)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (requetes, pagination)
"""
