"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et la taxonomie d'erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Localisation et enregistrements normalisés (meteo, evenements, films)
- ports/ : Interfaces abstraites (fetcher HTTP, adaptateurs fournisseurs, stockage)
- errors.py : Exceptions typées remontées par les services
"""
