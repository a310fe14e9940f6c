"""
Couche adaptateurs.

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client HTTP httpx partagé (timeout, relance sur 429)
- providers/ : Un adaptateur par fournisseur (géocodage, météo, événements, films)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
