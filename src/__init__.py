"""
City Explorer - Agregateur de donnees geolocalisees.

Ce package resout une recherche de ville en localisation, puis sert la meteo,
les evenements et les films associes depuis la base locale, en n'interrogeant
les fournisseurs externes qu'en cas d'absence de donnees (cache-aside).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs)
- services/ : Couche application (résolution de localisation, orchestration cache-aside)
- adapters/ : Clients HTTP et adaptateurs fournisseurs (geocodage, meteo, evenements, films)
- infrastructure/ : Persistance SQLModel
- web/ : Interface HTTP FastAPI
"""
