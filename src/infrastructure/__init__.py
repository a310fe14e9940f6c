"""
Couche infrastructure de City Explorer.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- persistence/ : Stockage SQLModel (modeles, engine, store en ajout seul)

Architecture hexagonale : les adapters ici implementent les ports du domaine,
le domaine n'en depend jamais.
"""
