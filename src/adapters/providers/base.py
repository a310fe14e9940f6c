"""
Socle commun des adaptateurs de fournisseurs.

Factorise la validation des reponses (ValidationError -> MalformedPayload)
et la conversion enregistrement <-> ligne, identique pour tous les types
puisque les colonnes des tables portent les noms des champs des entites.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from src.core.errors import MalformedPayload
from src.core.ports.providers import IProviderAdapter, R

S = TypeVar("S", bound=BaseModel)


class BaseProviderAdapter(IProviderAdapter[R]):
    """
    Adaptateur de base.

    Les sous-classes declarent `provider`, `record_type`, `resource_type`
    et `table_name`, puis implementent build_request() et parse().
    """

    provider: str = ""
    record_type: type

    def __init__(self, api_key: str | None) -> None:
        """
        Args:
            api_key: Cle API du fournisseur (None si non configuree)
        """
        self._api_key = api_key or ""

    def _validate(self, schema: type[S], payload: Any) -> S:
        """Valide le JSON brut contre le schema du fournisseur."""
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) or "<racine>"
                for error in e.errors()
            )
            raise MalformedPayload(self.provider, f"champs invalides: {fields}") from e

    def to_row(self, record: R) -> dict[str, Any]:
        row = dataclasses.asdict(record)
        row.pop("id", None)
        return row

    def from_row(self, row: Mapping[str, Any]) -> R:
        names = {f.name for f in dataclasses.fields(self.record_type)}
        return self.record_type(**{k: v for k, v in row.items() if k in names})
