# apps/catalogs/outcomes.py
"""Résultats nommés des workflows catégories / articles."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class Status(enum.Enum):
    FOUND = "found"
    CREATED = "created"
    EXISTING = "existing"          # création : le nom existe déjà, on renvoie l'existant
    INVALID = "invalid"
    CONFLICT = "conflict"          # mise à jour : nom pris par une autre catégorie
    UPDATED = "updated"
    DELETED = "deleted"
    BLOCKED = "blocked"            # suppression refusée : des articles référencent la catégorie
    NOT_FOUND = "not_found"
    NOT_SUPPORTED = "not_supported"


@dataclass(frozen=True)
class FieldError:
    field: str | None
    message: str


@dataclass
class Outcome:
    status: Status
    record: Any = None
    errors: list[FieldError] = field(default_factory=list)
    items: list = field(default_factory=list)
    categories: list = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


def form_errors(form) -> list[FieldError]:
    """Toutes les erreurs d'un formulaire lié, dans l'ordre des champs."""
    out: list[FieldError] = []
    for name, errors in form.errors.items():
        field_name = None if name == "__all__" else name
        for message in errors:
            out.append(FieldError(field_name, message))
    return out


def submitted(form, name: str) -> str:
    """Valeur saisie nettoyée si valide, sinon valeur brute sans espaces autour."""
    cleaned = getattr(form, "cleaned_data", {}) or {}
    if name in cleaned:
        return cleaned[name]
    raw = form.data.get(name, "") if form.is_bound else ""
    return raw.strip() if isinstance(raw, str) else raw
