# fastswim/errors.py
from __future__ import annotations
from typing import Iterable, Tuple


class FastSwimError(Exception):
    """Base des erreurs applicatives."""


class FetchFailure(FastSwimError):
    """La source de séances a échoué (réseau, mock...)."""

    def __init__(self, scope_label: str, cause: BaseException):
        super().__init__(f"Chargement impossible ({scope_label}) : {cause}")
        self.scope_label = scope_label
        self.cause = cause


class FormError(FastSwimError):
    """Formulaire incomplet : `missing` liste les champs vides."""

    def __init__(self, missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__("Veuillez remplir tous les champs : " + ", ".join(self.missing))


class AccessDenied(FastSwimError):
    pass
