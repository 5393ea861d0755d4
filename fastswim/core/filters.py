from __future__ import annotations
from typing import Iterable, List, Sequence
from pydantic import BaseModel, ConfigDict

from ..models.session import TrainingSession

ALL = "all"   # "pas de contrainte"


class FilterSelection(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    trainer: str = ALL
    location: str = ALL
    group: str = ALL

    @property
    def is_active(self) -> bool:
        return any(v != ALL for v in (self.trainer, self.location, self.group))

    def cleared(self) -> "FilterSelection":
        return FilterSelection()


class FilterOptions(BaseModel):
    trainers: List[str] = []
    locations: List[str] = []
    groups: List[str] = []


def filter_sessions(sessions: Sequence[TrainingSession],
                    selection: FilterSelection) -> List[TrainingSession]:
    """ET logique des contraintes (égalité exacte) ; ordre d'entrée conservé."""
    out = list(sessions)
    if selection.trainer != ALL:
        out = [s for s in out if s.trainer == selection.trainer]
    if selection.location != ALL:
        out = [s for s in out if s.location == selection.location]
    if selection.group != ALL:
        out = [s for s in out if s.group == selection.group]
    return out


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def available_filters(sessions: Sequence[TrainingSession]) -> FilterOptions:
    # Toujours sur la liste NON filtrée : un filtre ne masque pas les options des autres
    return FilterOptions(
        trainers=_distinct(s.trainer for s in sessions),
        locations=_distinct(s.location for s in sessions),
        groups=_distinct(s.group for s in sessions),
    )


def sort_sessions(sessions: Iterable[TrainingSession]) -> List[TrainingSession]:
    return sorted(sessions, key=lambda s: (s.date, s.time))
