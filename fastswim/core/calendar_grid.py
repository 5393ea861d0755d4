from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import pendulum as p
from pydantic import BaseModel

from ..models.session import TrainingSession
from ..utils.dates import date_key, days_in_month, monday_index

WEEKDAYS = 7


class CalendarCell(BaseModel):
    day: Optional[int] = None            # None = case vide avant le 1er
    sessions: List[TrainingSession] = []

    @property
    def is_blank(self) -> bool:
        return self.day is None


def leading_padding(year: int, month: int) -> int:
    return monday_index(p.date(year, month, 1))


def build_month_grid(year: int, month: int,
                     sessions: Sequence[TrainingSession]) -> List[CalendarCell]:
    """
    Grille Lundi..Dimanche du mois : cases vides de tête puis un jour par case.
    Pas de remplissage de fin (longueur = décalage + nb de jours).
    Les séances sont rangées par égalité stricte de chaîne "YYYY-MM-DD" ;
    une date mal formée ne correspond à aucune case.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Mois invalide: {month}")

    by_date: Dict[str, List[TrainingSession]] = {}
    for s in sessions:
        if s.calendar_date is None:
            continue
        by_date.setdefault(s.date, []).append(s)

    cells = [CalendarCell() for _ in range(leading_padding(year, month))]
    for day in range(1, days_in_month(year, month) + 1):
        cells.append(CalendarCell(day=day, sessions=by_date.get(date_key(year, month, day), [])))
    return cells


def grid_rows(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    """Découpe en semaines ; la dernière peut être incomplète."""
    return [list(cells[i:i + WEEKDAYS]) for i in range(0, len(cells), WEEKDAYS)]
