from __future__ import annotations
import pendulum as p
from pydantic import BaseModel, ConfigDict

from ..utils.dates import monday_index


class WeekWindow(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    offset: int
    start: p.Date        # lundi
    end: p.Date          # dimanche
    label: str

    def contains(self, d: p.Date) -> bool:
        return self.start <= d <= self.end


def week_label(offset: int) -> str:
    if offset == 0:
        return "current week"
    if offset == 1:
        return "next week"
    if offset == -1:
        return "previous week"
    if offset > 1:
        return f"in {offset} weeks"
    return f"{abs(offset)} weeks ago"


def week_heading(offset: int) -> str:
    """Libellé affiché à l'écran ; `label` reste la clé stable."""
    if offset == 0:
        return "Cette semaine"
    if offset == 1:
        return "Semaine prochaine"
    if offset == -1:
        return "Semaine dernière"
    if offset > 1:
        return f"Dans {offset} semaines"
    return f"Il y a {abs(offset)} semaines"


def compute_week_window(offset: int, reference_date: p.Date) -> WeekWindow:
    # Un dimanche appartient à la semaine qui se termine ce jour-là
    start = reference_date.add(days=offset * 7 - monday_index(reference_date))
    return WeekWindow(offset=offset, start=start, end=start.add(days=6), label=week_label(offset))
