# fastswim/core/composer.py
"""
Assemble le modèle d'affichage du planning.

source (async) -> séances brutes -> filtres -> grille du mois | liste jour/semaine
-> fusion de l'état des rappels (séances personnelles uniquement).

Tout est recalculé à chaque rendu à partir des séances brutes : aucune mise à
jour incrémentale, aucun cache.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Dict, List, Optional, Sequence, Tuple, Union
import pendulum as p
from pydantic import BaseModel, ConfigDict

from .. import config
from ..errors import FetchFailure
from ..models.session import TrainingSession
from ..services.club_repository import SessionSource
from ..utils import dates
from .calendar_grid import CalendarCell, build_month_grid
from .filters import FilterOptions, FilterSelection, available_filters, filter_sessions, sort_sessions
from .reminders import NotificationSink, ReminderStore
from .scopes import DayScope, MonthScope, Scope, WeekScope
from .week_window import WeekWindow, compute_week_window, week_heading

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Modèles d'affichage
# ─────────────────────────────────────────────────────────────────────────────
class MonthDisplay(BaseModel):
    scope: MonthScope
    title: str
    cells: List[CalendarCell]
    today_day: Optional[int] = None          # jour à surligner si mois courant
    today_sessions: List[TrainingSession] = []
    options: FilterOptions
    selection: FilterSelection
    reminders: Dict[str, bool] = {}          # séances perso visibles uniquement
    total: int = 0                           # séances brutes chargées
    shown: int = 0                           # séances placées dans la grille
    error: Optional[str] = None


class ListDisplay(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    scope: Scope
    title: str
    week: Optional[WeekWindow] = None
    sessions: List[TrainingSession]
    options: FilterOptions
    selection: FilterSelection
    reminders: Dict[str, bool] = {}
    error: Optional[str] = None


Display = Union[MonthDisplay, ListDisplay]


# ─────────────────────────────────────────────────────────────────────────────
# Chargement
# ─────────────────────────────────────────────────────────────────────────────
def _request(source: SessionSource, scope: Scope) -> Awaitable[List[TrainingSession]]:
    if isinstance(scope, MonthScope):
        return source.get_monthly_trainings(scope.year, scope.month)
    if isinstance(scope, WeekScope):
        return source.get_weekly_trainings()
    # jour : pris dans les séances de son mois
    return source.get_monthly_trainings(scope.date.year, scope.date.month)


async def fetch_scope(source: SessionSource,
                      scope: Scope) -> Tuple[List[TrainingSession], Optional[FetchFailure]]:
    """
    Une seule requête par fenêtre. Un échec de la source ne remonte jamais :
    il est journalisé et rendu comme (liste vide, FetchFailure).
    """
    if not isinstance(scope, (DayScope, WeekScope, MonthScope)):
        raise TypeError(f"Fenêtre inconnue: {scope!r}")
    try:
        sessions = list(await _request(source, scope))
    except Exception as e:
        logger.exception("Erreur de chargement du planning (%s)", scope.describe())
        return [], FetchFailure(scope.describe(), e)
    logger.debug("%d séance(s) chargée(s) pour %s", len(sessions), scope.describe())
    return sessions, None


# ─────────────────────────────────────────────────────────────────────────────
# Composition (pure)
# ─────────────────────────────────────────────────────────────────────────────
def _reminders_for(visible: Sequence[TrainingSession], reminders: ReminderStore) -> Dict[str, bool]:
    return {s.id: reminders.get(s.id) for s in visible if s.is_personal}


def _compose_month(scope: MonthScope, sessions: Sequence[TrainingSession], selection: FilterSelection,
                   reminders: ReminderStore, today: p.Date, error: Optional[str]) -> MonthDisplay:
    filtered = filter_sessions(sessions, selection)
    cells = build_month_grid(scope.year, scope.month, filtered)
    placed = [s for c in cells for s in c.sessions]

    is_current = (today.year, today.month) == (scope.year, scope.month)
    today_key = today.to_date_string()
    return MonthDisplay(
        scope=scope,
        title=scope.title,
        cells=cells,
        today_day=today.day if is_current else None,
        today_sessions=[s for s in filtered if s.date == today_key],
        options=available_filters(sessions),
        selection=selection,
        reminders=_reminders_for(placed, reminders),
        total=len(sessions),
        shown=len(placed),
        error=error,
    )


def _compose_week(scope: WeekScope, sessions: Sequence[TrainingSession], selection: FilterSelection,
                  reminders: ReminderStore, today: p.Date, error: Optional[str]) -> ListDisplay:
    window = compute_week_window(scope.offset, today)
    in_window = []
    for s in sessions:
        d = s.calendar_date
        if d is not None and window.contains(d):
            in_window.append(s)
    visible = sort_sessions(filter_sessions(in_window, selection))

    title = f"{week_heading(window.offset)} ({window.start.format('DD/MM')} – {window.end.format('DD/MM')})"
    return ListDisplay(
        scope=scope, title=title, week=window, sessions=visible,
        options=available_filters(sessions), selection=selection,
        reminders=_reminders_for(visible, reminders), error=error,
    )


def _compose_day(scope: DayScope, sessions: Sequence[TrainingSession], selection: FilterSelection,
                 reminders: ReminderStore, error: Optional[str]) -> ListDisplay:
    # la restriction à la date passe AVANT les filtres trainer/lieu/groupe
    key = scope.date.to_date_string()
    same_day = [s for s in sessions if s.date == key]
    visible = sort_sessions(filter_sessions(same_day, selection))

    return ListDisplay(
        scope=scope,
        title=scope.date.format("dddd D MMMM YYYY", locale=config.LOCALE).capitalize(),
        sessions=visible,
        options=available_filters(sessions), selection=selection,
        reminders=_reminders_for(visible, reminders), error=error,
    )


def compose(scope: Scope, sessions: Sequence[TrainingSession], selection: FilterSelection,
            reminders: ReminderStore, *, today: Optional[p.Date] = None,
            error: Optional[str] = None) -> Display:
    today = today or dates.today()
    if isinstance(scope, MonthScope):
        return _compose_month(scope, sessions, selection, reminders, today, error)
    if isinstance(scope, WeekScope):
        return _compose_week(scope, sessions, selection, reminders, today, error)
    if isinstance(scope, DayScope):
        return _compose_day(scope, sessions, selection, reminders, error)
    raise TypeError(f"Fenêtre inconnue: {scope!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Vue montée
# ─────────────────────────────────────────────────────────────────────────────
class ScheduleView:
    """
    Une instance = une vue planning montée, avec son propre état de rappels.
    Les chargements ne sont ni annulés ni fusionnés : si deux se chevauchent,
    le dernier à se terminer impose ses séances (et la fenêtre associée).
    """

    def __init__(self, source: SessionSource, scope: Scope, *,
                 notify: Optional[NotificationSink] = None, today: Optional[p.Date] = None):
        self.source = source
        self.scope: Scope = scope             # fenêtre demandée
        self.loaded_scope: Scope = scope      # fenêtre des séances affichées
        self.today = today or dates.today()
        self.selection = FilterSelection()
        self.reminders = ReminderStore(notify=notify)
        self.sessions: List[TrainingSession] = []
        self.error: Optional[FetchFailure] = None
        self._pending = 0

    @property
    def loading(self) -> bool:
        return self._pending > 0

    async def load(self) -> Display:
        scope = self.scope
        self._pending += 1
        try:
            sessions, error = await fetch_scope(self.source, scope)
        finally:
            self._pending -= 1
        self.sessions, self.error, self.loaded_scope = sessions, error, scope
        return self.render()

    async def navigate(self, scope: Scope) -> Display:
        self.scope = scope
        return await self.load()

    async def next_month(self) -> Display:
        return await self.navigate(self._month_base().shift(1))

    async def previous_month(self) -> Display:
        return await self.navigate(self._month_base().shift(-1))

    async def shift_week(self, delta: int) -> Display:
        base = self.scope if isinstance(self.scope, WeekScope) else WeekScope()
        return await self.navigate(base.shift(delta))

    def _month_base(self) -> MonthScope:
        if isinstance(self.scope, MonthScope):
            return self.scope
        if isinstance(self.scope, DayScope):
            return MonthScope.containing(self.scope.date)
        return MonthScope.containing(self.today)

    def select(self, **changes: str) -> Display:
        self.selection = FilterSelection(**{**self.selection.model_dump(), **changes})
        return self.render()

    def reset_filters(self) -> Display:
        self.selection = self.selection.cleared()
        return self.render()

    def toggle_reminder(self, session_id: str) -> bool:
        # recherche dans la liste brute : le filtre courant n'a pas d'incidence
        session = next((s for s in self.sessions if s.id == session_id), None)
        return self.reminders.toggle(session_id, session)

    def render(self) -> Display:
        return compose(
            self.loaded_scope, self.sessions, self.selection, self.reminders,
            today=self.today, error=str(self.error) if self.error else None,
        )
