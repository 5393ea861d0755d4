# fastswim/ui/render.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from rich.table import Table
from rich.markup import escape
from rich.text import Text

from .. import config
from ..core.calendar_grid import WEEKDAYS, CalendarCell, grid_rows
from ..core.composer import ListDisplay, MonthDisplay
from ..core.filters import ALL, FilterOptions, FilterSelection
from ..core.reminders import Notification
from ..models.club import Announcement
from ..models.session import TrainingSession
from ..theme import SESSION_STYLES, print

DAY_NAMES = ["Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"]
STATUS_LABELS = {"scheduled": "Prévue", "cancelled": "Annulée", "rescheduled": "Reportée"}


def session_style(s: TrainingSession) -> str:
    if s.status == "scheduled" and s.is_personal:
        return SESSION_STYLES["personal"]
    return SESSION_STYLES[s.status]


def _bell(s: TrainingSession, reminders: Dict[str, bool]) -> str:
    if not s.is_personal:
        return ""
    return "🔔" if reminders.get(s.id) else "🔕"


def _cell_text(cell: CalendarCell, reminders: Dict[str, bool], today_day: Optional[int]) -> Text:
    if cell.is_blank:
        return Text("")
    txt = Text(f"{cell.day}\n", style="today" if cell.day == today_day else "title")
    for s in cell.sessions[:config.CELL_PREVIEW]:
        txt.append(f"{s.short_time} {s.group} {_bell(s, reminders)}".rstrip() + "\n",
                   style=session_style(s))
    extra = len(cell.sessions) - config.CELL_PREVIEW
    if extra > 0:
        txt.append(f"+{extra} de plus", style="muted")
    return txt


def month_table(display: MonthDisplay) -> Table:
    table = Table(title=display.title, show_header=True, header_style="accent",
                  show_lines=True, expand=True)
    for name in DAY_NAMES:
        table.add_column(name, ratio=1, vertical="top")
    for week in grid_rows(display.cells):
        row = [_cell_text(c, display.reminders, display.today_day) for c in week]
        row += [Text("")] * (WEEKDAYS - len(row))
        table.add_row(*row)
    return table


def sessions_table(sessions: Iterable[TrainingSession], reminders: Dict[str, bool],
                   title: Optional[str] = None) -> Table:
    table = Table(title=title, show_header=True, header_style="accent")
    for col in ("Date", "Heure", "Séance", "Groupe", "Lieu", "Coach", "Statut", "Rappel"):
        table.add_column(col)
    for s in sessions:
        table.add_row(
            escape(s.date), escape(s.short_time), Text(s.type, style=session_style(s)), escape(s.group),
            escape(s.location), escape(s.trainer), STATUS_LABELS[s.status], _bell(s, reminders),
        )
    return table


def filters_line(options: FilterOptions, selection: FilterSelection) -> Text:
    def _part(label: str, current: str, values: List[str]) -> str:
        shown = "tous" if current == ALL else current
        return f"{label}: {shown} ({len(values)} choix)"

    txt = Text(" • ".join([
        _part("Coach", selection.trainer, options.trainers),
        _part("Bassin", selection.location, options.locations),
        _part("Groupe", selection.group, options.groups),
    ]), style="muted")
    if selection.is_active:
        txt.append("  [filtres actifs]", style="warn")
    return txt


def show_month(display: MonthDisplay) -> None:
    print(filters_line(display.options, display.selection))
    if display.error:
        print(f"[err]{escape(display.error)}[/]")
    print(month_table(display))
    print(f"[muted]{display.shown} séance(s) affichée(s) sur {display.total}[/]")
    if display.today_sessions:
        print(sessions_table(display.today_sessions, display.reminders, title="Aujourd'hui"))


def show_list(display: ListDisplay) -> None:
    print(filters_line(display.options, display.selection))
    if display.error:
        print(f"[err]{escape(display.error)}[/]")
    print(f"\n[title]{escape(display.title)}[/]")
    if not display.sessions:
        print("[muted]Aucune séance prévue.[/]")
        return
    print(sessions_table(display.sessions, display.reminders))


def announcements_table(items: Iterable[Announcement]) -> Table:
    table = Table(show_header=True, header_style="accent", show_lines=True)
    table.add_column("Date")
    table.add_column("Titre")
    table.add_column("Auteur")
    table.add_column("Texte")
    for a in items:
        title = Text(a.title, style="err" if a.urgent else "title")
        if a.urgent:
            title.append(" (important)", style="warn")
        table.add_row(escape(a.date), title, escape(a.author), escape(a.body))
    return table


def toast(n: Notification) -> None:
    style = "err" if n.variant == "destructive" else "ok"
    # titres et descriptions portent du texte saisi : jamais interprétés comme balises
    print(f"[{style}]● {escape(n.title)}[/] [muted]— {escape(n.description)}[/]")
