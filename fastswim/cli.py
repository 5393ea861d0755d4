# fastswim/cli.py
from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
from rich.markup import escape
from rich.table import Table

from . import config
from .theme import print
from .log import setup_logging
from .core.composer import ScheduleView
from .core.filters import ALL
from .core.reminders import Notification
from .core.scopes import DayScope, MonthScope, Scope, WeekScope
from .errors import AccessDenied, FormError
from .features.admin import create_session, publish_announcement
from .features.announcements import feed_stats, filter_announcements
from .features.dashboard import load_dashboard
from .features.profile import load_profile_page, send_trainer_note
from .models.club import ROLES, Role
from .models.settings import AppSettings, SettingsDraft
from .services.club_repository import MockClubRepository
from .ui import render
from .utils import dates
from .utils.envtools import write_env_example, check_env, ENV_GROUPS

app = typer.Typer(help="FastSwim — planning du club, annonces, profil.")
schedule_app = typer.Typer(help="Planning des entraînements (mois, semaine, jour).")
app.add_typer(schedule_app, name="schedule")

# ──────────────────────────────────────────────────────────────────────────────
# Init / logging
# ──────────────────────────────────────────────────────────────────────────────
@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logs détaillés.")
):
    import logging
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=config.LOG_FILE)

# ──────────────────────────────────────────────────────────────────────────────
# Planning
# ──────────────────────────────────────────────────────────────────────────────
TRAINER_OPT = typer.Option(ALL, "--trainer", "-t", help="Filtrer par coach.")
LOCATION_OPT = typer.Option(ALL, "--location", "-l", help="Filtrer par bassin.")
GROUP_OPT = typer.Option(ALL, "--group", "-g", help="Filtrer par groupe.")
REMIND_OPT = typer.Option(
    [], "--remind", "-r", help="Bascule le rappel d'une séance (id, répétable)."
)


def _role(value: str) -> Role:
    if value not in ROLES:
        raise typer.BadParameter(f"rôle inconnu: {value!r} ({' | '.join(ROLES)})")
    return value  # type: ignore[return-value]


async def _open_view(scope: Scope, trainer: str, location: str, group: str, remind: List[str]):
    view = ScheduleView(MockClubRepository(), scope, notify=render.toast)
    await view.load()
    for session_id in remind:
        view.toggle_reminder(session_id)
    return view.select(trainer=trainer, location=location, group=group)


@schedule_app.command("month")
def schedule_month(
    year: Optional[int] = typer.Argument(None, help="Année (défaut: année courante)."),
    month: Optional[int] = typer.Argument(None, min=1, max=12, help="Mois 1..12."),
    shift: int = typer.Option(0, "--shift", help="Décalage en mois (-1 = mois précédent)."),
    trainer: str = TRAINER_OPT,
    location: str = LOCATION_OPT,
    group: str = GROUP_OPT,
    remind: List[str] = REMIND_OPT,
):
    """Grille du mois (Lun..Dim) avec les séances de chaque jour."""
    today = dates.today()
    scope = MonthScope(year=year or today.year, month=month or today.month).shift(shift)
    display = asyncio.run(_open_view(scope, trainer, location, group, remind))
    render.show_month(display)


@schedule_app.command("week")
def schedule_week(
    offset: int = typer.Option(0, "--offset", "-o", help="0 = cette semaine, 1 = la suivante, -1 = la précédente."),
    trainer: str = TRAINER_OPT,
    location: str = LOCATION_OPT,
    group: str = GROUP_OPT,
    remind: List[str] = REMIND_OPT,
):
    """
    Séances de la semaine (lundi → dimanche), relative à aujourd'hui.

    Les données de démo sont en août 2024 : lancer avec FASTSWIM_TODAY=2024-08-22
    pour les voir, sinon la semaine courante est vide.
    """
    display = asyncio.run(_open_view(WeekScope(offset=offset), trainer, location, group, remind))
    render.show_list(display)


@schedule_app.command("day")
def schedule_day(
    day: str = typer.Argument(..., help="Date YYYY-MM-DD"),
    trainer: str = TRAINER_OPT,
    location: str = LOCATION_OPT,
    group: str = GROUP_OPT,
    remind: List[str] = REMIND_OPT,
):
    """Séances d'une journée."""
    d = dates.parse_iso_date(day)
    if d is None:
        raise typer.BadParameter(f"date invalide: {day!r} (attendu YYYY-MM-DD)")
    display = asyncio.run(_open_view(DayScope(date=d), trainer, location, group, remind))
    render.show_list(display)

# ──────────────────────────────────────────────────────────────────────────────
# Tableau de bord / annonces / profil
# ──────────────────────────────────────────────────────────────────────────────
@app.command("dashboard")
def dashboard():
    """Prochaines séances + dernières annonces."""
    board = asyncio.run(load_dashboard(MockClubRepository()))
    if board.error:
        print(f"[err]{escape(board.error)}[/]")
        raise typer.Exit(1)

    name = board.profile.name if board.profile else "Nageur"
    print(f"[title]Bienvenue, {escape(name)} ![/]")
    if board.upcoming:
        print(render.sessions_table(board.upcoming, {}, title="Planning des séances"))
    else:
        print("[muted]Aucune séance prévue aujourd'hui.[/]")
    if board.announcements:
        print(render.announcements_table(board.announcements))
    else:
        print("[muted]Pas de nouvelle annonce.[/]")
    if board.show_admin_link:
        print("[accent]Panneau admin : fastswim create-session / create-announcement[/]")


@app.command("announcements")
def announcements(
    urgent: bool = typer.Option(False, "--urgent", "-u", help="Seulement les annonces importantes."),
    search: str = typer.Option("", "--search", "-s", help="Recherche (titre, texte, auteur)."),
):
    """Fil des annonces du club, les plus récentes d'abord."""
    items = asyncio.run(MockClubRepository().get_announcements())
    shown = filter_announcements(items, urgent_only=urgent, query=search)
    stats = feed_stats(items, shown)

    if shown:
        print(render.announcements_table(shown))
    elif search.strip():
        print(f"[warn]Aucune annonce pour « {escape(search)} ».[/]")
    else:
        print("[muted]Aucune annonce.[/]")
    print(f"[muted]Affichées: {stats.shown} sur {stats.total} • Importantes: {stats.urgent}[/]")


@app.command("profile")
def profile(
    role: str = typer.Option("swimmer", "--role", help="Rôle simulé (swimmer|trainer|admin)."),
):
    """Profil, présence, rattrapages et paiement."""
    page = asyncio.run(load_profile_page(MockClubRepository(role=_role(role))))
    user = page.profile
    print(f"[title]{escape(user.name)}[/] — {escape(user.group)} • coach {escape(user.trainer)} • {escape(user.email)}")
    print(f"Présence : [bold]{page.attendance_rate}%[/] ({len(page.attendance)} séances suivies)")

    table = Table(title="Groupes de rattrapage", show_header=True, header_style="accent")
    for col in ("Groupe", "Date", "Heure", "Lieu", "Places"):
        table.add_column(col)
    for g in page.makeup_groups:
        table.add_row(escape(g.name), g.date, g.time, escape(g.location), f"{g.available_spots}/{g.total_spots}")
    print(table)

    if page.payment:
        print(f"Paiement : [bold]{page.payment.amount}[/] avant le {page.payment.due_date} "
              f"([warn]{page.payment.status}[/])")
    if page.admin_stats:
        s = page.admin_stats
        print(f"[accent]Club[/] : {s.active_members}/{s.total_members} membres actifs, "
              f"présence {s.attendance_rate}%")


@app.command("settings")
def settings(
    theme: Optional[str] = typer.Option(None, "--theme", help="light | dark | system"),
    language: Optional[str] = typer.Option(None, "--language", help="ru | en | fr"),
    volume: Optional[int] = typer.Option(None, "--volume", min=0, max=100),
    mute: bool = typer.Option(False, "--mute", help="Coupe le son des notifications."),
    save: bool = typer.Option(False, "--save", help="Valide les modifications (le temps de la commande)."),
):
    """Affiche les réglages (défauts + modifications demandées)."""
    draft = SettingsDraft()
    current = draft.current
    appearance = {k: v for k, v in {"theme": theme, "language": language}.items() if v is not None}
    try:
        if appearance:
            current = current.with_appearance(**appearance)
        if volume is not None:
            current = current.with_app(sound_volume=volume)
        if mute:
            current = current.with_notifications(sound=False)
    except ValueError as e:
        print(f"[err]Réglage invalide :[/] {escape(str(e))}")
        raise typer.Exit(1)
    draft.apply(current)
    if save:
        draft.commit()

    table = Table(title="Réglages", show_header=True, header_style="accent")
    table.add_column("Section")
    table.add_column("Clé")
    table.add_column("Valeur")
    for section in AppSettings.model_fields:
        for key, value in getattr(current, section).model_dump().items():
            table.add_row(section, key, str(value))
    print(table)
    if draft.has_changes:
        print("[warn]Modifications non enregistrées.[/]")
    elif save:
        print("[ok]Réglages enregistrés.[/]")


@app.command("note")
def note(
    text: str = typer.Argument(..., help="Message pour le coach (absence, blessure...)."),
):
    """Envoie une note au coach, datée du jour."""
    async def _run():
        repo = MockClubRepository()
        return await send_trainer_note(repo, await repo.get_user_profile(), text)

    try:
        sent = asyncio.run(_run())
    except FormError as e:
        _admin_error(e)
    render.toast(Notification(title="Note envoyée", description=f"{sent.date} • {sent.note}"))

# ──────────────────────────────────────────────────────────────────────────────
# Admin
# ──────────────────────────────────────────────────────────────────────────────
def _admin_error(e: Exception) -> None:
    render.toast(Notification(title="Erreur", description=str(e), variant="destructive"))
    raise typer.Exit(1)


@app.command("create-session")
def cmd_create_session(
    date: str = typer.Option("", "--date"),
    time: str = typer.Option("", "--time"),
    location: str = typer.Option("", "--location"),
    group: str = typer.Option("", "--group"),
    trainer: str = typer.Option("", "--trainer"),
    type_: str = typer.Option("", "--type"),
    role: str = typer.Option("trainer", "--role", help="Rôle simulé de l'auteur."),
):
    """Ajoute une séance au planning (coachs/admins)."""
    form = dict(date=date, time=time, location=location, group=group, trainer=trainer, type=type_)

    async def _run():
        repo = MockClubRepository(role=_role(role))
        return await create_session(repo, await repo.get_user_profile(), form)

    try:
        session = asyncio.run(_run())
    except (FormError, AccessDenied) as e:
        _admin_error(e)
    render.toast(Notification(title="Séance créée",
                              description=f"{session.date} {session.short_time} • {session.group} (id {session.id})"))


@app.command("create-announcement")
def cmd_create_announcement(
    title: str = typer.Option("", "--title"),
    body: str = typer.Option("", "--body"),
    author: str = typer.Option("", "--author"),
    urgent: bool = typer.Option(False, "--urgent"),
    role: str = typer.Option("trainer", "--role", help="Rôle simulé de l'auteur."),
):
    """Publie une annonce (coachs/admins)."""
    form = dict(title=title, body=body, author=author, urgent=urgent)

    async def _run():
        repo = MockClubRepository(role=_role(role))
        return await publish_announcement(repo, await repo.get_user_profile(), form)

    try:
        ann = asyncio.run(_run())
    except (FormError, AccessDenied) as e:
        _admin_error(e)
    render.toast(Notification(title="Annonce publiée", description=f"{ann.date} • {ann.title}"))

# ──────────────────────────────────────────────────────────────────────────────
# ENV
# ──────────────────────────────────────────────────────────────────────────────
@app.command("env-example")
def env_example(
    force: bool = typer.Option(
        False, "--force", "-f", help="Écrase .env.example s’il existe déjà."
    )
):
    """Génère un fichier .env.example à la racine du projet."""
    path = write_env_example(overwrite=force)
    print(
        f"[ok]Fichier d’exemple généré : [bold]{path}[/] "
        "(duplique-le en .env et ajuste les valeurs)."
    )


@app.command("env-check")
def env_check():
    """Vérifie le format des variables FASTSWIM_* présentes."""
    status, errors = check_env()

    table = Table(
        title="Vérification de l'environnement",
        show_header=True,
        header_style="accent",
    )
    table.add_column("Clé")
    table.add_column("OK ?")
    for values in ENV_GROUPS.values():
        for k in values:
            table.add_row(k, "✅" if status.get(k, False) else "❌")
    print(table)

    if errors:
        print("[err]Valeurs invalides :[/]")
        for k, why in errors.items():
            print(f" • [bold]{k}[/] — {why}")
        raise typer.Exit(1)
    print("[ok]Environnement prêt ✔[/]")

# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app()
