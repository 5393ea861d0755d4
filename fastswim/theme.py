from __future__ import annotations
from rich.console import Console
from rich.theme import Theme

# Styles des séances selon leur statut (la séance perso n'a d'effet que si "scheduled")
SESSION_STYLES = {
    "scheduled": "accent",
    "personal": "bold blue",
    "cancelled": "red strike",
    "rescheduled": "dark_orange",
}

_theme = Theme({
    "ok": "bold green",
    "warn": "bold yellow",
    "err": "bold red",
    "muted": "grey50",
    "title": "bold white",
    "accent": "cyan",
    "today": "reverse cyan",
})

# pas de surlignage auto : les heures/dates de la grille restent neutres
console = Console(theme=_theme, highlight=False)
print = console.print
