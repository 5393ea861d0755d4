# dates.py
from __future__ import annotations
import re
import time
from typing import Optional
import pendulum as p

from .. import config

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def monday_index(d: p.Date) -> int:
    """
    Colonne de `d` dans une semaine Lundi..Dimanche (Lundi=0 .. Dimanche=6).
    Part de l'indice "dimanche d'abord" (Dimanche=0 .. Samedi=6) et le décale.
    """
    raw_sunday_index = d.isoweekday() % 7
    return 6 if raw_sunday_index == 0 else raw_sunday_index - 1


def date_key(year: int, month: int, day: int) -> str:
    # "YYYY-MM-DD" zéro-paddé, comparé tel quel aux dates des séances
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_iso_date(value: str | None) -> Optional[p.Date]:
    """Date calendaire valide ou None (jamais d'exception)."""
    if not value:
        return None
    m = _ISO_DATE.match(value.strip())
    if not m:
        return None
    try:
        return p.date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def days_in_month(year: int, month: int) -> int:
    # "jour 0 du mois suivant" = veille du 1er du mois suivant
    return p.date(year, month, 1).add(months=1).subtract(days=1).day


def today() -> p.Date:
    override = parse_iso_date(config.TODAY_OVERRIDE)
    if override is not None:
        return override
    return p.now().date()


def today_iso() -> str:
    return today().to_date_string()


# idempotency
def new_id() -> str:
    """Identifiant basé sur l'horodatage en millisecondes."""
    return str(int(time.time() * 1000))
