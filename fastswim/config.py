# fastswim/config.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# Charge automatiquement .env (à la racine du projet)
load_dotenv(override=False)


def _bool(envval: str | None, default: bool = False) -> bool:
    if envval is None:
        return default
    return envval.strip().lower() in {"1", "true", "yes", "on", "y"}


# ----- Affichage -----
LOCALE = os.getenv("FASTSWIM_LOCALE", "fr")            # noms de mois/jours (pendulum)
TODAY_OVERRIDE = os.getenv("FASTSWIM_TODAY") or None   # "YYYY-MM-DD" pour les démos

UPCOMING_LIMIT = int(os.getenv("FASTSWIM_UPCOMING_LIMIT", "3"))
ANNOUNCEMENTS_LIMIT = int(os.getenv("FASTSWIM_ANNOUNCEMENTS_LIMIT", "2"))
CELL_PREVIEW = int(os.getenv("FASTSWIM_CELL_PREVIEW", "2"))   # séances visibles par case


# ----- Logs -----
LOG_FILE = os.getenv("FASTSWIM_LOG_FILE") or None


# ----- Source mock -----
MOCK_LATENCY = float(os.getenv("FASTSWIM_MOCK_LATENCY", "0"))  # secondes
FAIL_FETCH = _bool(os.getenv("FASTSWIM_FAIL_FETCH"), default=False)
