from __future__ import annotations
import os
from typing import Dict, Tuple

from .dates import parse_iso_date

ENV_GROUPS = {
    "Affichage": {
        "FASTSWIM_LOCALE": "fr",
        "FASTSWIM_TODAY": "",
        "FASTSWIM_UPCOMING_LIMIT": "3",
        "FASTSWIM_ANNOUNCEMENTS_LIMIT": "2",
        "FASTSWIM_CELL_PREVIEW": "2",
    },
    "Logs": {
        "FASTSWIM_LOG_FILE": "",
    },
    "Source mock": {
        "FASTSWIM_MOCK_LATENCY": "0",
        "FASTSWIM_FAIL_FETCH": "0",
    },
}

_INT_KEYS = {"FASTSWIM_UPCOMING_LIMIT", "FASTSWIM_ANNOUNCEMENTS_LIMIT", "FASTSWIM_CELL_PREVIEW"}


def generate_env_example() -> str:
    lines = [
        "# FastSwim — .env.example",
        "# Duplique ce fichier en .env et ajuste les valeurs si besoin.",
        "",
    ]
    for group, values in ENV_GROUPS.items():
        lines.append(f"### {group}")
        for k, v in values.items():
            lines.append(f'{k}="{v}"')
        lines.append("")
    lines.insert(
        lines.index('FASTSWIM_TODAY=""'),
        "# Optionnel : fige la date du jour (ex: 2024-08-25) pour les données de démo",
    )
    return "\n".join(lines)


def write_env_example(path: str = ".env.example", overwrite: bool = False) -> str:
    if os.path.exists(path) and not overwrite:
        return path
    with open(path, "w", encoding="utf-8") as f:
        f.write(generate_env_example())
    return path


def check_env() -> Tuple[Dict[str, bool], Dict[str, str]]:
    """
    Retourne (status_par_clef, erreurs_par_clef).
    Aucune variable n'est requise : on ne vérifie que le format des valeurs fournies.
    """
    status: Dict[str, bool] = {}
    errors: Dict[str, str] = {}

    for values in ENV_GROUPS.values():
        for k in values:
            raw = os.getenv(k)
            ok, why = True, ""
            if raw:
                if k in _INT_KEYS:
                    ok = raw.strip().isdigit()
                    why = "entier attendu"
                elif k == "FASTSWIM_MOCK_LATENCY":
                    try:
                        ok = float(raw) >= 0
                    except ValueError:
                        ok = False
                    why = "nombre de secondes >= 0"
                elif k == "FASTSWIM_TODAY":
                    ok = parse_iso_date(raw) is not None
                    why = "date YYYY-MM-DD attendue"
            status[k] = ok
            if not ok:
                errors[k] = why

    return status, errors
