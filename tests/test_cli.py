import pytest
from typer.testing import CliRunner

from fastswim import config
from fastswim.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _demo_env(monkeypatch):
    monkeypatch.setattr(config, "MOCK_LATENCY", 0.0)
    monkeypatch.setattr(config, "FAIL_FETCH", False)


def test_month_grid():
    result = runner.invoke(app, ["schedule", "month", "2024", "8"])
    assert result.exit_code == 0, result.output
    assert "Août 2024" in result.stdout
    assert "8 séance(s) affichée(s) sur 8" in result.stdout


def test_month_with_filter_and_reminder():
    result = runner.invoke(app, ["schedule", "month", "2024", "8", "-t", "Sergueï Petrov", "-r", "2"])
    assert result.exit_code == 0, result.output
    assert "Rappel activé" in result.stdout
    assert "2 séance(s) affichée(s) sur 8" in result.stdout


def test_day_rejects_bad_date():
    result = runner.invoke(app, ["schedule", "day", "2024-02-30"])
    assert result.exit_code != 0


def test_day_without_sessions():
    result = runner.invoke(app, ["schedule", "day", "2024-08-01"])
    assert result.exit_code == 0, result.output
    assert "Aucune séance prévue." in result.stdout


def test_fetch_failure_is_shown(monkeypatch):
    monkeypatch.setattr(config, "FAIL_FETCH", True)
    result = runner.invoke(app, ["schedule", "month", "2024", "8"])
    assert result.exit_code == 0
    assert "Chargement impossible (2024-08)" in result.stdout
    assert "0 séance(s) affichée(s) sur 0" in result.stdout


def test_swimmer_cannot_create_session():
    result = runner.invoke(app, [
        "create-session", "--date", "2024-08-29", "--time", "07:00", "--location", "Bassin n°1",
        "--group", "Débutants", "--trainer", "Anna Ivanova", "--type", "Dos", "--role", "swimmer",
    ])
    assert result.exit_code == 1
    assert "Erreur" in result.stdout


def test_trainer_creates_session():
    result = runner.invoke(app, [
        "create-session", "--date", "2024-08-29", "--time", "07:00", "--location", "Bassin n°1",
        "--group", "Débutants", "--trainer", "Anna Ivanova", "--type", "Dos",
    ])
    assert result.exit_code == 0, result.output
    assert "Séance créée" in result.stdout


def test_unknown_role_is_a_usage_error():
    result = runner.invoke(app, ["profile", "--role", "coach"])
    assert result.exit_code == 2


def test_announcements_stats():
    result = runner.invoke(app, ["announcements", "--urgent"])
    assert result.exit_code == 0, result.output
    assert "Affichées: 2 sur 3" in result.stdout

    result = runner.invoke(app, ["announcements", "--search", "piscine"])
    assert "Aucune annonce pour « piscine »" in result.stdout


def test_settings_validation():
    result = runner.invoke(app, ["settings", "--theme", "dark"])
    assert result.exit_code == 0, result.output
    assert "Modifications non enregistrées" in result.stdout

    result = runner.invoke(app, ["settings", "--theme", "neon"])
    assert result.exit_code == 1


def test_bracketed_search_is_printed_verbatim():
    result = runner.invoke(app, ["announcements", "--search", "[/b]"])
    assert result.exit_code == 0, result.output
    assert "Aucune annonce pour « [/b] »" in result.stdout


def test_bracketed_announcement_title_is_printed_verbatim():
    result = runner.invoke(app, [
        "create-announcement", "--title", "Horaires [/x] modifiés", "--body", "Voir [bold] planning",
        "--author", "Club",
    ])
    assert result.exit_code == 0, result.output
    assert "Horaires [/x] modifiés" in result.stdout


def test_week_help_mentions_demo_date():
    result = runner.invoke(app, ["schedule", "week", "--help"])
    assert result.exit_code == 0
    assert "FASTSWIM_TODAY" in result.stdout


def test_week_of_demo_data(frozen_today):
    result = runner.invoke(app, ["schedule", "week"])
    assert result.exit_code == 0, result.output
    assert "Cette semaine (19/08 – 25/08)" in result.stdout
    assert "Aucune séance prévue" not in result.stdout


def test_settings_save():
    result = runner.invoke(app, ["settings", "--theme", "dark", "--save"])
    assert result.exit_code == 0, result.output
    assert "Réglages enregistrés." in result.stdout
    assert "Modifications non enregistrées" not in result.stdout


def test_note_to_trainer():
    result = runner.invoke(app, ["note", "Absent jeudi"])
    assert result.exit_code == 0, result.output
    assert "Note envoyée" in result.stdout

    result = runner.invoke(app, ["note", "   "])
    assert result.exit_code == 1
