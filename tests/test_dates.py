import pendulum as p
import pytest

from fastswim import config
from fastswim.utils.dates import date_key, days_in_month, parse_iso_date, today, today_iso


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-08-25", p.date(2024, 8, 25)),
        (" 2024-02-29 ", p.date(2024, 2, 29)),
        ("2023-02-29", None),
        ("2024-8-5", None),
        ("2024-08-25T10:00", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_iso_date(value, expected):
    assert parse_iso_date(value) == expected


def test_date_key_is_zero_padded():
    assert date_key(2024, 8, 5) == "2024-08-05"


@pytest.mark.parametrize("year, month, days", [(2024, 1, 31), (2024, 4, 30), (2024, 12, 31), (2100, 2, 28)])
def test_days_in_month(year, month, days):
    assert days_in_month(year, month) == days


def test_today_override(frozen_today):
    assert today() == frozen_today
    assert today_iso() == "2024-08-22"


def test_invalid_override_falls_back_to_clock(monkeypatch):
    monkeypatch.setattr(config, "TODAY_OVERRIDE", "demain")
    assert today() == p.now().date()
