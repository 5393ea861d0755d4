import pytest

from fastswim import config
from fastswim.errors import AccessDenied, FormError
from fastswim.features.admin import create_session, publish_announcement
from fastswim.features.announcements import feed_stats, filter_announcements
from fastswim.features.dashboard import load_dashboard
from fastswim.features.profile import attendance_rate, load_profile_page, send_trainer_note
from fastswim.models.club import Announcement, AttendanceRecord
from fastswim.services.club_repository import MockClubRepository

SESSION_FORM = dict(
    date="2024-08-29", time="07:00", location="Bassin n°1",
    group="Débutants", trainer="Anna Ivanova", type="Dos crawlé",
)


def _ann(id, date, urgent=False, title="Titre", body="Texte", author="Club"):
    return Announcement(id=id, title=title, body=body, author=author, date=date, urgent=urgent)


# ── Annonces ────────────────────────────────────────────────────────────────
def test_feed_is_sorted_newest_first():
    items = [_ann("1", "2024-08-15"), _ann("2", "2024-08-20"), _ann("3", "2024-08-18")]
    assert [a.id for a in filter_announcements(items)] == ["2", "3", "1"]


def test_feed_urgent_only_and_search():
    items = [
        _ann("1", "2024-08-20", urgent=True, title="Nouveau planning"),
        _ann("2", "2024-08-18", author="Sergueï Petrov"),
        _ann("3", "2024-08-15", urgent=True, body="Le bassin n°2 sera fermé"),
    ]

    assert [a.id for a in filter_announcements(items, urgent_only=True)] == ["1", "3"]
    assert [a.id for a in filter_announcements(items, query="  SERGUEÏ ")] == ["2"]
    assert [a.id for a in filter_announcements(items, urgent_only=True, query="bassin")] == ["3"]
    assert filter_announcements(items, query="piscine") == []


def test_feed_stats():
    items = [_ann("1", "2024-08-20", urgent=True), _ann("2", "2024-08-18")]
    stats = feed_stats(items, filter_announcements(items, urgent_only=True))
    assert (stats.shown, stats.total, stats.urgent) == (1, 2, 1)


# ── Profil ──────────────────────────────────────────────────────────────────
def _rec(i, attended):
    return AttendanceRecord(id=str(i), user_id="u", session_id=str(i), date="2024-08-20", attended=attended)


def test_attendance_rate():
    assert attendance_rate([]) == 0
    assert attendance_rate([_rec(1, True), _rec(2, False), _rec(3, True)]) == 67
    assert attendance_rate([_rec(i, i == 0) for i in range(8)]) == 13


@pytest.mark.asyncio
async def test_profile_page_for_swimmer_and_trainer():
    page = await load_profile_page(MockClubRepository())
    assert page.attendance_rate == 67
    assert page.admin_stats is None
    assert len(page.makeup_groups) == 2

    staff = await load_profile_page(MockClubRepository(role="trainer"))
    assert staff.admin_stats is not None
    assert staff.admin_stats.total_members == 45


@pytest.mark.asyncio
async def test_trainer_note(monkeypatch):
    monkeypatch.setattr(config, "TODAY_OVERRIDE", "2024-08-30")
    repo = MockClubRepository()
    profile = await repo.get_user_profile()

    with pytest.raises(FormError):
        await send_trainer_note(repo, profile, "   ")

    note = await send_trainer_note(repo, profile, "Absent jeudi")
    assert note.date == "2024-08-30"
    assert note in await repo.get_trainer_notes()


# ── Admin ───────────────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_swimmer_cannot_create_sessions():
    repo = MockClubRepository()
    with pytest.raises(AccessDenied):
        await create_session(repo, await repo.get_user_profile(), SESSION_FORM)


@pytest.mark.asyncio
async def test_missing_fields_are_reported():
    repo = MockClubRepository(role="admin")
    form = dict(SESSION_FORM, location=" ", type="")

    with pytest.raises(FormError) as exc:
        await create_session(repo, await repo.get_user_profile(), form)
    assert exc.value.missing == ("location", "type")


@pytest.mark.asyncio
async def test_created_sessions_are_appended_with_unique_ids():
    repo = MockClubRepository(role="trainer")
    profile = await repo.get_user_profile()
    before = await repo.get_monthly_trainings(2024, 8)

    a = await create_session(repo, profile, SESSION_FORM)
    b = await create_session(repo, profile, dict(SESSION_FORM, time="08:00"))

    after = await repo.get_monthly_trainings(2024, 8)
    assert after[:len(before)] == before
    assert after[-2:] == [a, b]
    assert a.id != b.id
    assert a.type == "Dos crawlé"
    assert a in await repo.get_weekly_trainings()


@pytest.mark.asyncio
async def test_publish_announcement_is_dated_today(monkeypatch):
    monkeypatch.setattr(config, "TODAY_OVERRIDE", "2024-08-31")
    repo = MockClubRepository(role="admin")
    profile = await repo.get_user_profile()

    ann = await publish_announcement(repo, profile, dict(title="Gala", body="Le 5 octobre", author="Club", urgent=True))

    assert ann.date == "2024-08-31"
    assert ann.urgent
    feed = filter_announcements(await repo.get_announcements())
    assert feed[0] == ann


# ── Tableau de bord ─────────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_dashboard_limits_and_admin_link():
    board = await load_dashboard(MockClubRepository())
    assert [s.id for s in board.upcoming] == ["1", "2", "3"]
    assert len(board.announcements) == 2
    assert board.show_admin_link is False

    staff = await load_dashboard(MockClubRepository(role="admin"))
    assert staff.show_admin_link is True


@pytest.mark.asyncio
async def test_dashboard_failure_is_reported():
    board = await load_dashboard(MockClubRepository(fail=True))
    assert board.error
    assert board.upcoming == []
