# fastswim/features/admin.py
from __future__ import annotations
from typing import Mapping, Sequence

from ..errors import AccessDenied, FormError
from ..models.club import Announcement, UserProfile
from ..models.session import TrainingSession
from ..services.club_repository import MockClubRepository

SESSION_FIELDS = ("date", "time", "location", "group", "trainer", "type")
ANNOUNCEMENT_FIELDS = ("title", "body", "author")


def require_staff(profile: UserProfile) -> None:
    if not profile.is_staff:
        raise AccessDenied(f"Accès réservé aux coachs/admins (rôle: {profile.role})")


def require_fields(form: Mapping[str, object], fields: Sequence[str]) -> None:
    missing = [f for f in fields if not str(form.get(f) or "").strip()]
    if missing:
        raise FormError(missing)


async def create_session(repo: MockClubRepository, profile: UserProfile,
                         form: Mapping[str, str]) -> TrainingSession:
    """Valide le formulaire puis ajoute la séance (ajout seul)."""
    require_staff(profile)
    require_fields(form, SESSION_FIELDS)
    fields = {k: form[k].strip() for k in SESSION_FIELDS}
    return await repo.create_training_session(**fields)


async def publish_announcement(repo: MockClubRepository, profile: UserProfile,
                               form: Mapping[str, object]) -> Announcement:
    require_staff(profile)
    require_fields(form, ANNOUNCEMENT_FIELDS)
    return await repo.create_announcement(
        title=str(form["title"]).strip(),
        body=str(form["body"]).strip(),
        author=str(form["author"]).strip(),
        urgent=bool(form.get("urgent", False)),
    )
