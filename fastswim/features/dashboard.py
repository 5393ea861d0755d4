# fastswim/features/dashboard.py
from __future__ import annotations
import asyncio
import logging
from typing import List, Optional
from pydantic import BaseModel

from .. import config
from ..models.club import Announcement, UserProfile
from ..models.session import TrainingSession
from ..services.club_repository import MockClubRepository

logger = logging.getLogger(__name__)


class Dashboard(BaseModel):
    upcoming: List[TrainingSession] = []
    announcements: List[Announcement] = []
    profile: Optional[UserProfile] = None
    show_admin_link: bool = False
    error: Optional[str] = None


async def load_dashboard(repo: MockClubRepository) -> Dashboard:
    """Charge séances à venir, annonces et profil en parallèle."""
    try:
        trainings, announcements, profile = await asyncio.gather(
            repo.get_upcoming_trainings(),
            repo.get_announcements(),
            repo.get_user_profile(),
        )
    except Exception as e:
        logger.exception("Erreur de chargement du tableau de bord")
        return Dashboard(error=f"Chargement impossible : {e}")

    return Dashboard(
        upcoming=trainings[:config.UPCOMING_LIMIT],
        announcements=announcements[:config.ANNOUNCEMENTS_LIMIT],
        profile=profile,
        show_admin_link=profile.is_staff,
    )
