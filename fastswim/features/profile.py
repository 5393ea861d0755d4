# fastswim/features/profile.py
from __future__ import annotations
import asyncio
import math
from typing import List, Optional, Sequence
from pydantic import BaseModel

from ..errors import FormError
from ..models.club import (
    AdminStats, AttendanceRecord, MakeupGroup, PaymentInfo, TrainerNote, UserProfile,
)
from ..services.club_repository import MockClubRepository
from ..utils.dates import today_iso


class ProfilePage(BaseModel):
    profile: UserProfile
    attendance: List[AttendanceRecord] = []
    attendance_rate: int = 0
    makeup_groups: List[MakeupGroup] = []
    payment: Optional[PaymentInfo] = None
    admin_stats: Optional[AdminStats] = None     # tenu aux coachs/admins


def attendance_rate(records: Sequence[AttendanceRecord]) -> int:
    """% de présence arrondi ; 0 si aucun enregistrement."""
    if not records:
        return 0
    # demi arrondi vers le haut (12.5 -> 13), contrairement à round()
    return math.floor(sum(1 for r in records if r.attended) / len(records) * 100 + 0.5)


async def load_profile_page(repo: MockClubRepository) -> ProfilePage:
    profile, attendance, makeup, payment = await asyncio.gather(
        repo.get_user_profile(),
        repo.get_user_attendance(),
        repo.get_makeup_groups(),
        repo.get_payment_info(),
    )
    stats = await repo.get_admin_stats() if profile.is_staff else None
    return ProfilePage(
        profile=profile,
        attendance=attendance,
        attendance_rate=attendance_rate(attendance),
        makeup_groups=makeup,
        payment=payment,
        admin_stats=stats,
    )


async def send_trainer_note(repo: MockClubRepository, profile: UserProfile, text: str) -> TrainerNote:
    if not text.strip():
        raise FormError(["note"])
    return await repo.add_trainer_note(
        user_id=profile.id, trainer_id=profile.id, date=today_iso(), note=text, type="info",
    )
