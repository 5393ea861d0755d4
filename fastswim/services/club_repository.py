# fastswim/services/club_repository.py
"""
Source de données du club.

Pour l'instant tout est en mémoire (données de démonstration) ; l'interface
asynchrone est celle qu'aura la future source distante.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .. import config
from ..models.club import (
    AdminStats, Announcement, AttendanceRecord, GroupStats, MakeupGroup,
    PaymentInfo, Role, TrainerNote, UserProfile,
)
from ..models.session import TrainingSession
from ..utils.dates import new_id, today_iso

logger = logging.getLogger(__name__)


class SessionSource(Protocol):
    async def get_weekly_trainings(self) -> List[TrainingSession]: ...
    async def get_monthly_trainings(self, year: int, month: int) -> List[TrainingSession]: ...
    async def get_upcoming_trainings(self) -> List[TrainingSession]: ...


# ─────────────────────────────────────────────────────────────────────────────
# Données de démonstration
# ─────────────────────────────────────────────────────────────────────────────
POOL_1 = "Bassin n°1"
POOL_2 = "Bassin n°2"
BEGINNERS = "Débutants"
INTERMEDIATE = "Niveau intermédiaire"
ADVANCED = "Confirmés"
ANNA = "Anna Ivanova"
SERGEI = "Sergueï Petrov"
MARIA = "Maria Kozlova"

_UPCOMING: List[Dict[str, Any]] = [
    dict(id="1", date="2024-08-25", time="08:00", location=POOL_1, group=BEGINNERS,
         trainer=ANNA, type="Technique de nage", status="scheduled"),
    dict(id="2", date="2024-08-25", time="10:00", location=POOL_2, group=ADVANCED,
         trainer=SERGEI, type="Travail de vitesse", is_personal=True, status="scheduled"),
    dict(id="3", date="2024-08-26", time="18:00", location=POOL_1, group=INTERMEDIATE,
         trainer=MARIA, type="Endurance", status="rescheduled"),
]

_REST_OF_WEEK: List[Dict[str, Any]] = [
    dict(id="4", date="2024-08-27", time="07:30", location=POOL_1, group=BEGINNERS,
         trainer=ANNA, type="Bases de la nage", status="scheduled"),
    dict(id="5", date="2024-08-28", time="19:00", location=POOL_2, group=ADVANCED,
         trainer=SERGEI, type="Préparation compétition", status="cancelled"),
]

_REST_OF_MONTHS: List[Dict[str, Any]] = [
    dict(id="6", date="2024-08-05", time="18:00", location=POOL_1, group=INTERMEDIATE,
         trainer=MARIA, type="Endurance", status="scheduled"),
    dict(id="7", date="2024-08-12", time="08:00", location=POOL_1, group=BEGINNERS,
         trainer=ANNA, type="Technique de nage", status="scheduled"),
    dict(id="8", date="2024-08-25", time="17:00", location=POOL_1, group=INTERMEDIATE,
         trainer=MARIA, type="Virages et coulées", status="scheduled"),
    dict(id="9", date="2024-09-02", time="18:00", location=POOL_1, group=INTERMEDIATE,
         trainer=MARIA, type="Endurance", status="scheduled"),
    dict(id="10", date="2024-09-04", time="10:00", location=POOL_2, group=ADVANCED,
         trainer=SERGEI, type="Séance individuelle", is_personal=True, status="scheduled"),
]

_ANNOUNCEMENTS: List[Dict[str, Any]] = [
    dict(id="1", title="Nouveau planning des entraînements",
         body="À partir du 1er septembre un nouveau planning entre en vigueur. "
              "Tous les changements sont visibles dans la rubrique « Planning ».",
         author="Administration du club", date="2024-08-20", urgent=True),
    dict(id="2", title="Compétition de natation",
         body="Nous invitons tous les nageurs aux championnats de la ville "
              "le 15 septembre au complexe « Monde aquatique ».",
         author=SERGEI, date="2024-08-18", urgent=False),
    dict(id="3", title="Travaux au bassin n°2",
         body="Du 25 au 30 août le bassin n°2 sera fermé pour maintenance. "
              "Toutes les séances sont déplacées au bassin n°1.",
         author="Service technique", date="2024-08-15", urgent=True),
]


class MockClubRepository:
    """
    Implémente `SessionSource` + le reste des lectures/écritures du club.
    Les créations sont en ajout seul ; aucune séance existante n'est modifiée.
    """

    def __init__(self, *, role: Role = "swimmer",
                 latency: Optional[float] = None, fail: Optional[bool] = None,
                 sessions: Optional[Sequence[TrainingSession]] = None):
        self.latency = config.MOCK_LATENCY if latency is None else latency
        self.fail = config.FAIL_FETCH if fail is None else fail
        self.role: Role = role

        if sessions is None:
            upcoming = [TrainingSession(**d) for d in _UPCOMING]
            self._upcoming_ids = [s.id for s in upcoming]
            sessions = upcoming + [TrainingSession(**d) for d in _REST_OF_WEEK + _REST_OF_MONTHS]
            self._week_ids = self._upcoming_ids + [d["id"] for d in _REST_OF_WEEK]
        else:
            self._upcoming_ids = [s.id for s in sessions]
            self._week_ids = list(self._upcoming_ids)

        self._sessions: List[TrainingSession] = list(sessions)
        self._announcements = [Announcement(**d) for d in _ANNOUNCEMENTS]
        self._notes: List[TrainerNote] = [
            TrainerNote(id="1", user_id="user1", trainer_id="trainer1", date="2024-08-22",
                        note="Absent pour cause de maladie", type="medical"),
        ]

    # ──────────────────────────────────────────────────────────────────────
    # Helpers
    # ──────────────────────────────────────────────────────────────────────
    async def _io(self, what: str) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        if self.fail:
            raise ConnectionError(f"source indisponible ({what})")

    def _next_id(self, taken: Sequence[str]) -> str:
        candidate = new_id()
        while candidate in taken:
            candidate = str(int(candidate) + 1)
        return candidate

    def _pick(self, ids: Sequence[str]) -> List[TrainingSession]:
        wanted = set(ids)
        return [s for s in self._sessions if s.id in wanted]

    # ──────────────────────────────────────────────────────────────────────
    # Séances
    # ──────────────────────────────────────────────────────────────────────
    async def get_upcoming_trainings(self) -> List[TrainingSession]:
        await self._io("upcoming")
        return self._pick(self._upcoming_ids)

    async def get_weekly_trainings(self) -> List[TrainingSession]:
        await self._io("week")
        return self._pick(self._week_ids)

    async def get_monthly_trainings(self, year: int, month: int) -> List[TrainingSession]:
        await self._io(f"{year:04d}-{month:02d}")
        prefix = f"{year:04d}-{month:02d}-"
        return [s for s in self._sessions if s.date.startswith(prefix)]

    async def create_training_session(self, **fields: Any) -> TrainingSession:
        await self._io("create session")
        session = TrainingSession(id=self._next_id([s.id for s in self._sessions]), **fields)
        self._sessions.append(session)
        self._week_ids.append(session.id)
        logger.info("Séance créée: %s %s %s", session.id, session.date, session.time)
        return session

    # ──────────────────────────────────────────────────────────────────────
    # Annonces
    # ──────────────────────────────────────────────────────────────────────
    async def get_announcements(self) -> List[Announcement]:
        await self._io("announcements")
        return list(self._announcements)

    async def create_announcement(self, **fields: Any) -> Announcement:
        await self._io("create announcement")
        fields.setdefault("date", today_iso())
        ann = Announcement(id=self._next_id([a.id for a in self._announcements]), **fields)
        self._announcements.append(ann)
        logger.info("Annonce créée: %s (%s)", ann.id, ann.title)
        return ann

    # ──────────────────────────────────────────────────────────────────────
    # Profil
    # ──────────────────────────────────────────────────────────────────────
    async def get_user_profile(self) -> UserProfile:
        await self._io("profile")
        return UserProfile(
            id="user1", name="Alexandre Mikhaïlov", email="alexander@example.com",
            group=INTERMEDIATE, trainer=MARIA, age=16, join_date="2024-01-15",
            role=self.role, phone="+7 (999) 123-45-67",
        )

    async def get_user_attendance(self) -> List[AttendanceRecord]:
        await self._io("attendance")
        return [
            AttendanceRecord(id="1", user_id="user1", session_id="1", date="2024-08-20", attended=True),
            AttendanceRecord(id="2", user_id="user1", session_id="2", date="2024-08-22",
                             attended=False, note="Malade"),
            AttendanceRecord(id="3", user_id="user1", session_id="3", date="2024-08-24", attended=True),
        ]

    async def get_makeup_groups(self) -> List[MakeupGroup]:
        await self._io("makeup groups")
        return [
            MakeupGroup(id="1", name=f"{BEGINNERS} (rattrapage)", date="2024-08-27", time="16:00",
                        location=POOL_1, trainer=ANNA, available_spots=3, total_spots=8),
            MakeupGroup(id="2", name=f"{INTERMEDIATE} (rattrapage)", date="2024-08-28", time="20:00",
                        location=POOL_2, trainer=SERGEI, available_spots=1, total_spots=6),
        ]

    async def get_trainer_notes(self) -> List[TrainerNote]:
        await self._io("notes")
        return list(self._notes)

    async def add_trainer_note(self, **fields: Any) -> TrainerNote:
        await self._io("add note")
        note = TrainerNote(id=self._next_id([n.id for n in self._notes]), **fields)
        self._notes.append(note)
        logger.info("Note ajoutée pour le coach: %s", note.id)
        return note

    async def get_payment_info(self) -> PaymentInfo:
        await self._io("payment")
        return PaymentInfo(
            qr_code="data:image/svg+xml;base64,PHN2ZyB3aWR0aD0iMjAwIiBoZWlnaHQ9IjIwMCIvPg==",
            amount=2500, description="Paiement du mois d'entraînement",
            due_date="2024-09-01", status="pending",
        )

    async def get_admin_stats(self) -> AdminStats:
        await self._io("admin stats")
        return AdminStats(
            total_members=45, active_members=42, attendance_rate=87, upcoming_payments=12,
            groups=[
                GroupStats(name=BEGINNERS, member_count=15, attendance_rate=92, trainer=ANNA),
                GroupStats(name=INTERMEDIATE, member_count=18, attendance_rate=85, trainer=MARIA),
                GroupStats(name=ADVANCED, member_count=12, attendance_rate=88, trainer=SERGEI),
            ],
        )
