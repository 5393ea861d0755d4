# fastswim/models/club.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional, get_args

Role = Literal["swimmer", "trainer", "admin"]
ROLES = get_args(Role)


class Announcement(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    body: str
    author: str
    date: str                     # "YYYY-MM-DD"
    urgent: bool = False


class UserProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    email: str
    group: str
    trainer: str
    age: int
    join_date: str = Field(alias="joinDate")
    role: Role = "swimmer"
    phone: Optional[str] = None

    @property
    def is_staff(self) -> bool:
        return self.role in {"trainer", "admin"}


class AttendanceRecord(BaseModel):
    id: str
    user_id: str
    session_id: str
    date: str
    attended: bool
    note: Optional[str] = None


class MakeupGroup(BaseModel):
    id: str
    name: str
    date: str
    time: str
    location: str
    trainer: str
    available_spots: int
    total_spots: int


class TrainerNote(BaseModel):
    id: str
    user_id: str
    trainer_id: str
    date: str
    note: str
    type: Literal["info", "medical", "absence"] = "info"


class PaymentInfo(BaseModel):
    qr_code: str
    amount: int
    description: str
    due_date: str
    status: Literal["pending", "paid", "overdue"] = "pending"


class GroupStats(BaseModel):
    name: str
    member_count: int
    attendance_rate: int          # %
    trainer: str


class AdminStats(BaseModel):
    total_members: int
    active_members: int
    attendance_rate: int          # %
    upcoming_payments: int
    groups: List[GroupStats] = []
