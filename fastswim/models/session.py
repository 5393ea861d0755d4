# fastswim/models/session.py
from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
import pendulum as p

from ..utils.dates import parse_iso_date

SessionStatus = Literal["scheduled", "cancelled", "rescheduled"]


class TrainingSession(BaseModel):
    # Immuable une fois chargée ; accepte aussi les clés camelCase ("isPersonal")
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    date: str                     # "YYYY-MM-DD", comparé en chaîne (pas de fuseau)
    time: str                     # "HH:MM" ou "HH:MM:SS"
    location: str
    group: str
    trainer: str
    type: str                     # libellé libre ("Technique de nage", ...)
    is_personal: bool = Field(default=False, alias="isPersonal")
    status: SessionStatus = "scheduled"

    @property
    def calendar_date(self) -> Optional[p.Date]:
        """None si `date` n'est pas une date calendaire valide."""
        return parse_iso_date(self.date)

    @property
    def short_time(self) -> str:
        return self.time[:5]
