# fastswim/core/scopes.py
"""Fenêtres de temps affichables : jour, semaine (décalage) ou mois."""
from __future__ import annotations
from typing import Annotated, Literal, Union
import pendulum as p
from pydantic import BaseModel, ConfigDict, Field

from .. import config


class DayScope(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["day"] = "day"
    date: p.Date

    def describe(self) -> str:
        return self.date.to_date_string()


class WeekScope(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["week"] = "week"
    offset: int = 0

    def shift(self, delta: int) -> "WeekScope":
        return WeekScope(offset=self.offset + delta)

    def describe(self) -> str:
        return f"semaine {self.offset:+d}"


class MonthScope(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["month"] = "month"
    year: int
    month: int = Field(ge=1, le=12)

    @classmethod
    def containing(cls, d: p.Date) -> "MonthScope":
        return cls(year=d.year, month=d.month)

    def shift(self, months: int) -> "MonthScope":
        return MonthScope.containing(p.date(self.year, self.month, 1).add(months=months))

    @property
    def title(self) -> str:
        return p.date(self.year, self.month, 1).format("MMMM YYYY", locale=config.LOCALE).capitalize()

    def describe(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


Scope = Annotated[Union[DayScope, WeekScope, MonthScope], Field(discriminator="kind")]
