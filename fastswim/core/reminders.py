from __future__ import annotations
import logging
from typing import Callable, Dict, Optional
from pydantic import BaseModel, ConfigDict

from ..models.session import TrainingSession

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    variant: str = "default"      # "default" | "destructive"


NotificationSink = Callable[[Notification], None]


class ReminderStore:
    """
    État des rappels d'UNE vue montée : id de séance -> bool.
    Absence = désactivé ; rien n'est persisté.
    """

    def __init__(self, notify: Optional[NotificationSink] = None):
        self._state: Dict[str, bool] = {}
        self._notify = notify

    def get(self, session_id: str) -> bool:
        return self._state.get(session_id, False)

    def toggle(self, session_id: str, session: Optional[TrainingSession] = None) -> bool:
        new_state = not self.get(session_id)
        self._state[session_id] = new_state
        logger.debug("Rappel %s -> %s", session_id, new_state)

        # la bascule est inconditionnelle, la notification réservée aux séances perso
        if session is not None and session.is_personal and self._notify:
            self._notify(Notification(
                title="Rappel activé" if new_state else "Rappel désactivé",
                description=f"Séance personnelle {session.date} à {session.short_time}",
            ))
        return new_state
