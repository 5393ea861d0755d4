# fastswim/models/settings.py
"""
Réglages de l'application sous forme de structure imbriquée explicite.

Chaque section est un modèle figé ; une modification produit une *copie*
(`settings.with_notifications(sound=False)`) validée par pydantic, au lieu
d'un chemin texte du type "notifications.sound".
"""
from __future__ import annotations
from typing import Any, Literal, Type, TypeVar
from pydantic import BaseModel, ConfigDict, Field

_S = TypeVar("_S", bound=BaseModel)


class NotificationSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    training: bool = True
    announcements: bool = True
    payments: bool = True
    reminders: bool = True
    sound: bool = True
    vibration: bool = True


class AppearanceSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    theme: Literal["light", "dark", "system"] = "system"
    language: Literal["ru", "en", "fr"] = "ru"


class PrivacySettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    profile_visible: bool = True
    share_stats: bool = False


class AppBehaviourSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    auto_sync: bool = True
    offline_mode: bool = False
    sound_volume: int = Field(default=80, ge=0, le=100)


def _patched(section: _S, model: Type[_S], changes: dict[str, Any]) -> _S:
    # model_validate (et non model_copy) pour refuser clés inconnues / types faux
    return model.model_validate({**section.model_dump(), **changes})


class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    notifications: NotificationSettings = NotificationSettings()
    appearance: AppearanceSettings = AppearanceSettings()
    privacy: PrivacySettings = PrivacySettings()
    app: AppBehaviourSettings = AppBehaviourSettings()

    def with_notifications(self, **changes: Any) -> "AppSettings":
        return self.model_copy(update={
            "notifications": _patched(self.notifications, NotificationSettings, changes)})

    def with_appearance(self, **changes: Any) -> "AppSettings":
        return self.model_copy(update={
            "appearance": _patched(self.appearance, AppearanceSettings, changes)})

    def with_privacy(self, **changes: Any) -> "AppSettings":
        return self.model_copy(update={
            "privacy": _patched(self.privacy, PrivacySettings, changes)})

    def with_app(self, **changes: Any) -> "AppSettings":
        return self.model_copy(update={
            "app": _patched(self.app, AppBehaviourSettings, changes)})


class SettingsDraft:
    """Brouillon d'édition : suit les modifications non enregistrées."""

    def __init__(self, saved: AppSettings | None = None):
        self.saved = saved or AppSettings()
        self.current = self.saved

    @property
    def has_changes(self) -> bool:
        return self.current != self.saved

    def apply(self, settings: AppSettings) -> AppSettings:
        self.current = settings
        return settings

    def reset_to_defaults(self) -> AppSettings:
        return self.apply(AppSettings())

    def commit(self) -> AppSettings:
        self.saved = self.current
        return self.saved
