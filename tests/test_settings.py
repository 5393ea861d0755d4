import pytest
from pydantic import ValidationError

from fastswim.models.settings import AppSettings, SettingsDraft


def test_updates_return_a_new_copy():
    base = AppSettings()
    muted = base.with_notifications(sound=False)

    assert base.notifications.sound is True
    assert muted.notifications.sound is False
    assert muted.appearance == base.appearance


def test_unknown_keys_and_out_of_range_values_are_rejected():
    base = AppSettings()

    with pytest.raises(ValidationError):
        base.with_notifications(snd=False)
    with pytest.raises(ValidationError):
        base.with_app(sound_volume=150)
    with pytest.raises(ValidationError):
        base.with_appearance(theme="neon")


def test_sections_are_frozen():
    with pytest.raises(ValidationError):
        AppSettings().privacy.share_stats = True


def test_draft_tracks_unsaved_changes():
    draft = SettingsDraft()
    assert not draft.has_changes

    draft.apply(draft.current.with_appearance(theme="dark", language="fr"))
    assert draft.has_changes

    saved = draft.commit()
    assert saved.appearance.theme == "dark"
    assert not draft.has_changes

    draft.reset_to_defaults()
    assert draft.current == AppSettings()
    assert draft.has_changes
