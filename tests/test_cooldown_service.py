"""Tests for the per-user /info cooldown."""

from __future__ import annotations

import json

from conftest import USER_ID


def test_never_seen_user_has_no_cooldown(cooldown_service):
    assert cooldown_service.remaining(USER_ID) == 0


def test_remaining_counts_down(cooldown_service, clock):
    cooldown_service.touch(USER_ID)
    assert cooldown_service.remaining(USER_ID) == 180
    clock.advance(60)
    assert cooldown_service.remaining(USER_ID) == 120


def test_expires_exactly_at_window(cooldown_service, clock):
    cooldown_service.touch(USER_ID)
    clock.advance(179)
    assert cooldown_service.remaining(USER_ID) == 1
    clock.advance(1)
    assert cooldown_service.remaining(USER_ID) == 0


def test_cooldown_is_per_user(cooldown_service):
    cooldown_service.touch(USER_ID)
    assert cooldown_service.remaining(USER_ID + 1) == 0


def test_touch_persists_whole_file(cooldown_service, cooldown_store, clock):
    cooldown_service.touch(USER_ID)
    on_disk = json.loads(cooldown_store.path.read_text(encoding="utf-8"))
    assert on_disk == {str(USER_ID): int(clock.now)}
