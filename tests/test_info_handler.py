"""Tests for the /info command flow end to end through the handler."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from telegram import ChatMember

from conftest import ADMIN_ID, CHATS, USER_ID, make_context, make_member, make_update, sent_texts
from handlers import info_handler
from services.scraper_client import ScraperError

ARGS = ["643461181", "8554"]


@pytest.fixture(autouse=True)
def wire_services(monkeypatch, access_service, info_service):
    monkeypatch.setattr(info_handler, "access_service", access_service)
    monkeypatch.setattr(info_handler, "info_service", info_service)


@pytest.mark.asyncio
async def test_successful_lookup_sends_report_and_removes_loading(bot):
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    texts = sent_texts(update)
    assert texts[0] == info_handler.LOADING_TEXT
    assert texts[1].startswith("✧ ID: 643461181\n")
    loading = update.effective_chat.send_message.return_value
    loading.delete.assert_awaited_once()

    markup = update.effective_chat.send_message.call_args.kwargs["reply_markup"]
    button = markup.inline_keyboard[0][0]
    assert button.text == "Stok Admin Disini"


@pytest.mark.asyncio
async def test_lookup_uses_both_arguments(bot, scraper_client):
    await info_handler.info_command(make_update(), make_context(bot, ARGS))
    scraper_client.fetch.assert_awaited_once_with("643461181", "8554")


@pytest.mark.asyncio
async def test_success_counter_increments_by_one_per_completed_call(bot, user_repo, clock):
    await info_handler.info_command(make_update(), make_context(bot, ARGS))
    assert user_repo.get(USER_ID).success == 1

    clock.advance(180)
    await info_handler.info_command(make_update(), make_context(bot, ARGS))
    assert user_repo.get(USER_ID).success == 2
    assert user_repo.get_total_success() == 2


@pytest.mark.asyncio
async def test_cooldown_rejection_reports_wait_and_does_not_count(bot, user_repo, clock, scraper_client):
    await info_handler.info_command(make_update(), make_context(bot, ARGS))
    clock.advance(100)

    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update) == ["⏳ Cooldown 80 second."]
    assert scraper_client.fetch.await_count == 1
    assert user_repo.get(USER_ID).success == 1


@pytest.mark.asyncio
async def test_non_member_gets_join_buttons(bot, user_repo):
    bot.get_chat_member = AsyncMock(return_value=make_member(ChatMember.LEFT))
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update) == [info_handler.NOT_JOINED_TEXT]
    markup = update.effective_chat.send_message.call_args.kwargs["reply_markup"]
    urls = [row[0].url for row in markup.inline_keyboard]
    assert urls == [f"https://t.me/{chat.lstrip('@')}" for chat in CHATS]
    assert markup.inline_keyboard[0][0].text == "📢 Join somechannel"
    assert user_repo.get(USER_ID) is None


@pytest.mark.asyncio
async def test_user_without_username_gets_tutorial(bot):
    update = make_update(username=None)
    await info_handler.info_command(update, make_context(bot, ARGS))
    assert sent_texts(update) == [info_handler.USERNAME_TUTORIAL]


@pytest.mark.asyncio
async def test_missing_server_id_gets_format_hint(bot, scraper_client):
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ["643461181"]))
    assert sent_texts(update) == [info_handler.BAD_FORMAT_TEXT]
    scraper_client.fetch.assert_not_called()


@pytest.mark.asyncio
async def test_disabled_feature_reply_has_stock_button(bot, feature_repo):
    feature_repo.set_enabled("info", False)
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update) == [info_handler.DISABLED_TEXT]
    markup = update.effective_chat.send_message.call_args.kwargs["reply_markup"]
    assert markup.inline_keyboard[0][0].text == "Stok Admin Disini"


@pytest.mark.asyncio
async def test_admin_lookup_works_while_disabled_and_is_counted(bot, feature_repo, user_repo):
    feature_repo.set_enabled("info", False)
    update = make_update(ADMIN_ID, username="boss")
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update)[1].startswith("✧ ID:")
    assert user_repo.get(ADMIN_ID).success == 1


@pytest.mark.asyncio
async def test_fetch_failure_apologises_and_does_not_count(bot, scraper_client, user_repo):
    scraper_client.fetch = AsyncMock(side_effect=ScraperError("timeout"))
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update) == [info_handler.LOADING_TEXT, info_handler.FAILURE_TEXT]
    update.effective_chat.send_message.return_value.delete.assert_awaited_once()
    assert user_repo.get(USER_ID) is None


@pytest.mark.asyncio
async def test_unexpected_error_is_contained(bot, scraper_client, user_repo):
    scraper_client.fetch = AsyncMock(side_effect=RuntimeError("boom"))
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))

    assert sent_texts(update)[-1] == info_handler.FAILURE_TEXT
    assert user_repo.get(USER_ID) is None


@pytest.mark.asyncio
async def test_save_failure_after_reply_is_only_logged(bot, database_store, monkeypatch):
    def broken_save():
        raise OSError("disk full")

    monkeypatch.setattr(database_store, "save", broken_save)
    update = make_update()
    await info_handler.info_command(update, make_context(bot, ARGS))
    assert sent_texts(update)[1].startswith("✧ ID:")


def test_join_buttons_strip_at_sign():
    assert info_handler.join_buttons(["@chan", "grp"]) == [
        ("📢 Join chan", "https://t.me/chan"),
        ("📢 Join grp", "https://t.me/grp"),
    ]
