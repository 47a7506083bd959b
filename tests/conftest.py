"""Shared test fixtures for the account info bot."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import ChatMember

from db.json_store import JsonStore
from db.stores import default_database
from repositories.cooldown_repo import CooldownRepository
from repositories.feature_repo import FeatureRepository
from repositories.user_repo import UserRepository
from services.access_service import AccessService
from services.cooldown_service import CooldownService
from services.info_service import InfoService

ADMIN_ID = 1000
USER_ID = 2000
CHATS = ["@somechannel", "@somegroup"]

SAMPLE_PAGE = """<html><body><pre>Array
(
    [userId] => 643461181
    [serverId] => 8554
    [username] => Ncus+Gaming+Pro
    [region] => ID
)
</pre>
<table>
<tr><th>No</th><th>ID</th><th>Name</th><th>Created</th></tr>
<tr>
  <td>1</td>
  <td>643461181</td>
  <td>Ncus Gaming Pro</td>
  <td>2019-05-12 08:30:00</td>
</tr>
</table>
<ul>
<li>Moonton : linked.</li>
<li>Facebook : empty.</li>
<li>VK : </li>
<li>Google Play : ncus@example.com</li>
</ul>
<p>Android: 3 | iOS: 1</p>
</body></html>
"""


class FakeClock:
    """Manually advanced unix clock."""

    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── Storage ──────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def admin_ids(monkeypatch):
    """Pin the admin list so tests never depend on the environment."""
    monkeypatch.setattr("security.auth.ADMIN_IDS", [ADMIN_ID])


@pytest.fixture
def database_store(tmp_path) -> JsonStore:
    return JsonStore(tmp_path / "database.json", default_database)


@pytest.fixture
def cooldown_store(tmp_path) -> JsonStore:
    return JsonStore(tmp_path / "cooldown.json", dict)


@pytest.fixture
def user_repo(database_store) -> UserRepository:
    return UserRepository(database_store)


@pytest.fixture
def feature_repo(database_store) -> FeatureRepository:
    return FeatureRepository(database_store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cooldown_service(cooldown_store, clock) -> CooldownService:
    return CooldownService(CooldownRepository(cooldown_store), seconds=180, clock=clock)


@pytest.fixture
def access_service(cooldown_service, feature_repo) -> AccessService:
    return AccessService(cooldown_service, feature_repo, required_chats=CHATS)


@pytest.fixture
def scraper_client() -> MagicMock:
    client = MagicMock()
    client.fetch = AsyncMock(return_value=SAMPLE_PAGE)
    return client


@pytest.fixture
def info_service(scraper_client, user_repo) -> InfoService:
    return InfoService(scraper_client, user_repo)


# ── Telegram fakes ───────────────────────────────────────────

def make_member(status: str = ChatMember.MEMBER) -> MagicMock:
    member = MagicMock()
    member.status = status
    return member


@pytest.fixture
def bot() -> MagicMock:
    """Bot whose get_chat_member reports every user as a member."""
    fake = MagicMock()
    fake.get_chat_member = AsyncMock(return_value=make_member())
    return fake


def make_user(user_id: int = USER_ID, username: str | None = "alice") -> MagicMock:
    user = MagicMock()
    user.id = user_id
    user.username = username
    return user


def make_update(user_id: int = USER_ID, username: str | None = "alice", text: str = "/info") -> MagicMock:
    """Update whose chat records every message sent through send_message."""
    update = MagicMock()
    update.effective_user = make_user(user_id, username)
    update.message.text = text

    sent = MagicMock()
    sent.message_id = 42
    sent.delete = AsyncMock()
    update.effective_chat.id = user_id
    update.effective_chat.send_message = AsyncMock(return_value=sent)
    return update


def make_context(bot: MagicMock, args: list[str] | None = None) -> MagicMock:
    context = MagicMock()
    context.bot = bot
    context.args = args if args is not None else []
    return context


def sent_texts(update: MagicMock) -> list[str]:
    """Texts passed to send_message, in order."""
    return [c.args[0] for c in update.effective_chat.send_message.call_args_list]
