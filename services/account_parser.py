"""
services/account_parser.py
---------------------------
Best-effort field extraction from the lookup page and report formatting.

The page mixes a PHP print_r() dump:
    [userId] => 643461181
    [username] => Some+Name
with an HTML table (creation date in the 4th cell) and a bind list:
    <li>Moonton : linked.</li>
Every pattern is applied once; a field that does not match gets the placeholder.
"""

import re

from models.account_info import PLACEHOLDER, AccountInfo

_USER_ID_RE = re.compile(r"\[userId\] => (.*?)\s")
_SERVER_ID_RE = re.compile(r"\[serverId\] => (.*?)\s")
_USERNAME_RE = re.compile(r"\[username\] => (.*?)\s")
_REGION_RE = re.compile(r"\[region\] => (.*?)\s")
_DEVICE_RE = re.compile(r"Android:\s*(\d+)\s*\|\s*iOS:\s*(\d+)")
_CREATED_RE = re.compile(
    r"<td>\d+</td>\s*<td>\d+</td>\s*<td>.*?</td>\s*<td>(.*?)</td>", re.DOTALL
)
_BIND_RE = re.compile(r"<li>(.*?) : (.*?)\.?</li>")

EMPTY_BIND = "empty."


def _first_group(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group(1) if match else PLACEHOLDER


def parse_binds(text: str) -> dict[str, str]:
    """Linked services in page order; blank or 'empty' values become 'empty.'."""
    binds: dict[str, str] = {}
    for match in _BIND_RE.finditer(text):
        service = match.group(1).strip()
        value = match.group(2).strip()
        binds[service] = value if value and value.lower() != "empty" else EMPTY_BIND
    return binds


def parse_account_info(text: str) -> AccountInfo:
    """Extract every known field from a lookup page."""
    info = AccountInfo(
        user_id=_first_group(_USER_ID_RE, text),
        server_id=_first_group(_SERVER_ID_RE, text),
        creation_date=_first_group(_CREATED_RE, text),
        region=_first_group(_REGION_RE, text),
        binds=parse_binds(text),
    )

    username = _USERNAME_RE.search(text)
    if username:
        info.nickname = username.group(1).replace("+", " ")

    devices = _DEVICE_RE.search(text)
    if devices:
        info.android_logins, info.ios_logins = devices.group(1), devices.group(2)

    return info


def format_report(info: AccountInfo) -> str:
    """Render the plain-text report sent back to the user."""
    lines = [
        f"✧ ID: {info.user_id}",
        f"✧ Server: {info.server_id}",
        f"✧ Nickname: {info.nickname}",
        f"✧ Creation Date: {info.creation_date}",
        f"✧ REGION : {info.region}",
        "",
        "BIND ACCOUNT INFO:",
    ]
    lines.extend(f"✧ {service} : {value}" for service, value in info.binds.items())
    lines.append("")
    lines.append(f"Device Login Android: {info.android_logins} | iOS: {info.ios_logins}")
    return "\n".join(lines)
