"""
models/account_info.py
----------------------
Domain model for the account metadata scraped from the lookup endpoint.
"""

from dataclasses import dataclass, field

PLACEHOLDER = "-"


@dataclass
class AccountInfo:
    """
    Fields extracted from one scraper response.
    Any field the response did not contain holds PLACEHOLDER,
    device counts default to "0".

    Attributes:
        user_id: Game account ID as echoed by the endpoint.
        server_id: Game server (zone) ID.
        nickname: In-game name.
        creation_date: Account creation date, as printed by the endpoint.
        region: Account region.
        binds: Linked third-party services, in page order (service -> value).
        android_logins: Number of Android device logins.
        ios_logins: Number of iOS device logins.
    """
    user_id: str = PLACEHOLDER
    server_id: str = PLACEHOLDER
    nickname: str = PLACEHOLDER
    creation_date: str = PLACEHOLDER
    region: str = PLACEHOLDER
    binds: dict[str, str] = field(default_factory=dict)
    android_logins: str = "0"
    ios_logins: str = "0"
