"""
services/ranking_service.py
----------------------------
Leaderboard of completed /info lookups per user.
"""

from typing import Optional

from models.user import UserRecord
from repositories.user_repo import UserRepository


class RankingService:
    """Builds the /ranking leaderboard."""

    def __init__(self, user_repo: Optional[UserRepository] = None):
        self.user_repo = user_repo or UserRepository()

    def get_ranking(self) -> list[UserRecord]:
        """Users with a username, most successes first (ties keep insertion order)."""
        users = [u for u in self.user_repo.get_all() if u.username]
        return sorted(users, key=lambda u: u.success, reverse=True)

    def format_ranking(self) -> str:
        ranking = self.get_ranking()
        lines = ["🏆 RANKING OUTPUT SUCCESS", ""]
        if not ranking:
            lines.append("Belum ada data.")
            return "\n".join(lines)

        lines.extend(f"{i}. {user}" for i, user in enumerate(ranking, start=1))
        lines.append("")
        lines.append(f"Total: {self.user_repo.get_total_success()}x")
        return "\n".join(lines)
