"""Reusable handle binding a User-Agent and an httpx client to the fetch functions."""

import threading
from dataclasses import dataclass

import httpx

from . import fetch
from .models import AvatarInfo, Build, Hoyo, PlayerInfoRecord, ProfileInfo
from .request import DEFAULT_USER_AGENT
from .settings import get_settings


@dataclass(frozen=True)
class EnkaClient:
    """Both fields are optional and passed unchanged to every call."""

    user_agent: str | None = None
    http_client: httpx.Client | None = None

    def get_player(
        self, uid: int, info_only: bool = False
    ) -> tuple[PlayerInfoRecord, list[AvatarInfo] | None]:
        return fetch.get_player(uid, info_only, self.user_agent, self.http_client)

    def get_profile(self, username: str) -> ProfileInfo:
        return fetch.get_profile(username, self.user_agent, self.http_client)

    def get_hoyos(self, username: str) -> dict[str, Hoyo]:
        return fetch.get_hoyos(username, self.user_agent, self.http_client)

    def get_hoyo(self, username: str, hash: str) -> Hoyo:
        return fetch.get_hoyo(username, hash, self.user_agent, self.http_client)

    def get_builds(self, username: str, hash: str) -> dict[int, list[Build]]:
        return fetch.get_builds(username, hash, self.user_agent, self.http_client)

    def get_build(self, username: str, hash: str, build_id: int) -> Build:
        return fetch.get_build(username, hash, build_id, self.user_agent, self.http_client)

    def close(self):
        if self.http_client is not None:
            self.http_client.close()


def create_client() -> EnkaClient:
    """Build an EnkaClient with a pooled httpx client configured from settings."""
    settings = get_settings()
    return EnkaClient(
        user_agent=settings.user_agent or DEFAULT_USER_AGENT,
        http_client=httpx.Client(
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        ),
    )


_client: EnkaClient | None = None
_client_lock = threading.Lock()


def get_client() -> EnkaClient:
    """Get or create the shared EnkaClient."""
    global _client
    with _client_lock:
        if _client is None:
            _client = create_client()
        return _client
