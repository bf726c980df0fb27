"""Build outbound requests for enka.network."""

import logging
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from urllib.parse import quote

import httpx

BASE_URL = "https://enka.network"
LIBRARY_NAME = "enka-data-fetcher"

try:
    BUILD_ID = version(LIBRARY_NAME)
except PackageNotFoundError:
    BUILD_ID = "dev"

DEFAULT_USER_AGENT = f"{LIBRARY_NAME}/{BUILD_ID}"

logger = logging.getLogger(__name__)


def quote_segment(value) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(str(value), safe="")


@dataclass(frozen=True)
class Endpoint:
    """An API path plus query parameters.

    A parameter whose value is None is sent as a bare flag, e.g. ``?info``.
    The path is used verbatim, so identifiers must already be encoded.
    """

    path: str
    params: tuple[tuple[str, str | None], ...] = ()

    @property
    def target(self) -> str:
        if not self.params:
            return self.path
        query = "&".join(key if value is None else f"{key}={value}" for key, value in self.params)
        return f"{self.path}?{query}"


def player_endpoint(uid: int, info_only: bool = False) -> Endpoint:
    return Endpoint(f"/api/uid/{uid}/", (("info", None),) if info_only else ())


def profile_endpoint(username: str) -> Endpoint:
    return Endpoint(f"/api/profile/{username}/", (("format", "json"),))


def hoyos_endpoint(username: str) -> Endpoint:
    return Endpoint(f"/api/profile/{username}/hoyos")


def hoyo_endpoint(username: str, hash: str) -> Endpoint:
    return Endpoint(f"/api/profile/{username}/hoyos/{hash}/", (("format", "json"),))


def builds_endpoint(username: str, hash: str) -> Endpoint:
    return Endpoint(f"/api/profile/{username}/hoyos/{hash}/builds")


def build_endpoint(username: str, hash: str, build_id: int) -> Endpoint:
    return Endpoint(f"/api/profile/{username}/hoyos/{hash}/builds/{build_id}")


def build_request(endpoint: Endpoint | str, user_agent: str | None = None) -> httpx.Request:
    """Create a GET request for ``endpoint`` on the enka.network host.

    Args:
        endpoint: An Endpoint, or a path (with optional query) starting with "/".
        user_agent: User-Agent header value. Defaults to
            ``enka-data-fetcher/<version>``.
    """
    target = endpoint.target if isinstance(endpoint, Endpoint) else endpoint
    if not target.startswith("/"):
        target = f"/{target}"
    request = httpx.Request(
        "GET",
        f"{BASE_URL}{target}",
        headers={"User-Agent": user_agent or DEFAULT_USER_AGENT},
    )
    logger.debug("Built request GET %s", request.url)
    return request
