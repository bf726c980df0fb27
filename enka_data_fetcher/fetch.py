"""Fetch functions for the enka.network API.

Each function makes exactly one GET request and either returns the decoded
record or raises an ``EnkaError``. Nothing is retried, cached or throttled;
an HTTP 429 surfaces as ``HttpStatusError`` for the caller to handle.

Pass a shared ``httpx.Client`` as ``http_client`` to reuse connections;
calls are safe to run concurrently against one client. Without one, a
short-lived client that follows redirects is opened for the single request.
"""

import logging
from typing import Any

import httpx

from .decoder import decode
from .errors import UNREADABLE_BODY, HttpStatusError, RequestSubmissionError, status_message
from .models import AvatarInfo, Build, Builds, Hoyo, Hoyos, PlayerInfoRecord, PlayerRecord, ProfileInfo
from .request import (
    Endpoint,
    build_endpoint,
    build_request,
    builds_endpoint,
    hoyo_endpoint,
    hoyos_endpoint,
    player_endpoint,
    profile_endpoint,
)

logger = logging.getLogger(__name__)


def _send(client: httpx.Client, request: httpx.Request) -> httpx.Response:
    try:
        return client.send(request)
    except httpx.HTTPError as exc:
        raise RequestSubmissionError(str(request.url), exc) from exc


def _error_body(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.StreamError, httpx.HTTPError, LookupError, UnicodeDecodeError):
        return UNREADABLE_BODY


def _handle(response: httpx.Response, target: Any) -> Any:
    logger.debug("HTTP %s for GET %s", response.status_code, response.request.url)
    if response.is_success:
        return decode(response.content, target)

    message = status_message(response.status_code, response.reason_phrase)
    body = _error_body(response)
    logger.warning("HTTP %s - %s\nResponse Body: %s", response.status_code, message, body)
    raise HttpStatusError(response.status_code, message, body)


def fetch_json(
    endpoint: Endpoint | str,
    target: Any,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> Any:
    """GET ``endpoint`` and decode the body into ``target``.

    Raises:
        RequestSubmissionError: The transport failed.
        HttpStatusError: Non-2xx status.
        DecodeError: The body did not decode (see its subclasses).
    """
    request = build_request(endpoint, user_agent)
    if http_client is not None:
        return _handle(_send(http_client, request), target)

    with httpx.Client(follow_redirects=True) as client:
        response = _send(client, request)
    return _handle(response, target)


def get_player(
    uid: int,
    info_only: bool = False,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> tuple[PlayerInfoRecord, list[AvatarInfo] | None]:
    """Fetch a player by in-game UID.

    ``info_only`` requests the lighter ``?info`` envelope, in which case the
    avatar list is always None. Only the envelope matching the flag is tried.
    """
    endpoint = player_endpoint(uid, info_only)
    if info_only:
        return fetch_json(endpoint, PlayerInfoRecord, user_agent, http_client), None
    record: PlayerRecord = fetch_json(endpoint, PlayerRecord, user_agent, http_client)
    return record.split()


def get_profile(
    username: str,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> ProfileInfo:
    return fetch_json(profile_endpoint(username), ProfileInfo, user_agent, http_client)


def get_hoyos(
    username: str,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> dict[str, Hoyo]:
    """Fetch every game account linked to a profile, keyed by hoyo hash."""
    return fetch_json(hoyos_endpoint(username), Hoyos, user_agent, http_client)


def get_hoyo(
    username: str,
    hash: str,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> Hoyo:
    return fetch_json(hoyo_endpoint(username, hash), Hoyo, user_agent, http_client)


def get_builds(
    username: str,
    hash: str,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> dict[int, list[Build]]:
    """Fetch saved builds for a hoyo, keyed by avatar id."""
    return fetch_json(builds_endpoint(username, hash), Builds, user_agent, http_client)


def get_build(
    username: str,
    hash: str,
    build_id: int,
    user_agent: str | None = None,
    http_client: httpx.Client | None = None,
) -> Build:
    return fetch_json(build_endpoint(username, hash, build_id), Build, user_agent, http_client)
