"""Typed client for the enka.network API.

Fetches players, profiles, linked game accounts ("hoyos") and saved builds,
decoding responses into strict pydantic models.
"""

from .cli import main
from .client import EnkaClient, get_client
from .errors import (
    DecodeError,
    EnkaError,
    HttpStatusError,
    JsonParseError,
    RequestSubmissionError,
    StructuralDecodeError,
    UnknownVariantError,
)
from .fetch import get_build, get_builds, get_hoyo, get_hoyos, get_player, get_profile
from .models import Build, EquipReliquary, EquipWeapon, GenshinHoyo, OtherHoyo, PlayerInfoRecord, ProfileInfo

__all__ = [
    "main",
    "EnkaClient",
    "get_client",
    "get_player",
    "get_profile",
    "get_hoyos",
    "get_hoyo",
    "get_builds",
    "get_build",
    "EnkaError",
    "RequestSubmissionError",
    "HttpStatusError",
    "DecodeError",
    "JsonParseError",
    "StructuralDecodeError",
    "UnknownVariantError",
    "Build",
    "EquipReliquary",
    "EquipWeapon",
    "GenshinHoyo",
    "OtherHoyo",
    "PlayerInfoRecord",
    "ProfileInfo",
]

if __name__ == "__main__":
    main()
