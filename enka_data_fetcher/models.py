"""Data models for enka.network responses (Genshin Impact).

Field names follow the service's JSON; most objects use camelCase keys,
while profile, hoyo and build objects use snake_case. Every model rejects
keys it does not declare and values of the wrong JSON type, so that upstream
schema changes fail loudly.
"""

from enum import Enum, IntEnum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, RootModel, model_validator
from pydantic.alias_generators import to_camel

from .variants import VariantResolver

AvatarId = int
CostumeId = int
ItemId = int
NameCardId = int
ProfilePictureId = int
SkillId = int
TalentId = int
Hash = str

# Older builds stored text map hashes as integers.
TextMapHash = Union[str, int]


class StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid", strict=True, alias_generator=to_camel, populate_by_name=True
    )


class Prop(IntEnum):
    """Avatar property codes that appear in ``propMap``."""

    XP = 1001
    ASCENSION = 1002
    SATIATION_VAL = 1003
    SATIATION_PENALTY_TIME = 1004
    LEVEL = 4001
    MAX_STAMINA = 10010
    MAX_DIVE_STAMINA = 10049


def _prop_key(value: Any) -> Prop:
    return Prop(int(value))


# Map keys arrive as JSON object keys, i.e. numeric strings.
IntKey = Annotated[int, BeforeValidator(int)]
PropKey = Annotated[Prop, BeforeValidator(_prop_key)]


class Region(str, Enum):
    INTERNAL = ""
    CELESTIA = "CN"
    IRMINSUL = "B"
    AMERICA = "NA"
    EUROPE = "EU"
    ASIA = "ASIA"
    TAIWAN_HONG_KONG_MACAO = "TW"


# -- Player --------------------------------------------------------------------


class ProfilePicture(CamelModel):
    """Either an avatar-based picture or a standalone picture id, never both."""

    avatar_id: Optional[AvatarId] = None
    id: Optional[ProfilePictureId] = None

    @model_validator(mode="after")
    def check_exactly_one(self):
        if (self.avatar_id is None) == (self.id is None):
            raise ValueError("profilePicture needs exactly one of avatarId or id")
        return self


class ShowAvatarInfo(CamelModel):
    avatar_id: AvatarId
    level: int
    energy_type: Optional[int] = None
    costume_id: Optional[CostumeId] = None
    talent_level: Optional[int] = None


class PlayerInfo(CamelModel):
    nickname: str
    level: int
    signature: Optional[str] = None
    world_level: Optional[int] = None
    name_card_id: NameCardId
    finish_achievement_num: int
    tower_floor_index: Optional[int] = None
    tower_level_index: Optional[int] = None
    tower_star_index: Optional[int] = None
    theater_mode_index: Optional[int] = None
    theater_act_index: Optional[int] = None
    theater_star_index: Optional[int] = None
    is_show_avatar_talent: Optional[bool] = None
    show_avatar_info_list: Optional[list[ShowAvatarInfo]] = None
    show_name_card_id_list: Optional[list[NameCardId]] = None
    profile_picture: ProfilePicture
    fetter_count: Optional[int] = None


# -- Equipment -----------------------------------------------------------------


class MainStat(CamelModel):
    main_prop_id: str
    stat_value: float


class SubStat(CamelModel):
    append_prop_id: str
    stat_value: float


WeaponStat = SubStat


class Weapon(CamelModel):
    level: int
    promote_level: Optional[int] = None
    affix_map: Optional[dict[IntKey, int]] = None


class Reliquary(CamelModel):
    level: int
    exp: Optional[int] = None
    main_prop_id: int
    append_prop_id_list: Optional[list[int]] = None


class FlatWeapon(CamelModel):
    name_text_map_hash: TextMapHash
    rank_level: int
    item_type: str
    icon: str
    weapon_stats: list[WeaponStat]


class FlatReliquary(CamelModel):
    name_text_map_hash: TextMapHash
    set_name_text_map_hash: TextMapHash
    rank_level: int
    reliquary_mainstat: MainStat
    reliquary_substats: Optional[list[SubStat]] = None
    item_type: str
    icon: str
    equip_type: str


class EquipWeapon(CamelModel):
    item_id: ItemId
    weapon: Weapon
    flat: FlatWeapon


class EquipReliquary(CamelModel):
    item_id: ItemId
    reliquary: Reliquary
    flat: FlatReliquary


EQUIP_RESOLVER = VariantResolver(
    "Equip",
    path=("flat", "itemType"),
    variants={
        "ITEM_WEAPON": EquipWeapon,
        "ITEM_RELIQUARY": EquipReliquary,
    },
)

Equip = EQUIP_RESOLVER.union()


# -- Avatars -------------------------------------------------------------------


class PropMap(StrictModel):
    type: Prop
    ival: Optional[str] = None
    val: Optional[str] = None


class AvatarInfoFetterInfo(CamelModel):
    exp_level: int


class AvatarInfo(CamelModel):
    avatar_id: AvatarId
    prop_map: dict[PropKey, PropMap]
    talent_id_list: Optional[list[TalentId]] = None
    fight_prop_map: dict[IntKey, float]
    skill_depot_id: SkillId
    inherent_proud_skill_list: list[SkillId]
    skill_level_map: dict[IntKey, int]
    proud_skill_extra_level_map: Optional[dict[IntKey, int]] = None
    equip_list: list[Equip]
    fetter_info: Optional[AvatarInfoFetterInfo] = None
    costume_id: Optional[CostumeId] = None


# -- Profile -------------------------------------------------------------------


class Profile(StrictModel):
    bio: str
    level: int
    signup_state: Optional[int] = None  # no longer sent for newer accounts
    avatar: Optional[str] = None
    image_url: Optional[str] = None  # Patreon image


class ProfileInfo(StrictModel):
    """``/api/profile/{username}/?format=json``"""

    username: str
    profile: Profile
    id: int


class Owner(ProfileInfo):
    """Account owner attached to a player record: a hoyo hash plus profile fields."""

    hash: Hash


class PlayerInfoRecord(CamelModel):
    """``/api/uid/{uid}/?info``"""

    player_info: PlayerInfo
    ttl: int
    uid: str
    owner: Optional[Owner] = None


class PlayerRecord(PlayerInfoRecord):
    """``/api/uid/{uid}/``: the info record plus showcased avatars."""

    avatar_info_list: Optional[list[AvatarInfo]] = None

    def split(self) -> tuple[PlayerInfoRecord, Optional[list[AvatarInfo]]]:
        """Separate the info-only record from the avatar list."""
        info = PlayerInfoRecord(**{name: getattr(self, name) for name in PlayerInfoRecord.model_fields})
        return info, self.avatar_info_list


# -- Hoyos ---------------------------------------------------------------------


class GenshinHoyo(StrictModel):
    uid: Optional[int] = None
    uid_public: bool
    public: bool
    live_public: bool
    verified: bool
    player_info: PlayerInfo
    hash: Hash
    region: Region
    order: int
    avatar_order: Optional[dict[IntKey, int]] = None
    hoyo_type: int


class OtherHoyo(RootModel[dict[str, Any]]):
    """A hoyo for a game not modelled here, kept as the raw JSON object."""

    model_config = ConfigDict(strict=True)

    @property
    def hoyo_type(self) -> Any:
        return self.root.get("hoyo_type")


# hoyo_type 1 and 2 are assumed to be other games; not documented upstream.
HOYO_RESOLVER = VariantResolver(
    "Hoyo",
    path=("hoyo_type",),
    variants={
        0: GenshinHoyo,
        1: OtherHoyo,
        2: OtherHoyo,
    },
)

Hoyo = HOYO_RESOLVER.union()


# -- Builds --------------------------------------------------------------------


class BuildSettings(CamelModel):
    adaptive_color: Optional[bool] = None
    art_source: Optional[str] = None
    caption: Optional[str] = None
    honkard_width: Optional[float] = None
    transform: Optional[Any] = None  # free-form, set by the card editor


class Build(StrictModel):
    id: int
    name: str
    avatar_id: str  # an AvatarId, sent as a string
    avatar_data: AvatarInfo
    order: int
    live: bool
    settings: BuildSettings
    public: bool
    image: Optional[str] = None
    hoyo_type: int
    hoyo: Hash


Hoyos = dict[Hash, Hoyo]
Builds = dict[IntKey, list[Build]]
