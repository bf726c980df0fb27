"""Shared payload fixtures shaped like real enka.network responses.

Each fixture returns a fresh dict, so tests may mutate it freely.
"""

import httpx
import pytest


@pytest.fixture
def player_info_json():
    return {
        "nickname": "Traveler",
        "level": 60,
        "signature": "hi",
        "worldLevel": 8,
        "nameCardId": 210001,
        "finishAchievementNum": 900,
        "towerFloorIndex": 12,
        "towerLevelIndex": 3,
        "showAvatarInfoList": [{"avatarId": 10000002, "level": 90, "energyType": 1}],
        "showNameCardIdList": [210001],
        "profilePicture": {"id": 1},
    }


@pytest.fixture
def weapon_json():
    return {
        "itemId": 11509,
        "weapon": {"level": 90, "promoteLevel": 6, "affixMap": {"111509": 0}},
        "flat": {
            "nameTextMapHash": "1075647299",
            "rankLevel": 5,
            "itemType": "ITEM_WEAPON",
            "icon": "UI_EquipIcon_Sword_Narukami",
            "weaponStats": [
                {"appendPropId": "FIGHT_PROP_BASE_ATTACK", "statValue": 608},
                {"appendPropId": "FIGHT_PROP_CRITICAL", "statValue": 33.1},
            ],
        },
    }


@pytest.fixture
def reliquary_json():
    return {
        "itemId": 76544,
        "reliquary": {
            "level": 21,
            "mainPropId": 14001,
            "appendPropIdList": [501204, 501054],
        },
        "flat": {
            "nameTextMapHash": "4022284955",
            "setNameTextMapHash": "1562601179",
            "rankLevel": 5,
            "reliquaryMainstat": {"mainPropId": "FIGHT_PROP_HP", "statValue": 4780},
            "reliquarySubstats": [{"appendPropId": "FIGHT_PROP_CRITICAL", "statValue": 7.0}],
            "itemType": "ITEM_RELIQUARY",
            "icon": "UI_RelicIcon_15020_4",
            "equipType": "EQUIP_BRACER",
        },
    }


@pytest.fixture
def avatar_json(weapon_json, reliquary_json):
    return {
        "avatarId": 10000002,
        "propMap": {
            "4001": {"type": 4001, "ival": "90", "val": "90"},
            "1002": {"type": 1002, "ival": "6", "val": "6"},
        },
        "talentIdList": [21, 22],
        "fightPropMap": {"1": 12858.0, "2000": 20000.5},
        "skillDepotId": 201,
        "inherentProudSkillList": [22101, 22301],
        "skillLevelMap": {"10024": 9, "10018": 10},
        "equipList": [reliquary_json, weapon_json],
        "fetterInfo": {"expLevel": 10},
    }


@pytest.fixture
def profile_json():
    return {
        "username": "algoinde",
        "profile": {"bio": "", "level": 1, "avatar": None, "image_url": None},
        "id": 4,
    }


@pytest.fixture
def player_json(player_info_json, profile_json, avatar_json):
    return {
        "playerInfo": player_info_json,
        "ttl": 60,
        "uid": "12345",
        "owner": {"hash": "4Wjv2e", **profile_json},
        "avatarInfoList": [avatar_json],
    }


@pytest.fixture
def player_info_record_json(player_json):
    player_json.pop("avatarInfoList")
    return player_json


@pytest.fixture
def genshin_hoyo_json(player_info_json):
    return {
        "uid": 12345,
        "uid_public": True,
        "public": True,
        "live_public": False,
        "verified": True,
        "player_info": player_info_json,
        "hash": "4Wjv2e",
        "region": "EU",
        "order": 0,
        "avatar_order": {"10000002": 0},
        "hoyo_type": 0,
    }


@pytest.fixture
def other_hoyo_json():
    return {
        "uid": 700000001,
        "hash": "k8Pq1Z",
        "hoyo_type": 1,
        "player_info": {"nickname": "Trailblazer", "level": 70},
        "region": "EU",
    }


@pytest.fixture
def build_json(avatar_json):
    return {
        "id": 1918,
        "name": "Main DPS",
        "avatar_id": "10000002",
        "avatar_data": avatar_json,
        "order": 0,
        "live": False,
        "settings": {"adaptiveColor": True, "caption": "", "transform": {"x": 1, "y": [0.5]}},
        "public": True,
        "image": None,
        "hoyo_type": 0,
        "hoyo": "4Wjv2e",
    }


@pytest.fixture
def mock_http():
    """An httpx.Client routed to a MockTransport.

    Set ``mock_http.responder`` to a callable ``request -> httpx.Response``.
    Every request sent is recorded in ``mock_http.requests``.
    """
    requests = []

    def handler(request):
        requests.append(request)
        return client.responder(request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    client.requests = requests
    client.responder = lambda request: httpx.Response(404, json={"error": "unset"})
    yield client
    client.close()
