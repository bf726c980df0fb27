"""CLI commands for fetching enka.network records."""

import argparse
import dataclasses
import json
import logging
import sys

from pydantic_core import to_jsonable_python

from .client import EnkaClient, create_client
from .errors import EnkaError
from .models import GenshinHoyo


def _first_genshin_builds(client: EnkaClient, username: str):
    hoyos = client.get_hoyos(username)
    for hash, hoyo in hoyos.items():
        if isinstance(hoyo, GenshinHoyo):
            return client.get_builds(username, hash)
    raise EnkaError(f"No Genshin hoyos found for {username}")


def _run(args, client: EnkaClient):
    if args.command == "player":
        info, avatars = client.get_player(args.uid, info_only=args.info)
        return {"info": info, "avatars": avatars}
    if args.command == "profile":
        return client.get_profile(args.username)
    if args.command == "hoyos":
        return client.get_hoyos(args.username)
    if args.command == "hoyo":
        return client.get_hoyo(args.username, args.hash)
    if args.command == "builds":
        return client.get_builds(args.username, args.hash)
    if args.command == "build":
        return client.get_build(args.username, args.hash, args.build_id)
    if args.command == "genshin-builds":
        return _first_genshin_builds(client, args.username)
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enka-fetch",
        description="Fetch player, profile and build records from enka.network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="User-Agent header (default: ENKA_USER_AGENT or enka-data-fetcher/<version>)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and decode diagnostics to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    player_parser = subparsers.add_parser("player", help="Fetch a player by UID")
    player_parser.add_argument("uid", type=int, help="In-game UID")
    player_parser.add_argument(
        "--info",
        action="store_true",
        help="Fetch only player info (no avatar details)",
    )

    profile_parser = subparsers.add_parser("profile", help="Fetch an enka.network profile")
    profile_parser.add_argument("username", help="enka.network username")

    hoyos_parser = subparsers.add_parser("hoyos", help="List game accounts linked to a profile")
    hoyos_parser.add_argument("username", help="enka.network username")

    hoyo_parser = subparsers.add_parser("hoyo", help="Fetch one linked game account")
    hoyo_parser.add_argument("username", help="enka.network username")
    hoyo_parser.add_argument("hash", help="Hoyo hash")

    builds_parser = subparsers.add_parser("builds", help="List saved builds for a game account")
    builds_parser.add_argument("username", help="enka.network username")
    builds_parser.add_argument("hash", help="Hoyo hash")

    build_parser_ = subparsers.add_parser("build", help="Fetch a single saved build")
    build_parser_.add_argument("username", help="enka.network username")
    build_parser_.add_argument("hash", help="Hoyo hash")
    build_parser_.add_argument("build_id", type=int, help="Build id")

    genshin_parser = subparsers.add_parser(
        "genshin-builds",
        help="Fetch builds for the first Genshin account linked to a profile",
    )
    genshin_parser.add_argument("username", help="enka.network username")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    client = create_client()
    if args.user_agent:
        client = dataclasses.replace(client, user_agent=args.user_agent)
    try:
        result = _run(args, client)
    except EnkaError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1
    finally:
        client.close()

    json.dump(to_jsonable_python(result, by_alias=True), sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
