#!/usr/bin/env python3
"""
Admin tasks from the command line, without the web UI.

Examples:
    python scripts/manage_players.py list
    python scripts/manage_players.py block 5b1c...
    python scripts/manage_players.py activate 5b1c...
    python scripts/manage_players.py create-event --title "5-a-side" --location Park \
        --date 2025-06-01 --from 18:00 --to 19:00
"""

import argparse
import asyncio
import sys
import os
from uuid import UUID

# Add parent dir to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables
from dotenv import load_dotenv
load_dotenv()

from core.domain.errors import EventFormError, RemoteReadError, RemoteWriteError
from adapters.web.loader import new_admin_controller


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Manage players and events",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all players")

    for name, help_text in (("activate", "Unblock a player"), ("block", "Block a player")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("player_id", type=UUID)

    create = sub.add_parser("create-event", help="Create an event")
    create.add_argument("--title", required=True)
    create.add_argument("--location", required=True)
    create.add_argument("--date", dest="event_date", required=True, help="YYYY-MM-DD")
    create.add_argument("--from", dest="time_from", required=True, help="HH:MM")
    create.add_argument("--to", dest="time_to", required=True, help="HH:MM")

    return parser.parse_args()


def print_players(players):
    for p in players:
        status = "✅ active " if p.is_active else "❌ blocked"
        admin = " (admin)" if p.is_admin else ""
        print(f"  {status}  {p.id}  {p.nickname} <{p.email}>{admin}")


async def run(args) -> int:
    admin = new_admin_controller(lang="en")

    if args.command == "list":
        print_players(await admin.load_players())
        return 0

    if args.command in ("activate", "block"):
        players = await admin.set_player_active(args.player_id, args.command == "activate")
        print_players(players)
        return 0

    fields = {
        "title": args.title,
        "location": args.location,
        "event_date": args.event_date,
        "time_from": args.time_from,
        "time_to": args.time_to,
    }
    if await admin.create_event(fields):
        print(f"✅ {admin.message}")
        return 0
    print(f"❌ {admin.error}")
    return 1


def main():
    args = parse_args()
    try:
        sys.exit(asyncio.run(run(args)))
    except EventFormError as e:
        print(f"❌ {e.message}")
        sys.exit(2)
    except (RemoteReadError, RemoteWriteError) as e:
        print(f"❌ {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
