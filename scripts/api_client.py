"""Lightweight REST client for the pybanker API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def _print(resp: httpx.Response) -> None:
    print(json.dumps(resp.json(), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pybanker REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--list-courses", action="store_true", help="List available courses and exit")
    parser.add_argument("--new-game", type=Path, metavar="JSON", help="Create a game from a request JSON file")
    parser.add_argument("--game", metavar="GAME_ID", help="Game to act on")
    parser.add_argument("--save-hole", type=Path, metavar="JSON", help="Save the current hole from a request JSON file")
    parser.add_argument("--previous", action="store_true", help="Step the game back one hole")
    parser.add_argument("--summary", action="store_true", help="Print the game summary")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_courses:
            resp = client.get("/courses")
            resp.raise_for_status()
            _print(resp)
            return

        if args.new_game:
            payload = json.loads(args.new_game.read_text(encoding="utf-8"))
            resp = client.post("/games", json=payload)
            if resp.status_code >= 400:
                raise SystemExit(f"game rejected: {resp.json().get('detail')}")
            _print(resp)
            return

        if not args.game:
            raise SystemExit("--game is required for hole, navigation and summary commands")

        if args.save_hole:
            payload = json.loads(args.save_hole.read_text(encoding="utf-8"))
            resp = client.post(f"/games/{args.game}/holes", json=payload)
            if resp.status_code == 404:
                raise SystemExit(f"game {args.game} not found")
            if resp.status_code >= 400:
                raise SystemExit(f"hole rejected: {resp.json().get('detail')}")
            _print(resp)
        if args.previous:
            resp = client.post(f"/games/{args.game}/previous")
            resp.raise_for_status()
            _print(resp)
        if args.summary:
            resp = client.get(f"/games/{args.game}/summary")
            if resp.status_code == 404:
                raise SystemExit(f"game {args.game} not found")
            resp.raise_for_status()
            _print(resp)


if __name__ == "__main__":
    main()
