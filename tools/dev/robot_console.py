#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Robot Grid API — Dev console client
-----------------------------------
Command line tool for driving a running server over HTTP.

Examples:

    python3 tools/dev/robot_console.py status 1
    python3 tools/dev/robot_console.py move 1 up
    python3 tools/dev/robot_console.py pickup 1 2
    python3 tools/dev/robot_console.py putdown 1 2
    python3 tools/dev/robot_console.py state 1 --energy 90 --x 3 --y -2
    python3 tools/dev/robot_console.py actions 1 --page 2 --size 5
    python3 tools/dev/robot_console.py attack 1 2
    python3 tools/dev/robot_console.py item 2

The JSON response is pretty-printed. Exit code is 0 on 2xx, 1 on HTTP
errors and 2 when the server cannot be reached.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional, Tuple

import requests

DEFAULT_SERVER = "http://127.0.0.1:3000"
DEFAULT_TIMEOUT_S = 5.0


# ---------------------------------------------------------------------------
# CLI argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Robot Grid API — Dev console client",
    )
    parser.add_argument(
        "--server",
        type=str,
        default=DEFAULT_SERVER,
        help=f"Base URL of the server (default: {DEFAULT_SERVER})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT_S})",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("status", help="Show robot status")
    p.add_argument("robot_id", type=int)

    p = sub.add_parser("move", help="Move a robot one cell")
    p.add_argument("robot_id", type=int)
    p.add_argument("direction", choices=["up", "down", "left", "right"])

    p = sub.add_parser("pickup", help="Pick up an item")
    p.add_argument("robot_id", type=int)
    p.add_argument("item_id", type=int)

    p = sub.add_parser("putdown", help="Put down a held item")
    p.add_argument("robot_id", type=int)
    p.add_argument("item_id", type=int)

    p = sub.add_parser("state", help="Overwrite energy and/or position")
    p.add_argument("robot_id", type=int)
    p.add_argument("--energy", type=int, default=None)
    p.add_argument("--x", type=int, default=None)
    p.add_argument("--y", type=int, default=None)

    p = sub.add_parser("actions", help="List a page of the action log")
    p.add_argument("robot_id", type=int)
    p.add_argument("--page", type=int, default=None)
    p.add_argument("--size", type=int, default=None)

    p = sub.add_parser("attack", help="Attack another robot")
    p.add_argument("robot_id", type=int)
    p.add_argument("target_id", type=int)

    p = sub.add_parser("item", help="Show where an item is")
    p.add_argument("item_id", type=int)

    return parser


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------


def build_request(args: argparse.Namespace) -> Tuple[str, str, Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    """
    Map parsed arguments to (method, path, json body, query params).

    Raises ValueError for argument combinations the server would reject
    anyway (e.g. `state` without any field, or only one coordinate).
    """
    cmd = args.command

    if cmd == "status":
        return "GET", f"/robot/{args.robot_id}/status", None, None
    if cmd == "move":
        return "POST", f"/robot/{args.robot_id}/move", {"direction": args.direction}, None
    if cmd == "pickup":
        return "POST", f"/robot/{args.robot_id}/pickup/{args.item_id}", None, None
    if cmd == "putdown":
        return "POST", f"/robot/{args.robot_id}/putdown/{args.item_id}", None, None
    if cmd == "attack":
        return "POST", f"/robot/{args.robot_id}/attack/{args.target_id}", None, None
    if cmd == "item":
        return "GET", f"/items/{args.item_id}", None, None

    if cmd == "state":
        body: Dict[str, Any] = {}
        if args.energy is not None:
            body["energy"] = args.energy
        if (args.x is None) != (args.y is None):
            raise ValueError("--x and --y must be given together")
        if args.x is not None:
            body["position"] = {"x": args.x, "y": args.y}
        if not body:
            raise ValueError("state needs --energy and/or --x/--y")
        return "PATCH", f"/robot/{args.robot_id}/state", body, None

    if cmd == "actions":
        params: Dict[str, Any] = {}
        if args.page is not None:
            params["page"] = args.page
        if args.size is not None:
            params["size"] = args.size
        return "GET", f"/robot/{args.robot_id}/actions", None, params or None

    raise ValueError(f"Unknown command: {cmd}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        method, path, body, params = build_request(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    url = args.server.rstrip("/") + path
    try:
        resp = requests.request(method, url, json=body, params=params, timeout=args.timeout)
    except requests.RequestException as exc:
        print(f"Connection error: {exc}", file=sys.stderr)
        return 2

    try:
        data = resp.json()
    except ValueError:
        print(f"[{resp.status_code}] Raw response (not JSON): {resp.text}")
    else:
        print(f"[{resp.status_code}] {method} {path}")
        print(json.dumps(data, indent=2))

    return 0 if resp.ok else 1


if __name__ == "__main__":
    sys.exit(main())
