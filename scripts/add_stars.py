#!/usr/bin/env python3
"""
Deposit stars to a uid8 through the running starledger API.

Example:
    python scripts/add_stars.py 00042017 150 \
        --server http://127.0.0.1:3000 \
        --bot-token "$ADMIN__BOT_TOKEN" \
        --password "$ADMIN__PASSWORD"
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import urllib.error
import urllib.request
from typing import Any, Optional


def http_post_json(url: str, payload: dict[str, Any], headers: Optional[dict[str, str]] = None,
                   timeout: int = 30) -> tuple[int, bytes]:
    data = json.dumps(payload).encode("utf-8")
    req_headers = {"Content-Type": "application/json"}
    if headers:
        req_headers.update(headers)
    req = urllib.request.Request(url, data=data, headers=req_headers, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as exc:
        return exc.code, exc.read()


def add_stars(server: str, bot_token: str, password: str, uid8: str, amount: str) -> dict[str, Any]:
    url = server.rstrip("/") + "/api/cli/add-stars"
    print(f"[api] add-stars {url}")
    status, body = http_post_json(
        url,
        {"botToken": bot_token, "password": password, "uid8": uid8, "amount": amount},
        timeout=15,
    )
    try:
        data = json.loads(body.decode("utf-8"))
    except ValueError:
        raise SystemExit(f"add-stars failed: {status} {body.decode(errors='ignore')}")
    if status != 200 or not data.get("ok"):
        raise SystemExit(f"add-stars failed: {status} {data.get('error')}: {data.get('message')}")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deposit stars to a uid8")
    parser.add_argument("uid8", help="8-digit handle to credit")
    parser.add_argument("amount", help="Positive number of stars")
    parser.add_argument("--server", default="http://127.0.0.1:3000", help="starledger base URL")
    parser.add_argument(
        "--bot-token",
        default=os.environ.get("ADMIN__BOT_TOKEN", ""),
        help="Bot token (defaults to $ADMIN__BOT_TOKEN)",
    )
    parser.add_argument(
        "--password",
        default=os.environ.get("ADMIN__PASSWORD", ""),
        help="Admin password (defaults to $ADMIN__PASSWORD)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if not args.bot_token or not args.password:
        raise SystemExit("bot token and password are required")

    result = add_stars(args.server, args.bot_token, args.password, args.uid8, args.amount)

    print(f"[done] +{result['added']} stars for uid8 {result['uid8']} -> {result['newBalance']}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit("aborted by user")
