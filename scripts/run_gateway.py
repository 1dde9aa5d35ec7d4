#!/usr/bin/env python3
"""Invoke the Luas gateway Lambda locally."""

from __future__ import annotations

import argparse
import json
import logging
import uuid
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from gateway.handler import lambda_handler

QUERY_PARAMETERS = ("ver", "action", "station", "from", "to", "adults", "children")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the Luas gateway Lambda locally with query string parameters."
    )
    parser.add_argument(
        "--event",
        help="Path to a JSON file containing a full API Gateway proxy event.",
    )
    for name in QUERY_PARAMETERS:
        parser.add_argument(f"--{name}", dest=f"param_{name}", help=f"Value for ?{name}=")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level.")
    return parser.parse_args(argv)


def build_event(args: argparse.Namespace) -> dict[str, Any]:
    if args.event:
        with Path(args.event).open("r", encoding="utf-8") as handle:
            return json.load(handle)
    params = {
        name: getattr(args, f"param_{name}")
        for name in QUERY_PARAMETERS
        if getattr(args, f"param_{name}") is not None
    }
    return {
        "queryStringParameters": params or None,
        "requestContext": {"requestId": f"local-{uuid.uuid4()}"},
    }


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    response = lambda_handler(build_event(args), None)
    body = response["body"]
    try:
        rendered: Any = json.loads(body)
    except json.JSONDecodeError:
        rendered = body
    print(json.dumps({"statusCode": response["statusCode"], "body": rendered}, indent=2))


if __name__ == "__main__":
    main()
