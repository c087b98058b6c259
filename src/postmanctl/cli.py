from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence, Tuple

import requests

from .client.api_client import DEFAULT_BASE_URL, APIClient
from .client.request import RequestError
from .helpers.auth import API_KEY_ENV, resolve_api_key, resolve_base_url
from .resources import (
    APIListItems,
    CollectionListItems,
    EnvironmentListItems,
    MockListItems,
    MonitorListItems,
    User,
    WorkspaceListItems,
)

# resource name -> (API path, decode target)
RESOURCES: Dict[str, Tuple[str, Any]] = {
    "collections": ("collections", CollectionListItems),
    "environments": ("environments", EnvironmentListItems),
    "mocks": ("mocks", MockListItems),
    "monitors": ("monitors", MonitorListItems),
    "workspaces": ("workspaces", WorkspaceListItems),
    "apis": ("apis", APIListItems),
    "user": ("me", User),
}


# ---------- Logging ----------

def enable_logging(level: int = logging.INFO) -> None:
    """Configure root logger with a simple, useful format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


# ---------- CLI ----------

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="postmanctl",
        description="Query the Postman API.",
    )
    ap.add_argument(
        "--api-key",
        help=f"Postman API key (default: ${API_KEY_ENV}).",
    )
    ap.add_argument(
        "--base-url",
        help=f"Postman API base URL (default: $POSTMAN_API_BASE_URL or {DEFAULT_BASE_URL}).",
    )
    ap.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every request at DEBUG level.",
    )

    sub = ap.add_subparsers(dest="command", required=True)
    get = sub.add_parser("get", help="List a Postman resource.")
    get.add_argument("resource", choices=sorted(RESOURCES))
    get.add_argument(
        "-o", "--output",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table).",
    )
    return ap.parse_args(argv)


def _format_table(result: Any) -> str:
    if isinstance(result, User):
        return "\n".join([
            f"ID        {result.id}",
            f"USERNAME  {result.username}",
            f"EMAIL     {result.email}",
            f"NAME      {result.full_name}",
        ])

    lines = [f"{'UID':<45} NAME"]
    for item in result:
        lines.append(f"{item.uid or item.id:<45} {item.name}")
    return "\n".join(lines)


def _format_json(result: Any) -> str:
    return json.dumps(asdict(result), indent=2)


def fetch(client: APIClient, resource: str) -> Any:
    """GET one resource listing and return its decoded object."""
    path, target = RESOURCES[resource]
    req = client.new_request().get().resource(path).as_(target)
    req.do()
    return req.output


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.getLogger("postmanctl").setLevel(logging.DEBUG)

    api_key = resolve_api_key(args.api_key)
    if not api_key:
        logging.error("No API key. Pass --api-key or set %s.", API_KEY_ENV)
        raise SystemExit(2)

    client = APIClient(
        base_url=resolve_base_url(args.base_url, DEFAULT_BASE_URL),
        api_key=api_key,
    )

    try:
        result = fetch(client, args.resource)
    except RequestError as e:
        logging.error("Postman API error: %s", e)
        raise SystemExit(1)
    except requests.RequestException as e:
        logging.error("Request to %s failed: %s", client.base_url, e)
        raise SystemExit(1)

    if result is None:
        logging.error("Empty or non-JSON response for %s.", args.resource)
        raise SystemExit(1)

    if args.output == "json":
        print(_format_json(result))
    else:
        print(_format_table(result))


def run() -> None:
    """Console entry point: set up logging, then run the CLI."""
    enable_logging()
    main()


if __name__ == "__main__":
    run()
