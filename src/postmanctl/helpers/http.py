from typing import Any, Optional

import requests

USER_AGENT = "postmanctl"


# ---------- HTTP helpers ----------
def get_session(user_agent: str = USER_AGENT) -> requests.Session:
    """Return a fresh Session that sends JSON Accept and our User-Agent."""
    session = requests.Session()
    session.headers.update({
        "Accept": "application/json",
        "User-Agent": user_agent,
    })
    return session


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def try_read_json(resp: requests.Response) -> Optional[Any]:
    """Decode the body as JSON; returns None if the body is empty or not JSON.

    Errors raised while reading the body itself still propagate.
    """
    body = resp.content
    if not body:
        return None
    try:
        return resp.json()
    except ValueError:
        return None
