import os
from typing import Optional

from .string import stripped

API_KEY_HEADER = "X-API-Key"
API_KEY_ENV = "POSTMAN_API_KEY"
BASE_URL_ENV = "POSTMAN_API_BASE_URL"


# ---------- Static API key ----------
def resolve_api_key(explicit: Optional[str] = None) -> Optional[str]:
    """Return the API key from the explicit value, else from $POSTMAN_API_KEY.

    Blank values count as unset.
    """
    return stripped(explicit) or stripped(os.getenv(API_KEY_ENV))


def resolve_base_url(explicit: Optional[str], default: str) -> str:
    """Return the explicit base URL, else $POSTMAN_API_BASE_URL, else default."""
    return stripped(explicit) or stripped(os.getenv(BASE_URL_ENV)) or default


def api_key_headers(api_key: str) -> dict:
    return {API_KEY_HEADER: api_key}
