from __future__ import annotations

from typing import Optional

import requests

from ..helpers.http import get_session
from .request import Request

DEFAULT_BASE_URL = "https://api.getpostman.com"


class APIClient:
    """Holds what every Postman API request shares: base URL, API key, HTTP session."""

    def __init__(
            self,
            base_url: str = DEFAULT_BASE_URL,
            api_key: str = "",
            session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.session = session if session is not None else get_session()

    def __repr__(self) -> str:
        # never print the key
        return f"<APIClient {self.base_url}>"

    def new_request(self) -> Request:
        return Request(self)
