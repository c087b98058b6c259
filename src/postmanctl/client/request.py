from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, Union
from urllib.parse import urlsplit, urlunsplit

import requests
from requests.structures import CaseInsensitiveDict

from ..helpers.auth import api_key_headers
from ..helpers.http import is_success, try_read_json
from ..helpers.string import clean_path
from ..resources import ErrorResponse

if TYPE_CHECKING:
    from .api_client import APIClient

log = logging.getLogger(__name__)

# A decode target: a class with from_dict(), or any callable taking the JSON value.
Target = Union[type, Callable[[Any], Any]]


# =============================================================================
# Errors
# =============================================================================

class RequestError(Exception):
    """A non-2xx response from the Postman API."""

    def __init__(self, status_code: int, name: str = "", message: str = ""):
        self.status_code = status_code
        self.name = name
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"status code: {self.status_code}, name: {self.name}, message: {self.message}"

    @classmethod
    def from_response(cls, resp: requests.Response) -> "RequestError":
        """
        Build the error from a response's JSON error body.
        A body that is empty or not JSON gives empty name/message.
        """
        data = try_read_json(resp)
        if data is None:
            log.warning("Unparseable error body (status %s) from %s", resp.status_code, resp.url)
        err = ErrorResponse.from_dict(data).error
        return cls(resp.status_code, err.name, err.message)


def _decode(target: Target, data: Any) -> Any:
    from_dict = getattr(target, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    return target(data)


# =============================================================================
# Request builder
# =============================================================================

class Request:
    """
    One Postman API call, built fluently and executed with do():

        req = client.new_request().get().resource("collections").as_(CollectionListItems)
        req.do()
        req.output  # -> CollectionListItems
    """

    def __init__(self, client: "APIClient"):
        self._client = client
        self._method = "GET"
        self._resource = ""
        self._target: Optional[Target] = None
        self._timeout: Optional[float] = None
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict(api_key_headers(client.api_key))
        self.output: Any = None

    def __repr__(self) -> str:
        return f"<Request {self._method} {self.url()}>"

    # ---------- builder ----------

    def method(self, m: str) -> "Request":
        self._method = (m or "GET").upper()
        return self

    def get(self) -> "Request":
        return self.method("GET")

    def resource(self, *parts: str) -> "Request":
        self._resource = clean_path(*parts)
        return self

    def as_(self, target: Target) -> "Request":
        self._target = target
        return self

    def header(self, name: str, value: str) -> "Request":
        self.headers[name] = value
        return self

    def timeout(self, seconds: Optional[float]) -> "Request":
        self._timeout = seconds
        return self

    # ---------- execution ----------

    def url(self) -> str:
        """Base URL of the client with its path replaced by the resource path."""
        base = urlsplit(self._client.base_url or "")
        path = self._resource
        if base.netloc and path and not path.startswith("/"):
            path = "/" + path
        return urlunsplit((base.scheme, base.netloc, path, base.query, base.fragment))

    def do(self) -> requests.Response:
        """
        Execute the request.

        Raises:
            RequestError on a non-2xx status.
            requests.RequestException on transport or body-read failures.

        A 2xx body that is empty or not JSON leaves output as None.
        """
        url = self.url()
        log.debug("%s %s", self._method, url)

        resp = self._client.session.request(
            self._method,
            url,
            headers=dict(self.headers),
            timeout=self._timeout,
        )
        log.debug("%s %s -> %s", self._method, url, resp.status_code)

        if not is_success(resp.status_code):
            try:
                raise RequestError.from_response(resp)
            finally:
                resp.close()

        if self._target is not None:
            try:
                self.output = self._decode_body(resp)
            finally:
                resp.close()

        return resp

    def _decode_body(self, resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError:
            log.warning("Non-JSON body (status %s) from %s; output left empty", resp.status_code, resp.url)
            return None
        return _decode(self._target, data)
