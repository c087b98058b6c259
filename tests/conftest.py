"""Shared fixtures: a real requests.Session whose transport is faked in memory."""

from __future__ import annotations

import json

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from postmanctl.client.api_client import APIClient
from postmanctl.helpers.http import get_session


class _BrokenRaw:
    """Stands in for urllib3's response; every read fails."""

    def read(self, *args, **kwargs):
        raise requests.exceptions.ChunkedEncodingError("connection broken mid-body")

    def close(self):
        pass


class FakeAdapter(BaseAdapter):
    """Returns queued canned responses and records every PreparedRequest sent."""

    def __init__(self):
        super().__init__()
        self.sent: list[requests.PreparedRequest] = []
        self.sent_kwargs: list[dict] = []
        self._queue: list = []

    def add(self, status: int = 200, body=None, raw: bytes | None = None) -> None:
        if raw is None:
            raw = b"" if body is None else json.dumps(body).encode("utf-8")
        self._queue.append((status, raw))

    def fail(self, exc: Exception) -> None:
        self._queue.append(exc)

    def add_broken_body(self, status: int = 200) -> None:
        """Queue a response whose body stream fails mid-read."""
        self._queue.append((status, _BrokenRaw()))

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.sent_kwargs.append(kwargs)
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        status, raw = item

        resp = requests.Response()
        resp.status_code = status
        resp.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        if isinstance(raw, _BrokenRaw):
            resp.raw = raw
        else:
            resp._content = raw
            resp._content_consumed = True
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def session(adapter) -> requests.Session:
    s = get_session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


@pytest.fixture
def client(session) -> APIClient:
    return APIClient(base_url="https://api.example.test", api_key="PMAK-test", session=session)
