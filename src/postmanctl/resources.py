from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _text(val: Any) -> str:
    """str(val), with None as the empty string."""
    return "" if val is None else str(val)


# =============================================================================
# Errors
# =============================================================================


@dataclass
class ErrorDetail:
    name: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ErrorDetail":
        data = data if isinstance(data, dict) else {}
        return cls(
            name=_text(data.get("name")),
            message=_text(data.get("message")),
        )


@dataclass
class ErrorResponse:
    """Body of a non-2xx Postman API response: {"error": {"name", "message"}}."""

    error: ErrorDetail = field(default_factory=ErrorDetail)

    @classmethod
    def from_dict(cls, data: Any) -> "ErrorResponse":
        if not isinstance(data, dict):
            return cls()
        return cls(error=ErrorDetail.from_dict(data.get("error")))


# =============================================================================
# List endpoints
# =============================================================================


@dataclass
class ListItem:
    """One entry of a list endpoint. Missing keys decode as empty strings."""

    id: str = ""
    name: str = ""
    uid: str = ""
    owner: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ListItem":
        return cls(
            id=_text(data.get("id")),
            name=_text(data.get("name")),
            uid=_text(data.get("uid")),
            owner=_text(data.get("owner")),
        )


@dataclass
class _ListItems:
    # Name of the JSON array on the response, set per subclass.
    KEY = ""

    items: List[ListItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        rows = (data or {}).get(cls.KEY) or []
        return cls(items=[ListItem.from_dict(r) for r in rows if isinstance(r, dict)])

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class CollectionListItems(_ListItems):
    KEY = "collections"


class EnvironmentListItems(_ListItems):
    KEY = "environments"


class MockListItems(_ListItems):
    KEY = "mocks"


class MonitorListItems(_ListItems):
    KEY = "monitors"


class WorkspaceListItems(_ListItems):
    KEY = "workspaces"


class APIListItems(_ListItems):
    KEY = "apis"


# =============================================================================
# User
# =============================================================================


@dataclass
class User:
    """The authenticated user, from GET /me."""

    id: str = ""
    username: str = ""
    email: str = ""
    full_name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        user = (data or {}).get("user") or {}
        return cls(
            id=_text(user.get("id")),
            username=_text(user.get("username")),
            email=_text(user.get("email")),
            full_name=_text(user.get("fullName")),
        )
