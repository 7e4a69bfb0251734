"""Typed view of a Backlog issue JSON object"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class NamedRef(BaseModel):
    """Nested {"name": ...} object (user, status, priority)"""

    name: Optional[str] = None

    class Config:
        extra = "ignore"


class BacklogIssue(BaseModel):
    """Only the keys the translator reads; anything else is ignored"""

    issue_key: Optional[str] = Field(default=None, alias="issueKey")
    created_user: Optional[NamedRef] = Field(default=None, alias="createdUser")
    status: Optional[NamedRef] = None
    priority: Optional[NamedRef] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None

    class Config:
        extra = "ignore"
        populate_by_name = True

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "BacklogIssue":
        """Build from a decoded JSON object, tolerating null or non-object nested refs"""
        def _ref(key: str) -> Optional[NamedRef]:
            value = data.get(key)
            if not isinstance(value, dict):
                return None
            name = value.get("name")
            return NamedRef(name=name if isinstance(name, str) else None)

        def _text(key: str) -> Optional[str]:
            value = data.get(key)
            return value if isinstance(value, str) else None

        return cls(
            issueKey=_text("issueKey"),
            createdUser=_ref("createdUser"),
            status=_ref("status"),
            priority=_ref("priority"),
            summary=_text("summary"),
            description=_text("description"),
            created=_text("created"),
            updated=_text("updated"),
        )

    @property
    def author_name(self) -> Optional[str]:
        return self.created_user.name if self.created_user else None

    @property
    def status_name(self) -> Optional[str]:
        return self.status.name if self.status else None

    @property
    def priority_name(self) -> Optional[str]:
        return self.priority.name if self.priority else None
