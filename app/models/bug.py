"""Canonical bug record and buglist"""
import enum
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class BugStatus(str, enum.Enum):
    """Two-valued bug status"""
    OPEN = "open"
    CLOSED = "closed"


class PendingOperation(str, enum.Enum):
    """What send_buglist does with a record"""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Bug(BaseModel):
    """One issue in the host's normalized form.

    ``id`` is the remote issue key and is set only for bugs that exist on
    Backlog. ``delete`` is a tag the host sets before submitting a batch; it
    is never read from or sent to Backlog.
    """

    id: Optional[str] = None
    author: Optional[str] = None
    priority: Optional[str] = None
    status: BugStatus = BugStatus.OPEN
    title: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    delete: bool = False

    class Config:
        frozen = True

    @property
    def pending_operation(self) -> Optional[PendingOperation]:
        """Operation implied by id and delete tag (None for a deleted local-only bug)"""
        if self.id is None:
            return None if self.delete else PendingOperation.CREATE
        if self.delete:
            return PendingOperation.DELETE
        return PendingOperation.UPDATE

    def marked_for_delete(self) -> "Bug":
        """Return a copy carrying the delete tag"""
        return self.model_copy(update={"delete": True})


class Buglist(BaseModel):
    """Titled, ordered collection of bugs fetched from one project"""

    title: str
    url: str
    bugs: List[Bug] = []

    class Config:
        frozen = True


class BugBatch(BaseModel):
    """Bugs submitted by the host for reconciliation"""

    bugs: List[Bug] = []


class SendResult(BaseModel):
    """Bugs as Backlog holds them after a reconciliation"""

    bugs: List[Bug] = []
