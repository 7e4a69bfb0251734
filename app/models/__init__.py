"""Data models"""

from app.models.bug import Bug, BugBatch, Buglist, BugStatus, PendingOperation, SendResult
from app.models.issue import BacklogIssue, NamedRef

__all__ = [
    "Bug",
    "BugBatch",
    "Buglist",
    "BugStatus",
    "PendingOperation",
    "SendResult",
    "BacklogIssue",
    "NamedRef",
]
