"""Translation between Backlog issue JSON and canonical bugs"""
import logging
from typing import Any, Dict, Iterable, Optional

from app.models import BacklogIssue, Bug, BugStatus
from app.services.dates import parse_backlog_date

logger = logging.getLogger(__name__)

# Label Backlog shows for a finished issue in a Japanese-locale space.
DEFAULT_CLOSED_LABELS = frozenset({"完了"})


class StatusTable:
    """Exact-match table from Backlog status labels to BugStatus.

    Labels are compared verbatim; anything not listed is OPEN.
    """

    def __init__(self, closed_labels: Optional[Iterable[str]] = None):
        self.closed_labels = frozenset(DEFAULT_CLOSED_LABELS if closed_labels is None else closed_labels)

    def status_for(self, label: Optional[str]) -> BugStatus:
        if label is not None and label in self.closed_labels:
            return BugStatus.CLOSED
        return BugStatus.OPEN


def issue_to_bug(issue_json: Dict[str, Any], status_table: Optional[StatusTable] = None) -> Bug:
    """Convert one Backlog issue object into a Bug"""
    table = status_table or StatusTable()
    issue = BacklogIssue.from_json(issue_json if isinstance(issue_json, dict) else {})

    created_at = parse_backlog_date(issue.created)
    modified_at = parse_backlog_date(issue.updated)
    if issue.created and created_at is None:
        logger.debug(f"Unparseable created timestamp on {issue.issue_key}: {issue.created!r}")
    if issue.updated and modified_at is None:
        logger.debug(f"Unparseable updated timestamp on {issue.issue_key}: {issue.updated!r}")

    return Bug(
        id=issue.issue_key,
        author=issue.author_name,
        priority=issue.priority_name,
        status=table.status_for(issue.status_name),
        title=issue.summary,
        description=issue.description,
        created_at=created_at,
        modified_at=modified_at,
    )


def bug_to_payload(bug: Bug) -> Dict[str, Any]:
    """Minimal create/update body; fields not sent are left unchanged by Backlog"""
    return {
        "issue": {
            "subject": bug.title,
            "description": bug.description,
        }
    }
