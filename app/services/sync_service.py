"""Buglist synchronization service"""

import logging
from typing import Iterable, List, Optional

from app.exceptions import (
    CreateFailed,
    DeleteFailed,
    MalformedResponse,
    RemoteUnreachable,
    UpdateFailed,
)
from app.models import Bug, Buglist, PendingOperation, SendResult
from app.services.backlog_client import BacklogClient
from app.services.project_context import ProjectContext, resolve_project_id
from app.services.translator import StatusTable, bug_to_payload, issue_to_bug
from app.services.urls import issue_url, normalize_base_url, project_name

logger = logging.getLogger(__name__)


class BuglistSyncService:
    """Fetches a Backlog project as a buglist and replays local changes against it"""

    def __init__(
        self,
        base_url: str,
        client: BacklogClient,
        context: Optional[ProjectContext] = None,
        status_table: Optional[StatusTable] = None,
    ):
        self.base_url = normalize_base_url(base_url)
        self.client = client
        self.context = context if context is not None else ProjectContext()
        self.status_table = status_table or StatusTable()

    @classmethod
    def from_settings(cls, settings, context: Optional[ProjectContext] = None) -> "BuglistSyncService":
        if not settings.backlog_url:
            raise ValueError("BACKLOG_URL is not configured")
        return cls(
            settings.backlog_url,
            BacklogClient.from_settings(settings),
            context=context,
            status_table=StatusTable(settings.closed_labels()),
        )

    @staticmethod
    def base_url_for(raw_url: str) -> str:
        """Normalize a user-entered project URL"""
        return normalize_base_url(raw_url)

    def _remote_bug(self, url: str, status: int, issue) -> Bug:
        """Translate an issue Backlog returned; it must carry its issueKey"""
        if not isinstance(issue, dict):
            raise MalformedResponse(url, status, "issue is not a JSON object")
        key = issue.get("issueKey")
        if not isinstance(key, str) or not key:
            raise MalformedResponse(url, status, "issue has no issueKey")
        return issue_to_bug(issue, self.status_table)

    def _issue_from(self, url: str, status: int, data) -> Bug:
        issue = data.get("issue") if isinstance(data, dict) else None
        if issue is None:
            raise MalformedResponse(url, status, "missing issue object")
        return self._remote_bug(url, status, issue)

    def fetch_buglist(self, since=None) -> Buglist:
        """Fetch every issue of the project.

        ``since`` is the host's last-update hint; it is accepted and ignored,
        the whole issue set is fetched each time.
        """
        url = f"{self.base_url}/issues"
        status, data = self.client.get(url)
        if status != 200:
            logger.error(f"Failed to fetch issues from {url}: HTTP {status}")
            raise RemoteUnreachable(url, status)
        if not isinstance(data, list):
            logger.error(f"Issue list from {url} is not a JSON array")
            raise MalformedResponse(url, status, "expected a JSON array of issues")

        bugs = [self._remote_bug(url, status, issue) for issue in data]
        logger.info(f"Fetched {len(bugs)} issues from {self.base_url}")
        return Buglist(
            title=f"Issues of {project_name(self.base_url)}",
            url=self.base_url,
            bugs=bugs,
        )

    def _create(self, bug: Bug) -> Bug:
        url = f"{self.base_url}/issues.json"
        status, data = self.client.post(url, bug_to_payload(bug))
        if status != 201:
            logger.error(f"Failed to create bug {bug.title!r}: HTTP {status}")
            raise CreateFailed(bug.title, status)
        created = self._issue_from(url, status, data)
        logger.info(f"Created bug {created.id} ({bug.title!r})")
        return created

    def _delete(self, bug: Bug) -> None:
        url = issue_url(self.base_url, bug.id)
        status, _ = self.client.delete(url)
        # 404: already gone, which is what we wanted
        if status not in (204, 404):
            logger.error(f"Failed to delete bug {bug.id}: HTTP {status}")
            raise DeleteFailed(bug.id, status)
        logger.info(f"Deleted bug {bug.id}")

    def _update(self, bug: Bug) -> Bug:
        url = issue_url(self.base_url, bug.id)
        status, _ = self.client.put(url, bug_to_payload(bug))
        if status != 200:
            logger.error(f"Failed to update bug {bug.id}: HTTP {status}")
            raise UpdateFailed(bug.id, status)

        # The PUT response may not carry the whole issue; read it back.
        status, data = self.client.get(url)
        if status != 200:
            logger.error(f"Failed to re-read bug {bug.id} after update: HTTP {status}")
            raise UpdateFailed(bug.id, status)
        updated = self._issue_from(url, status, data)
        logger.info(f"Updated bug {bug.id}")
        return updated

    def send_buglist(self, bugs: Iterable[Bug]) -> SendResult:
        """Replay creates, updates and deletes in order.

        Stops at the first failure. Changes already applied on Backlog stay
        applied and are not rolled back.
        """
        bugs = list(bugs)
        resolve_project_id(self.client, self.base_url, self.context)

        results: List[Bug] = []
        for bug in bugs:
            op = bug.pending_operation
            if op is None:
                logger.debug(f"Skipping deleted local-only bug {bug.title!r}")
            elif op == PendingOperation.CREATE:
                results.append(self._create(bug))
            elif op == PendingOperation.DELETE:
                self._delete(bug)
            else:
                results.append(self._update(bug))

        return SendResult(bugs=results)
