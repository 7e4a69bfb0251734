"""Errors raised while syncing a buglist with Backlog.

The transport never raises these; it reports a status code and lets the
orchestrators decide. Each orchestrator raises on the first failure.
"""

from typing import Optional


class BuglistSyncError(Exception):
    """Base class for sync failures"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteUnreachable(BuglistSyncError):
    """A project-level lookup did not answer with 200"""

    def __init__(self, url: str, status_code: Optional[int] = None):
        super().__init__(f"Backlog unreachable at {url} (HTTP {status_code})", status_code)
        self.url = url


class CreateFailed(BuglistSyncError):
    def __init__(self, title: Optional[str], status_code: Optional[int] = None):
        super().__init__(f'Failed to create bug "{title}" (HTTP {status_code})', status_code)
        self.title = title


class UpdateFailed(BuglistSyncError):
    def __init__(self, bug_id: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to update bug {bug_id} (HTTP {status_code})", status_code)
        self.bug_id = bug_id


class DeleteFailed(BuglistSyncError):
    def __init__(self, bug_id: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to delete bug {bug_id} (HTTP {status_code})", status_code)
        self.bug_id = bug_id


class MalformedResponse(BuglistSyncError):
    """A response we needed to parse was missing or had the wrong shape"""

    def __init__(self, url: str, status_code: Optional[int] = None, detail: str = ""):
        message = f"Malformed response from {url} (HTTP {status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, status_code)
        self.url = url
