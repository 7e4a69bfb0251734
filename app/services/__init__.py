"""Services"""

from app.services.backlog_client import BacklogClient
from app.services.project_context import ProjectContext, resolve_project_id
from app.services.sync_service import BuglistSyncService

__all__ = ["BacklogClient", "BuglistSyncService", "ProjectContext", "resolve_project_id"]
