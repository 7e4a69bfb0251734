"""Project id lookup and per-session cache"""
import logging
from typing import Dict, Optional

from app.exceptions import MalformedResponse, RemoteUnreachable
from app.services.backlog_client import BacklogClient

logger = logging.getLogger(__name__)


class ProjectContext:
    """Resolved numeric project ids for one sync session, keyed by project base URL.

    Owned by the caller; entries never expire within the session.
    """

    def __init__(self):
        self._project_ids: Dict[str, int] = {}

    def get(self, base_url: str) -> Optional[int]:
        return self._project_ids.get(base_url)

    def set(self, base_url: str, project_id: int) -> None:
        self._project_ids[base_url] = project_id

    def __contains__(self, base_url: str) -> bool:
        return base_url in self._project_ids


def resolve_project_id(client: BacklogClient, base_url: str, context: ProjectContext) -> int:
    """Look up the numeric project id once per session"""
    cached = context.get(base_url)
    if cached is not None:
        return cached

    url = f"{base_url}.json"
    status, data = client.get(url)
    if status != 200:
        logger.error(f"Failed to resolve project for {base_url}: HTTP {status}")
        raise RemoteUnreachable(url, status)

    project = data.get("project") if isinstance(data, dict) else None
    project_id = project.get("id") if isinstance(project, dict) else None
    if project_id is None:
        raise MalformedResponse(url, status, "missing project.id")

    try:
        project_id = int(project_id)
    except (TypeError, ValueError):
        raise MalformedResponse(url, status, f"non-numeric project.id {project_id!r}")
    context.set(base_url, project_id)
    logger.info(f"Resolved project {base_url} to id {project_id}")
    return project_id
